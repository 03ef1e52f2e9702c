# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the lesson catalog."""

import pytest

from primer.lessons import LESSONS, UnknownLessonError, get_lesson, lesson_slugs, run_lessons


def test_catalog_order() -> None:
    assert lesson_slugs() == [
        "functions",
        "closures",
        "basic-enum",
        "raw-value-enum",
        "associated-value-enum",
        "value-vs-reference",
        "struct",
    ]


def test_slugs_are_unique() -> None:
    assert len(set(lesson_slugs())) == len(LESSONS)


def test_get_lesson() -> None:
    lesson = get_lesson("closures")
    assert lesson.title == "Closures"
    assert lesson.summary


def test_get_unknown_lesson() -> None:
    with pytest.raises(UnknownLessonError, match="Unknown lesson 'generics'"):
        get_lesson("generics")


def test_run_all_lessons_in_order() -> None:
    outputs = run_lessons()
    assert [output.lesson.slug for output in outputs] == lesson_slugs()
    assert all(output.lines for output in outputs)


def test_run_selected_lessons() -> None:
    outputs = run_lessons(["struct", "functions"])
    assert [output.lesson.slug for output in outputs] == ["struct", "functions"]


def test_unknown_slug_runs_nothing() -> None:
    with pytest.raises(UnknownLessonError):
        run_lessons(["functions", "nope"])


def test_functions_lesson_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Printed output is collected into the lesson lines instead of leaking to stdout."""
    lines = get_lesson("functions").run()
    assert "Good bye, kool friend." in lines
    assert "Tho Dang has been trained in the Force 100 times" in lines
    assert lines[-2:] == ["pink", "purple"]
    assert capsys.readouterr().out == ""


def test_closures_lesson_output() -> None:
    lines = get_lesson("closures").run()
    assert "7000" in lines
    assert "36" in lines
    assert "6" in lines
    assert "counter after two calls: 2" in lines
    assert "live capture: May the Dark Side be with you." in lines


def test_basic_enum_lesson_output() -> None:
    assert "Tho is running to East Direction" in get_lesson("basic-enum").run()


def test_raw_value_enum_lesson_output() -> None:
    lines = get_lesson("raw-value-enum").run()
    assert "Title.from_raw('not a valid title') = None" in lines
    assert "SATURN = 101" in lines


def test_associated_value_enum_lesson_output() -> None:
    assert get_lesson("associated-value-enum").run() == [
        "UPC-A: 0, 33444, 3",
        "QR code: www.barcode.com",
    ]


def test_value_vs_reference_lesson_output() -> None:
    lines = get_lesson("value-vs-reference").run()
    assert lines[:3] == [
        "ReferenceArray is a reference type",
        "array1: [5, 8, 2, 10]",
        "array2: [5, 8, 2, 10]",
    ]
    assert lines[3:6] == [
        "ValueArray is a value type",
        "array1: [5, 8, 2, 10]",
        "array2: [5, 8, 2]",
    ]
    assert lines[-1] == "shared count seen through alias: 1"


def test_struct_lesson_output() -> None:
    lines = get_lesson("struct").run()
    assert lines[:2] == ["original title: Shopping", "copied title: Groceries"]
    assert "TodoItem.owner cannot be changed after construction" in lines
