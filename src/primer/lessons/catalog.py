# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""The lesson catalog.

Every lesson is an independent demonstration. Running a lesson evaluates it
once and returns the lines a playground would show next to the code.
"""

from __future__ import annotations

import contextlib
import io
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from primer.closures.capture import (
    apply_multiplication,
    capture_demo,
    make_counter,
    times,
    trailing_closure,
    train_padawans,
)
from primer.functions.basics import function_type, jedi_blade_color, jedi_greet, jedi_trainer, sum_ints
from primer.semantics.ownership import Shared, assign, semantics_of
from primer.semantics.records import FieldFrozenError, ReferenceArray, TodoItem, ValueArray
from primer.variants.examples import UPCA, Barcode, Direction, Planet, QRCode, Title

# ###############
# Public Interface
# ###############


class UnknownLessonError(Exception):
    """Raised when a lesson slug does not name any lesson in the catalog."""


@dataclass(frozen=True)
class Lesson:
    """A single demonstration.

    Attributes:
        slug: Short identifier used on the command line and in configuration.
        title: Human-readable heading.
        summary: One or two sentences of prose introducing the concept.
        run: Evaluates the demonstration and returns its output lines.
    """

    slug: str
    title: str
    summary: str
    run: Callable[[], list[str]]


@dataclass(frozen=True)
class LessonOutput:
    """The lines produced by running one lesson."""

    lesson: Lesson
    lines: list[str]


def get_lesson(slug: str) -> Lesson:
    """Look up a lesson by slug.

    Raises:
        UnknownLessonError: If no lesson has that slug.
    """
    for lesson in LESSONS:
        if lesson.slug == slug:
            return lesson
    known = ", ".join(lesson.slug for lesson in LESSONS)
    raise UnknownLessonError(f"Unknown lesson '{slug}' (available: {known})")


def lesson_slugs() -> list[str]:
    return [lesson.slug for lesson in LESSONS]


def run_lessons(slugs: Iterable[str] | None = None) -> list[LessonOutput]:
    """Run the named lessons, or the whole catalog in order when none are named.

    All slugs are resolved before any lesson runs, so an unknown slug fails
    without partial output.
    """
    lessons = list(LESSONS) if slugs is None else [get_lesson(slug) for slug in slugs]
    return [LessonOutput(lesson=lesson, lines=lesson.run()) for lesson in lessons]


# ################
# Implementation
# ################


def _run_functions() -> list[str]:
    greeting = jedi_greet("kool friend", "Force")
    lines = [
        repr(greeting),
        greeting.farewell,
        greeting.may_the_force_be_with_you,
        f"sum_ints: {function_type(sum_ints)}",
    ]

    train = jedi_trainer()
    lines.append(f"jedi_trainer: {function_type(jedi_trainer)}")
    lines.append(train("Tho Dang", 100))

    printed = io.StringIO()
    with contextlib.redirect_stdout(printed):
        jedi_blade_color("pink", "purple")
    lines.extend(printed.getvalue().splitlines())
    return lines


def _run_closures() -> list[str]:
    lines = train_padawans(["Knox", "Avitla", "Mennaus"])
    lines.append(str(apply_multiplication(1000, lambda value: value * 7)))
    lines.append(str(apply_multiplication(4, times(9))))

    @trailing_closure(apply_multiplication, 2)
    def tripled(value: int) -> int:
        return value * 3

    lines.append(str(tripled))

    counter = make_counter()
    counter()
    lines.append(f"counter after two calls: {counter()}")

    live, frozen = capture_demo()
    lines.append(f"live capture: {live}")
    lines.append(f"snapshot: {frozen}")
    return lines


def _run_basic_enum() -> list[str]:
    tho_direction = Direction.EAST
    lines = [f"cases: {', '.join(case.name for case in Direction)}"]
    if tho_direction == Direction.EAST:
        lines.append("Tho is running to East Direction")
    return lines


def _run_raw_value_enum() -> list[str]:
    my_ceo_string = Title.CEO.raw_value
    my_title = Title.from_raw("Chief Executive Officer")
    bad_title = Title.from_raw("not a valid title")
    lines = [
        f"Title.CEO.raw_value = {my_ceo_string!r}",
        f"Title.from_raw('Chief Executive Officer') = {my_title}",
        f"Title.from_raw('not a valid title') = {bad_title}",
    ]
    lines.extend(f"{planet.name} = {planet.raw_value}" for planet in Planet)
    return lines


def _run_associated_value_enum() -> list[str]:
    my_normal_barcode = Barcode.UPCA(0, 33444, 3)
    qr_code = Barcode.QRCode("www.barcode.com")

    describe = {
        UPCA: lambda sys, data, check: f"UPC-A: {sys}, {data}, {check}",
        QRCode: lambda data: f"QR code: {data}",
    }
    return [Barcode.match(code, describe) for code in (my_normal_barcode, qr_code)]


def _run_value_vs_reference() -> list[str]:
    array1 = ReferenceArray([5, 8, 2])
    array2 = assign(array1)
    array1.append(10)
    lines = [
        f"{type(array1).__name__} is a {semantics_of(array1).value} type",
        f"array1: {array1.items}",
        f"array2: {array2.items}",
    ]

    values1 = ValueArray([5, 8, 2])
    values2 = assign(values1)
    values1.append(10)
    lines.extend(
        [
            f"{type(values1).__name__} is a {semantics_of(values1).value} type",
            f"array1: {values1.items}",
            f"array2: {values2.items}",
        ]
    )

    jedi_count = Shared(0)
    alias = assign(jedi_count)
    jedi_count.update(lambda n: n + 1)
    lines.append(f"shared count seen through alias: {alias.get()}")
    return lines


def _run_struct() -> list[str]:
    todo = TodoItem(
        title="Groceries",
        content="Milk, eggs, lightsaber batteries",
        due_date=datetime(2015, 6, 1, 9, 0),
        owner="Tho",
    )
    copied = assign(todo)
    todo.title = "Shopping"
    lines = [f"original title: {todo.title}", f"copied title: {copied.title}"]
    try:
        todo.owner = "Obi Wan"
    except FieldFrozenError as exc:
        lines.append(str(exc))
    return lines


LESSONS: tuple[Lesson, ...] = (
    Lesson(
        slug="functions",
        title="Functions",
        summary=(
            "Functions can return several values at once, be returned from other "
            "functions, and take a variable number of arguments."
        ),
        run=_run_functions,
    ),
    Lesson(
        slug="closures",
        title="Closures",
        summary=(
            "Closures are function values that capture the variables around them "
            "and see their current values when called."
        ),
        run=_run_closures,
    ),
    Lesson(
        slug="basic-enum",
        title="Basic Enum",
        summary="A basic enumeration names exactly one of a finite set of cases.",
        run=_run_basic_enum,
    ),
    Lesson(
        slug="raw-value-enum",
        title="Raw Value Enum",
        summary=(
            "Each case of a raw value enumeration carries a fixed constant. Looking a "
            "case up by its constant may find nothing."
        ),
        run=_run_raw_value_enum,
    ),
    Lesson(
        slug="associated-value-enum",
        title="Associated Value Enum",
        summary="Each case of an associated value enumeration carries its own kind of data.",
        run=_run_associated_value_enum,
    ),
    Lesson(
        slug="value-vs-reference",
        title="Value Types vs. Reference Types",
        summary=(
            "Assigning a value type hands out a private copy; assigning a reference "
            "type hands out another name for the same object."
        ),
        run=_run_value_vs_reference,
    ),
    Lesson(
        slug="struct",
        title="Struct Basics",
        summary="A record with named fields, one of which cannot change after construction.",
        run=_run_struct,
    ),
)
