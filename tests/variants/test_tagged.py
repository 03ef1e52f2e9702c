# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for associated-value variants."""

from typing import Literal

import pytest
from pydantic import BaseModel, ValidationError

from primer.variants import (
    UPCA,
    Barcode,
    NonExhaustiveMatchError,
    PayloadError,
    QRCode,
    Variant,
    VariantDefinitionError,
    VariantFamily,
)

# ###############
# Test Helpers
# ###############


def _describe(code: Variant) -> str:
    return Barcode.match(
        code,
        {
            UPCA: lambda sys, data, check: f"upca {sys}-{data}-{check}",
            QRCode: lambda data: f"qr {data}",
        },
    )


class _Empty(Variant):
    case: Literal["Empty"] = "Empty"


class _Other(Variant):
    case: Literal["UPCA"] = "UPCA"
    label: str


class _Match(Variant):
    case: Literal["match"] = "match"


class _Name(Variant):
    case: Literal["name"] = "name"


# ###############
# Construction
# ###############


def test_construct_preserves_case_and_payload() -> None:
    """A constructed variant keeps exactly its tag and payload."""
    upca = Barcode.UPCA(0, 33444, 3)
    qr = Barcode.QRCode("www.barcode.com")

    assert upca.case == "UPCA"
    assert upca.payload == (0, 33444, 3)
    assert (upca.sys, upca.data, upca.check) == (0, 33444, 3)
    assert qr.case == "QRCode"
    assert qr.payload == ("www.barcode.com",)


def test_construct_by_keyword() -> None:
    """Payload fields may be named."""
    assert Barcode.UPCA(sys=8, data=85909, check=51226) == UPCA(8, 85909, 51226)


def test_case_classes_are_reachable_from_family() -> None:
    """Cases are attributes of the family."""
    assert Barcode.UPCA is UPCA
    assert Barcode.QRCode is QRCode
    assert Barcode.cases == (UPCA, QRCode)


def test_unknown_case_attribute() -> None:
    """Asking a family for a case it does not have is an AttributeError."""
    with pytest.raises(AttributeError, match="no case 'EAN13'"):
        Barcode.EAN13  # noqa: B018


@pytest.mark.parametrize(
    "build",
    [
        lambda: UPCA(0, 1),
        lambda: UPCA(0, 1, 2, 3),
        lambda: UPCA("0", 1, 2),
        lambda: QRCode(42),
        lambda: QRCode("x", extra=True),
        lambda: UPCA(0, 1, 2, sys=4),
    ],
)
def test_mismatched_payload_is_rejected(build) -> None:
    """Payloads of the wrong arity or type are rejected without coercion."""
    with pytest.raises(PayloadError):
        build()


def test_variants_are_immutable() -> None:
    """A variant's payload cannot be changed after construction."""
    qr = QRCode("www.barcode.com")
    with pytest.raises(ValidationError):
        qr.data = "elsewhere"
    assert qr.data == "www.barcode.com"


def test_case_without_payload() -> None:
    """A case may carry no data at all."""
    assert _Empty().payload == ()


# ###############
# Family definition
# ###############


def test_family_rejects_duplicate_tags() -> None:
    """Two cases with the same tag make a family ambiguous."""
    with pytest.raises(VariantDefinitionError, match="declared by both"):
        VariantFamily("Broken", UPCA, _Other)


def test_family_requires_a_case() -> None:
    with pytest.raises(VariantDefinitionError):
        VariantFamily("Nothing")


@pytest.mark.parametrize("case", [_Match, _Name])
def test_family_rejects_tags_shadowed_by_attributes(case: type[Variant]) -> None:
    """A tag named like a family attribute would be unreachable as a case."""
    with pytest.raises(VariantDefinitionError, match="clashes with a VariantFamily attribute"):
        VariantFamily("Clash", case)


# ###############
# Parsing
# ###############


def test_parse_mapping_into_case() -> None:
    """A mapping with a case tag becomes that case."""
    assert Barcode.parse({"case": "QRCode", "data": "a"}) == QRCode("a")
    assert Barcode.parse({"case": "UPCA", "sys": 1, "data": 2, "check": 3}) == UPCA(1, 2, 3)


def test_parse_returns_existing_instance() -> None:
    code = UPCA(1, 2, 3)
    assert Barcode.parse(code) is code


@pytest.mark.parametrize(
    "data",
    [
        {"case": "EAN13", "data": 1},
        {"data": "missing tag"},
        {"case": "QRCode", "data": 7},
        ["QRCode", "a"],
    ],
)
def test_parse_rejects_bad_data(data: object) -> None:
    with pytest.raises(PayloadError):
        Barcode.parse(data)


def test_union_annotation_accepts_cases() -> None:
    """The family's union can be used as a field annotation."""

    class Label(BaseModel):
        code: Barcode.union

    assert Label(code=QRCode("a")).code == QRCode("a")
    assert Label(code=UPCA(1, 2, 3)).code.payload == (1, 2, 3)


# ###############
# Matching
# ###############


def test_match_dispatches_on_case() -> None:
    """Each case reaches its own handler with its payload."""
    assert _describe(UPCA(0, 33444, 3)) == "upca 0-33444-3"
    assert _describe(QRCode("www.barcode.com")) == "qr www.barcode.com"


def test_match_missing_case_is_not_exhaustive() -> None:
    """Leaving out a case is an error even if the value's case is handled."""
    with pytest.raises(NonExhaustiveMatchError, match="unhandled cases: QRCode"):
        Barcode.match(UPCA(0, 1, 2), {UPCA: lambda *payload: payload})


def test_match_unknown_handler_is_rejected() -> None:
    handlers = {UPCA: lambda *p: p, QRCode: lambda d: d, _Empty: lambda: None}
    with pytest.raises(NonExhaustiveMatchError, match="unknown cases: _Empty"):
        Barcode.match(QRCode("a"), handlers)


def test_match_value_outside_family() -> None:
    with pytest.raises(TypeError):
        Barcode.match(_Empty(), {UPCA: lambda *p: p, QRCode: lambda d: d})


def test_structural_pattern_matching() -> None:
    """Cases support positional class patterns in a match statement."""
    match UPCA(8, 85909, 51226):
        case UPCA(sys, data, check):
            result = (sys, data, check)
        case _:
            result = None
    assert result == (8, 85909, 51226)
