# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""The enumerations used throughout the lessons."""

from __future__ import annotations

from enum import Enum, auto
from typing import Literal

from primer.variants.raw import IntRawEnum, TextRawEnum
from primer.variants.tagged import Variant, VariantFamily

# ###############
# Public Interface
# ###############


class Direction(Enum):
    """A basic enumeration: four fixed cases, no data."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()


class Title(TextRawEnum):
    """Executive titles backed by their spelled-out names."""

    CEO = "Chief Executive Officer"
    CTO = "Chief Technical Officer"
    CFO = "Chief Financial Officer"


class Planet(IntRawEnum):
    """Planets backed by integers; unvalued cases count up from their predecessor."""

    MERCURY = 1
    VENUS = auto()
    EARTH = auto()
    MARS = auto()
    JUPITER = 100
    SATURN = auto()
    URANUS = auto()
    NEPTUNE = auto()


class UPCA(Variant):
    """A UPC-A barcode: number system digit, product data, check digit."""

    case: Literal["UPCA"] = "UPCA"
    sys: int
    data: int
    check: int


class QRCode(Variant):
    """A QR code carrying a single string."""

    case: Literal["QRCode"] = "QRCode"
    data: str


Barcode = VariantFamily("Barcode", UPCA, QRCode)
