# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Enumerations: fixed cases, raw values, and associated values."""

from primer.variants.examples import UPCA, Barcode, Direction, Planet, QRCode, Title
from primer.variants.raw import (
    IntRawEnum,
    RawValueEnum,
    TextRawEnum,
    VariantDefinitionError,
)
from primer.variants.tagged import (
    NonExhaustiveMatchError,
    PayloadError,
    Variant,
    VariantFamily,
)

__all__ = [
    # Raw values
    "RawValueEnum",
    "TextRawEnum",
    "IntRawEnum",
    "VariantDefinitionError",
    # Associated values
    "Variant",
    "VariantFamily",
    "PayloadError",
    "NonExhaustiveMatchError",
    # Lesson enumerations
    "Direction",
    "Title",
    "Planet",
    "UPCA",
    "QRCode",
    "Barcode",
]
