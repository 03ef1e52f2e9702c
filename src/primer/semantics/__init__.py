# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value versus reference semantics and the record types that declare them."""

from primer.semantics.ownership import (
    Semantics,
    Shared,
    UndeclaredSemanticsError,
    assign,
    reference_type,
    semantics_of,
    value_type,
)
from primer.semantics.records import (
    FieldFrozenError,
    FieldTypeError,
    ReferenceArray,
    TodoItem,
    ValueArray,
)

__all__ = [
    "Semantics",
    "Shared",
    "UndeclaredSemanticsError",
    "assign",
    "reference_type",
    "semantics_of",
    "value_type",
    "FieldFrozenError",
    "FieldTypeError",
    "ReferenceArray",
    "TodoItem",
    "ValueArray",
]
