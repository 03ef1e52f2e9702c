# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data types with declared assignment semantics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic import Field as _Field

from primer.semantics.ownership import reference_type, value_type

# ###############
# Public Interface
# ###############


class FieldFrozenError(Exception):
    """Raised when assigning to a field that is immutable after construction."""


class FieldTypeError(Exception):
    """Raised when assigning a value that does not fit a field's declared type."""


@value_type
@dataclass
class ValueArray:
    """An integer array that behaves like a value: each binding owns its elements."""

    items: list[int] = field(default_factory=list)

    def append(self, item: int) -> None:
        self.items.append(item)


@reference_type
@dataclass
class ReferenceArray:
    """An integer array that behaves like a reference: all bindings share one list."""

    items: list[int] = field(default_factory=list)

    def append(self, item: int) -> None:
        self.items.append(item)


@value_type
class TodoItem(BaseModel):
    """A to-do entry. The owner is fixed at construction; everything else may change."""

    model_config = ConfigDict(validate_assignment=True)

    title: str
    content: str
    due_date: datetime
    owner: str = _Field(frozen=True)

    def __setattr__(self, name: str, value: Any) -> None:
        model_field = type(self).model_fields.get(name)
        if model_field is not None and model_field.frozen:
            raise FieldFrozenError(f"{type(self).__name__}.{name} cannot be changed after construction")
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise FieldTypeError(f"Invalid value for {type(self).__name__}.{name}: {exc}") from exc
