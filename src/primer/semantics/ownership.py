# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declared assignment semantics: value types and reference types.

Plain Python assignment always binds a second name to the same object. The
types in this package state which behaviour they intend instead of leaving it
implicit:

- a *value type* is copied by :func:`assign`, so the two bindings evolve
  independently;
- a *reference type* is shared by :func:`assign`, so a mutation through one
  binding is visible through every other.

:class:`Shared` is the explicit handle for state that is meant to be shared.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from enum import Enum
from typing import Generic, TypeVar

# ###############
# Public Interface
# ###############


class UndeclaredSemanticsError(Exception):
    """Raised when a type has not declared whether it is a value or a reference type."""


class Semantics(Enum):
    """How instances of a type behave when assigned to a new binding."""

    VALUE = "value"
    REFERENCE = "reference"


_C = TypeVar("_C", bound=type)
_T = TypeVar("_T")


def value_type(cls: _C) -> _C:
    """Class decorator declaring that instances are copied on assignment."""
    cls.__semantics__ = Semantics.VALUE
    return cls


def reference_type(cls: _C) -> _C:
    """Class decorator declaring that instances are shared on assignment.

    Deep copies of a reference-type instance are the instance itself, so a
    value type holding one copies the reference, not the referenced object.
    """
    cls.__semantics__ = Semantics.REFERENCE
    if "__deepcopy__" not in cls.__dict__:
        cls.__deepcopy__ = lambda self, memo: self
    return cls


def semantics_of(obj: object) -> Semantics:
    """Return the declared semantics of an instance or a type.

    Raises:
        UndeclaredSemanticsError: If neither the type nor any base declares semantics.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    semantics = getattr(cls, "__semantics__", None)
    if not isinstance(semantics, Semantics):
        raise UndeclaredSemanticsError(
            f"{cls.__name__} does not declare value or reference semantics; "
            "decorate it with @value_type or @reference_type"
        )
    return semantics


def assign(obj: _T) -> _T:
    """Bind ``obj`` to a new name according to its declared semantics.

    Value types come back as an independent deep copy, reference types as the
    very same object.
    """
    if semantics_of(obj) is Semantics.VALUE:
        return copy.deepcopy(obj)
    return obj


@reference_type
class Shared(Generic[_T]):
    """A shared, mutable cell. Every binding of a Shared sees the same value."""

    def __init__(self, value: _T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Shared({self._value!r})"

    def get(self) -> _T:
        return self._value

    def set(self, value: _T) -> None:
        self._value = value

    def update(self, fn: Callable[[_T], _T]) -> _T:
        """Replace the value with ``fn(value)`` and return the new value."""
        self._value = fn(self._value)
        return self._value
