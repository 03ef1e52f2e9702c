# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Raw-value enumerations.

Each case of a raw-value enumeration is bound, at definition time, to one
constant of a single underlying type. Conversion from a case to its raw value
always succeeds; conversion back is a lookup that may find nothing.

Cases are not aliases of their raw values: ``Title.CEO == "Chief Executive
Officer"`` is ``False``, which is why the mixin-free :class:`enum.Enum` is used
as the base rather than ``StrEnum`` or ``IntEnum``.
"""

from __future__ import annotations

from enum import Enum, EnumMeta
from typing import Any, TypeVar

# ###############
# Public Interface
# ###############


class VariantDefinitionError(Exception):
    """Raised when an enumeration or variant family is declared inconsistently."""


class RawValueEnumMeta(EnumMeta):
    """Metaclass that validates raw values while the enumeration is created.

    Two cases sharing a raw value would make the reverse lookup ambiguous, so
    that is rejected here instead of silently turning one case into an alias.

    Calling the enumeration with a raw value applies the same type rule as
    :meth:`RawValueEnum.from_raw`, but raises ``ValueError`` when no case matches.
    """

    def __new__(metacls, cls, bases, classdict, **kwds):
        enum_class = super().__new__(metacls, cls, bases, classdict, **kwds)
        raw_type = getattr(enum_class, "__raw_type__", None)
        if raw_type is None:
            return enum_class

        for name, member in enum_class.__members__.items():
            if member.name != name:
                raise VariantDefinitionError(
                    f"{cls}: case '{name}' reuses raw value {member.value!r} of case '{member.name}'"
                )
            if not _is_raw_instance(member.value, raw_type):
                raise VariantDefinitionError(
                    f"{cls}: case '{name}' has raw value {member.value!r}, expected {raw_type.__name__}"
                )
        return enum_class

    def __call__(cls, value, *args, **kwds):
        raw_type = getattr(cls, "__raw_type__", None)
        if raw_type is not None and not args and not kwds:
            if not isinstance(value, cls) and not _is_raw_instance(value, raw_type):
                raise ValueError(f"{value!r} is not a valid {cls.__qualname__}")
        return super().__call__(value, *args, **kwds)


_E = TypeVar("_E", bound="RawValueEnum")


class RawValueEnum(Enum, metaclass=RawValueEnumMeta):
    """Base class for enumerations whose cases carry a raw value."""

    @property
    def raw_value(self) -> Any:
        """The constant this case was declared with."""
        return self.value

    @classmethod
    def from_raw(cls: type[_E], value: object) -> _E | None:
        """Return the case declared with ``value``, or ``None`` if there is none.

        Values of the wrong type never match; ``True`` does not find the case
        declared as ``1``.
        Calling the class, as in ``Planet(1)``, is the raising form of this lookup.
        """
        if not _is_raw_instance(value, cls.__raw_type__):
            return None
        for case in cls:
            if case.value == value:
                return case
        return None


class TextRawEnum(RawValueEnum):
    """Raw-value enumeration backed by ``str``.

    Cases declared with :func:`enum.auto` take their own name as raw value.
    """

    __raw_type__ = str

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name


class IntRawEnum(RawValueEnum):
    """Raw-value enumeration backed by ``int``.

    Cases declared with :func:`enum.auto` count up from the previous case,
    starting at 0 when no case before them has a value.
    """

    __raw_type__ = int

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> int:
        if not last_values:
            return 0
        return last_values[-1] + 1


# ################
# Implementation
# ################


def _is_raw_instance(value: object, raw_type: type) -> bool:
    """Return True if ``value`` is of the declared raw type (bool is never an int here)."""
    if isinstance(value, bool) and raw_type is not bool:
        return False
    return isinstance(value, raw_type)
