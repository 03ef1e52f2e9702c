# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Associated-value variants.

A variant family is a closed set of cases. Every case is a frozen pydantic
model with a ``case`` discriminator and its own payload fields, so a family
can be validated from plain data as a discriminated union, just like any other
tagged model (see :attr:`VariantFamily.union`).

    class UPCA(Variant):
        case: Literal["UPCA"] = "UPCA"
        sys: int
        data: int
        check: int

    Barcode = VariantFamily("Barcode", UPCA, QRCode)
    code = Barcode.UPCA(0, 33444, 3)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic import Field as _Field

from primer.variants.raw import VariantDefinitionError

# ###############
# Public Interface
# ###############


class PayloadError(Exception):
    """Raised when a variant is constructed with a payload that does not fit its case."""


class NonExhaustiveMatchError(Exception):
    """Raised when a match over a variant family does not handle exactly its cases."""


class Variant(BaseModel):
    """Base class for one case of a variant family.

    Payload fields may be given positionally, in declaration order, or by
    name. Values are validated strictly: ``UPCA("0", 1, 2)`` is rejected
    instead of being coerced.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    case: str

    def __init__(self, *args: Any, **data: Any) -> None:
        fields = type(self).payload_fields()
        if len(args) > len(fields):
            raise PayloadError(
                f"{type(self).__name__} takes {len(fields)} payload value(s), got {len(args)}"
            )
        for name, value in zip(fields, args):
            if name in data:
                raise PayloadError(f"{type(self).__name__}: payload '{name}' given twice")
            data[name] = value
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise PayloadError(f"Invalid payload for {type(self).__name__}: {exc}") from exc

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__match_args__ = cls.payload_fields()

    @classmethod
    def payload_fields(cls) -> tuple[str, ...]:
        """Names of the payload fields, in declaration order."""
        return tuple(name for name in cls.model_fields if name != "case")

    @classmethod
    def case_tag(cls) -> str:
        """The discriminator value that identifies this case."""
        default = cls.model_fields["case"].default
        if not isinstance(default, str):
            raise VariantDefinitionError(f"{cls.__name__} does not declare a default 'case' tag")
        return default

    @property
    def payload(self) -> tuple[Any, ...]:
        """The payload values, in declaration order."""
        return tuple(getattr(self, name) for name in type(self).payload_fields())


class VariantFamily:
    """A closed set of :class:`Variant` cases.

    Cases are reachable as attributes named after their tag, e.g.
    ``Barcode.QRCode("www.barcode.com")``. A tag may not reuse the name of a
    family attribute such as ``match`` or ``parse``.
    """

    def __init__(self, name: str, *cases: type[Variant]) -> None:
        if not cases:
            raise VariantDefinitionError(f"{name}: a variant family needs at least one case")

        by_tag: dict[str, type[Variant]] = {}
        for case in cases:
            tag = case.case_tag()
            if hasattr(VariantFamily, tag) or tag in _INSTANCE_ATTRIBUTES:
                raise VariantDefinitionError(
                    f"{name}: case tag '{tag}' of {case.__name__} clashes with a VariantFamily attribute"
                )
            if tag in by_tag:
                raise VariantDefinitionError(
                    f"{name}: case tag '{tag}' is declared by both {by_tag[tag].__name__} and {case.__name__}"
                )
            by_tag[tag] = case

        self.name = name
        self._by_tag = by_tag

    def __getattr__(self, tag: str) -> type[Variant]:
        try:
            return self.__dict__["_by_tag"][tag]
        except KeyError:
            raise AttributeError(f"{self.__dict__.get('name', 'VariantFamily')} has no case '{tag}'") from None

    def __repr__(self) -> str:
        return f"VariantFamily({self.name!r}, cases={list(self._by_tag)})"

    @property
    def cases(self) -> tuple[type[Variant], ...]:
        """The case classes, in declaration order."""
        return tuple(self._by_tag.values())

    @property
    def union(self) -> Any:
        """The family as a type annotation, discriminated on ``case``."""
        if len(self._by_tag) == 1:
            return self.cases[0]
        return Annotated[Union[self.cases], _Field(discriminator="case")]  # noqa: UP007

    def is_case(self, value: object) -> bool:
        """Return True if ``value`` is an instance of one of this family's cases."""
        return type(value) in self.cases

    def parse(self, data: Any) -> Variant:
        """Build the matching case from a mapping carrying a ``case`` tag.

        Existing case instances are returned unchanged.

        Raises:
            PayloadError: If the tag is unknown or the payload does not fit the case.
        """
        if self.is_case(data):
            return data
        if not isinstance(data, Mapping):
            raise PayloadError(f"{self.name} data must be a mapping, got {type(data).__name__}")
        tag = data.get("case")
        case = self._by_tag.get(tag) if isinstance(tag, str) else None
        if case is None:
            raise PayloadError(f"{self.name} has no case {tag!r}")
        return case(**data)

    def match(self, value: Variant, handlers: Mapping[type[Variant], Callable[..., Any]]) -> Any:
        """Dispatch ``value`` to the handler registered for its case.

        ``handlers`` must name every case of the family and nothing else; this
        is checked before any handler runs. The handler is called with the
        payload values as positional arguments.

        Raises:
            NonExhaustiveMatchError: If a case is missing or an unknown key is present.
            TypeError: If ``value`` is not a case of this family.
        """
        missing = [case.__name__ for case in self.cases if case not in handlers]
        unknown = [getattr(key, "__name__", repr(key)) for key in handlers if key not in self.cases]
        if missing or unknown:
            details = []
            if missing:
                details.append(f"unhandled cases: {', '.join(missing)}")
            if unknown:
                details.append(f"unknown cases: {', '.join(unknown)}")
            raise NonExhaustiveMatchError(f"Match over {self.name} is not exhaustive ({'; '.join(details)})")

        if not self.is_case(value):
            raise TypeError(f"{value!r} is not a case of {self.name}")
        return handlers[type(value)](*value.payload)


# ################
# Implementation
# ################

_INSTANCE_ATTRIBUTES = frozenset({"name", "_by_tag"})
