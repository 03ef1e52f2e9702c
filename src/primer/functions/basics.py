# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Functions: tuple returns, functions as values, and variadic parameters."""

import inspect
import typing
from collections.abc import Callable
from typing import Any, NamedTuple

# ###############
# Public Interface
# ###############


class Greeting(NamedTuple):
    """A two-part farewell, readable by position or by name."""

    farewell: str
    may_the_force_be_with_you: str


def jedi_greet(name: str, ability: str) -> Greeting:
    """Return a farewell to ``name`` wishing them well with ``ability``."""
    return Greeting(f"Good bye, {name}.", f" May the {ability} be with you.")


def jedi_trainer() -> Callable[[str, int], str]:
    """Return a training function rather than calling it."""

    def train(name: str, times: int) -> str:
        return f"{name} has been trained in the Force {times} times"

    return train


def jedi_blade_color(*colors: str) -> list[str]:
    """Print every color given and return the printed lines."""
    lines = []
    for color in colors:
        print(color)
        lines.append(color)
    return lines


def sum_ints(x: int, y: int) -> int:
    return x + y


def function_type(fn: Callable[..., Any]) -> str:
    """Describe the type of ``fn`` from its annotations, e.g. ``(int, int) -> int``.

    Variadic positional parameters are shown as ``T...``; a function that
    returns nothing is shown as returning ``()``.
    """
    hints = typing.get_type_hints(fn)
    params = []
    for param in inspect.signature(fn).parameters.values():
        name = _type_name(hints.get(param.name, Any))
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            name += "..."
        params.append(name)

    returns = hints.get("return", type(None))
    return f"({', '.join(params)}) -> {_type_name(returns)}"


# ################
# Implementation
# ################


def _type_name(tp: Any) -> str:
    """Short, readable name for a type annotation."""
    if tp is None or tp is type(None):
        return "()"
    if isinstance(tp, type) and not typing.get_args(tp):
        return tp.__name__
    return repr(tp).replace("typing.", "").replace("collections.abc.", "")
