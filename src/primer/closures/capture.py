# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Closures: function values that carry the variables they were defined next to.

A closure sees a captured variable as it is when the closure runs, not as it
was when the closure was created. Capturing a copy instead has to be asked
for explicitly, see :func:`snapshot`.
"""

import copy
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

# ###############
# Public Interface
# ###############

_T = TypeVar("_T")


def apply_multiplication(value: int, mult_function: Callable[[int], int]) -> int:
    return mult_function(value)


def train_padawans(padawans: Iterable[str]) -> list[str]:
    """Map a closure literal over each padawan."""
    return list(map(lambda padawan: f"{padawan} has been trained!", padawans))


def times(factor: int) -> Callable[[int], int]:
    """Return a closure multiplying its single argument by ``factor``."""
    return lambda value: value * factor


def trailing_closure(func: Callable[..., _T], *args: Any) -> Callable[[Callable[..., Any]], _T]:
    """Pass the decorated function as the last argument of ``func``.

    The decorated name is bound to the result of the call::

        @trailing_closure(apply_multiplication, 2)
        def result(value):
            return value * 3

        assert result == 6
    """

    def decorator(closure: Callable[..., Any]) -> _T:
        return func(*args, closure)

    return decorator


def make_counter(start: int = 0, step: int = 1) -> Callable[[], int]:
    """Return a closure that counts up from ``start`` each time it is called.

    The count lives as long as the returned closure does.
    """
    count = start

    def increment() -> int:
        nonlocal count
        count += step
        return count

    return increment


def snapshot(value: _T) -> Callable[[], _T]:
    """Return a closure over a private copy of ``value`` taken right now."""
    captured = copy.deepcopy(value)
    return lambda: captured


def capture_demo() -> tuple[str, str]:
    """Show a live capture next to a snapshot of the same variable.

    Both closures are created while ``ability`` is ``"Force"``; the variable
    is rebound before either runs.
    """
    ability = "Force"

    def live() -> str:
        return f"May the {ability} be with you."

    frozen = snapshot(f"May the {ability} be with you.")
    ability = "Dark Side"
    return live(), frozen()
