# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Closure literals, capture, and trailing-closure calls."""

from primer.closures.capture import (
    apply_multiplication,
    capture_demo,
    make_counter,
    snapshot,
    times,
    trailing_closure,
    train_padawans,
)

__all__ = [
    "apply_multiplication",
    "capture_demo",
    "make_counter",
    "snapshot",
    "times",
    "trailing_closure",
    "train_padawans",
]
