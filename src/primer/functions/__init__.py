# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Function declarations and function types."""

from primer.functions.basics import (
    Greeting,
    function_type,
    jedi_blade_color,
    jedi_greet,
    jedi_trainer,
    sum_ints,
)

__all__ = [
    "Greeting",
    "function_type",
    "jedi_blade_color",
    "jedi_greet",
    "jedi_trainer",
    "sum_ints",
]
