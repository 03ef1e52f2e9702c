#!/usr/bin/env python3
# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local checks: format, lint, type check, tests, a lesson smoke run, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=primer", "--cov-report=term-missing"]),
    ("Lessons", ["uv", "run", "primer", "run", "--no-color"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every step, then print a pass/fail summary. Returns the process exit code."""
    root = Path(__file__).resolve().parent.parent
    results = [_run_step(name, cmd, root) for name, cmd in STEPS]

    _banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title)}\n{sep}")


def _run_step(name: str, cmd: list[str], root: Path) -> tuple[str, bool, float]:
    _banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=root)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main())
