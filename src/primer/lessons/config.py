# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the playground configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from primer.lessons.catalog import lesson_slugs

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".primer.yaml"


class PlaygroundConfigError(Exception):
    """Raised when a playground configuration file is invalid or cannot be loaded."""


@dataclass
class PlaygroundConfig:
    """The parsed playground configuration.

    Attributes:
        lessons: Slugs of the lessons to run when none are named on the command line.
        color: Whether console output is colourised.
    """

    lessons: list[str] = field(default_factory=lesson_slugs)
    color: bool = True


def load_playground_config(path: Path) -> PlaygroundConfig:
    """Load and parse a playground configuration file.

    Args:
        path: Path to the `.primer.yaml` file.

    Returns:
        A PlaygroundConfig instance populated from the file.

    Raises:
        PlaygroundConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise PlaygroundConfigError(f"Playground config file not found: {path}") from None
    except OSError as exc:
        raise PlaygroundConfigError(f"Cannot read playground config file: {exc}") from exc

    return _parse_playground_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_playground_config(text: str, source_label: str = "<string>") -> PlaygroundConfig:
    """Parse playground config YAML text into a PlaygroundConfig.

    An empty document yields the defaults.

    Raises:
        PlaygroundConfigError: If the YAML is invalid or a field has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PlaygroundConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return PlaygroundConfig()
    if not isinstance(data, dict):
        raise PlaygroundConfigError(f"{source_label}: playground config must be a YAML mapping")

    unknown_keys = sorted(str(key) for key in data if key not in ("lessons", "color"))
    if unknown_keys:
        raise PlaygroundConfigError(f"{source_label}: unknown field(s): {', '.join(unknown_keys)}")

    config = PlaygroundConfig()

    if "lessons" in data:
        config.lessons = _parse_lessons(data["lessons"], source_label)

    if "color" in data:
        color = data["color"]
        if not isinstance(color, bool):
            raise PlaygroundConfigError(f"{source_label}: 'color' must be true or false")
        config.color = color

    return config


def _parse_lessons(raw: object, source_label: str) -> list[str]:
    """Validate the 'lessons' list against the catalog."""
    if not isinstance(raw, list):
        raise PlaygroundConfigError(f"{source_label}: 'lessons' must be a list")

    known = set(lesson_slugs())
    lessons: list[str] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, str):
            raise PlaygroundConfigError(f"{source_label}: lessons[{index}] must be a string")
        if entry not in known:
            raise PlaygroundConfigError(f"{source_label}: lessons[{index}] '{entry}' is not a known lesson")
        lessons.append(entry)
    return lessons
