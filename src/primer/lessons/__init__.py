# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lesson catalog and playground configuration."""

from primer.lessons.catalog import (
    LESSONS,
    Lesson,
    LessonOutput,
    UnknownLessonError,
    get_lesson,
    lesson_slugs,
    run_lessons,
)
from primer.lessons.config import (
    CONFIG_FILE_NAME,
    PlaygroundConfig,
    PlaygroundConfigError,
    load_playground_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "LESSONS",
    "Lesson",
    "LessonOutput",
    "PlaygroundConfig",
    "PlaygroundConfigError",
    "UnknownLessonError",
    "get_lesson",
    "lesson_slugs",
    "load_playground_config",
    "run_lessons",
]
