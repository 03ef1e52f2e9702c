# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI showing every lesson next to its output."""

from collections.abc import Sequence

import dash
from dash import html

from primer.lessons.catalog import Lesson

# ###############
# Public Interface
# ###############


def create_app(lessons: Sequence[Lesson]) -> dash.Dash:
    """Create and configure the Primer playground viewer."""
    app = dash.Dash(
        __name__,
        title="Primer Playground",
    )
    app.layout = _build_layout(lessons)
    return app


# ################
# Implementation
# ################


def _build_layout(lessons: Sequence[Lesson]) -> html.Div:
    """Build the application layout."""
    return html.Div(
        [html.H1("Primer Playground"), html.Hr()] + [_lesson_section(lesson) for lesson in lessons],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


def _lesson_section(lesson: Lesson) -> html.Section:
    """Render one lesson: heading, prose, and the lines it produced."""
    return html.Section(
        [
            html.H2(lesson.title),
            html.P(lesson.summary, style={"color": "#666"}),
            html.Pre(
                "\n".join(lesson.run()),
                style={"background": "#f6f8fa", "padding": "1rem"},
            ),
        ],
        id=f"lesson-{lesson.slug}",
    )
