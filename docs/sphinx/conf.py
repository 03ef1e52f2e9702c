# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for Primer documentation."""

project = "Primer"
author = "Primer Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
