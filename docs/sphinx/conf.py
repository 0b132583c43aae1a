# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for calclex documentation."""

project = "calclex"
author = "calclex Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
