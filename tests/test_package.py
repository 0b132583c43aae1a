# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the top-level calclex package interface."""

import calclex
from calclex.scanner.tokens import Digit, Plus


def test_version_is_set() -> None:
    assert calclex.__version__ == "0.1.0"


def test_public_names_are_exported() -> None:
    for name in calclex.__all__:
        assert hasattr(calclex, name), name


def test_scanner_usable_from_top_level() -> None:
    scanner = calclex.Scanner(["1+2"])
    assert scanner.next_line() == [Digit(value=1), Plus(), Digit(value=2)]
    assert calclex.classify_line("1+2") == [Digit(value=1), Plus(), Digit(value=2)]
