# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""calclex: a line-oriented lexical scanner for arithmetic expressions."""

from calclex.scanner import (
    EndOfInput,
    EndOfInputError,
    LexerError,
    Scanner,
    ScannerConfig,
    ScannerConfigError,
    Token,
    TokenKind,
    classify_line,
)

__version__ = "0.1.0"

__all__ = [
    "EndOfInput",
    "EndOfInputError",
    "LexerError",
    "Scanner",
    "ScannerConfig",
    "ScannerConfigError",
    "Token",
    "TokenKind",
    "classify_line",
]
