# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-oriented scanner and token alphabet for calclex."""

from calclex.scanner.config import (
    CONFIG_FILE_NAME,
    EndOfInput,
    ScannerConfig,
    ScannerConfigError,
    load_scanner_config,
    parse_scanner_config,
)
from calclex.scanner.lexer import (
    COMMENT_PREFIX,
    EndOfInputError,
    LexerError,
    Scanner,
    classify_line,
)
from calclex.scanner.tokens import (
    TOKEN_ADAPTER,
    Comment,
    Digit,
    Divide,
    Empty,
    LeftParen,
    Minus,
    Plus,
    Point,
    RightParen,
    Times,
    Token,
    TokenKind,
    Unknown,
    Whitespace,
)

__all__ = [
    "COMMENT_PREFIX",
    "CONFIG_FILE_NAME",
    "Comment",
    "Digit",
    "Divide",
    "Empty",
    "EndOfInput",
    "EndOfInputError",
    "LeftParen",
    "LexerError",
    "Minus",
    "Plus",
    "Point",
    "RightParen",
    "Scanner",
    "ScannerConfig",
    "ScannerConfigError",
    "TOKEN_ADAPTER",
    "Times",
    "Token",
    "TokenKind",
    "Unknown",
    "Whitespace",
    "classify_line",
    "load_scanner_config",
    "parse_scanner_config",
]
