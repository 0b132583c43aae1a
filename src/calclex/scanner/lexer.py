# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-oriented lexical scanner for calclex arithmetic expressions.

The scanner holds every source line up front and hands out the tokens of one
line per request. Each character is classified on its own; digits are never
merged into multi-digit numbers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from calclex.scanner.config import EndOfInput, ScannerConfig
from calclex.scanner.tokens import (
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
    Unknown,
    Whitespace,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

COMMENT_PREFIX = "//"


class LexerError(Exception):
    """Base class for errors raised by the scanner."""


class EndOfInputError(LexerError):
    """Raised when a line past the end is requested under ``EndOfInput.RAISE``.

    Attributes:
        line_number: 1-based number of the line that was requested.
    """

    def __init__(self, line_number: int, line_count: int) -> None:
        super().__init__(f"Line {line_number} requested, but input has only {line_count} line(s)")
        self.line_number = line_number


def classify_line(line: str) -> list[Token]:
    """Classify a single line of source text into tokens.

    An empty line yields ``[Empty()]`` and a line starting with ``//`` yields
    ``[Comment()]`` without looking at the rest. Any other line yields exactly
    one token per character.

    Args:
        line: One line of source text, without its line terminator.

    Returns:
        The list of tokens for the line.
    """
    if not line:
        return [Empty()]
    if line.startswith(COMMENT_PREFIX):
        return [Comment()]
    return [_CHAR_TOKENS.get(ch, _UNKNOWN) for ch in line]


class Scanner:
    """Produces the tokens of stored source lines, one line per call.

    Example:
        >>> scanner = Scanner(["1+2"])
        >>> scanner.next_line()
        [Digit(kind='digit', value=1), Plus(kind='plus'), Digit(kind='digit', value=2)]
    """

    def __init__(self, lines: Iterable[str], config: ScannerConfig | None = None) -> None:
        self._lines: tuple[str, ...] = tuple(lines)
        self._cursor = -1
        self._config = config if config is not None else ScannerConfig()
        logger.debug(
            "Scanner created with %d line(s), end-of-input=%s",
            len(self._lines),
            self._config.end_of_input.value,
        )

    @classmethod
    def from_source(cls, source: str, config: ScannerConfig | None = None) -> Scanner:
        """Create a scanner over the lines of a whole source text."""
        return cls(source.splitlines(), config)

    @property
    def config(self) -> ScannerConfig:
        return self._config

    @property
    def line_number(self) -> int:
        """1-based number of the most recently produced line, 0 before the first call."""
        return self._cursor + 1

    @property
    def exhausted(self) -> bool:
        """Whether every stored line has already been produced."""
        return self._cursor + 1 >= len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[list[Token]]:
        while not self.exhausted:
            yield self.next_line()

    def next_line(self) -> list[Token]:
        """Advance to the next line and return its tokens.

        Past the last stored line the result depends on the configured
        :class:`EndOfInput` policy; the cursor advances either way.

        Raises:
            EndOfInputError: If the input is exhausted and the policy is ``RAISE``.
        """
        self._cursor += 1
        if self._cursor < len(self._lines):
            return classify_line(self._lines[self._cursor])

        logger.debug("Line %d requested past end of input", self.line_number)
        if self._config.end_of_input is EndOfInput.RAISE:
            raise EndOfInputError(self.line_number, len(self._lines))
        return [Empty()]


# ################
# Implementation
# ################

_UNKNOWN = Unknown()

_CHAR_TOKENS: dict[str, Token] = {
    "(": LeftParen(),
    ")": RightParen(),
    "+": Plus(),
    "-": Minus(),
    "*": Times(),
    "/": Divide(),
    ".": Point(),
    " ": Whitespace(),
    **{str(digit): Digit(value=digit) for digit in range(10)},
}
