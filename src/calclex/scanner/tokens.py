# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token alphabet for the calclex arithmetic expression language.

Every token is an immutable pydantic model tagged by its ``kind`` field. The
alphabet is closed: :data:`Token` is the discriminated union of all variants
and :class:`TokenKind` enumerates their tags.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class TokenKind(Enum):
    """Discriminator values of all token variants."""

    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIVIDE = "divide"
    DIGIT = "digit"
    POINT = "point"
    COMMENT = "comment"
    EMPTY = "empty"
    UNKNOWN = "unknown"
    WHITESPACE = "whitespace"


class _TokenBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def token_kind(self) -> TokenKind:
        """The :class:`TokenKind` member matching this token's tag."""
        return TokenKind(self.kind)  # type: ignore[attr-defined]


class LeftParen(_TokenBase):
    """An opening parenthesis ``(``."""

    kind: Literal["left_paren"] = "left_paren"


class RightParen(_TokenBase):
    """A closing parenthesis ``)``."""

    kind: Literal["right_paren"] = "right_paren"


class Plus(_TokenBase):
    """The addition operator ``+``."""

    kind: Literal["plus"] = "plus"


class Minus(_TokenBase):
    """The subtraction operator ``-``."""

    kind: Literal["minus"] = "minus"


class Times(_TokenBase):
    """The multiplication operator ``*``."""

    kind: Literal["times"] = "times"


class Divide(_TokenBase):
    """The division operator ``/``."""

    kind: Literal["divide"] = "divide"


class Digit(_TokenBase):
    """A single decimal digit.

    Attributes:
        value: The digit's numeric value, always within 0..9.
    """

    kind: Literal["digit"] = "digit"
    value: Annotated[int, _Field(strict=True, ge=0, le=9)]


class Point(_TokenBase):
    """The decimal point ``.``."""

    kind: Literal["point"] = "point"


class Comment(_TokenBase):
    """A whole line starting with ``//``."""

    kind: Literal["comment"] = "comment"


class Empty(_TokenBase):
    """A line with no characters at all."""

    kind: Literal["empty"] = "empty"


class Unknown(_TokenBase):
    """A character outside the recognized alphabet."""

    kind: Literal["unknown"] = "unknown"


class Whitespace(_TokenBase):
    """A single space character."""

    kind: Literal["whitespace"] = "whitespace"


# A lexical token: exactly one of the variants above.
# The `kind` discriminator selects the variant when validating raw data.
Token = Annotated[
    LeftParen
    | RightParen
    | Plus
    | Minus
    | Times
    | Divide
    | Digit
    | Point
    | Comment
    | Empty
    | Unknown
    | Whitespace,
    _Field(discriminator="kind"),
]

TOKEN_ADAPTER: TypeAdapter[Token] = TypeAdapter(Token)
