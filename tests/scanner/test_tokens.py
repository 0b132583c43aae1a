# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the calclex token alphabet."""

import pytest
from pydantic import ValidationError

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
    TokenKind,
    Unknown,
    Whitespace,
)

_PAYLOAD_FREE = [
    LeftParen,
    RightParen,
    Plus,
    Minus,
    Times,
    Divide,
    Point,
    Comment,
    Empty,
    Unknown,
    Whitespace,
]


# ###############
# Digit Payload
# ###############


class TestDigit:
    @pytest.mark.parametrize("value", range(10))
    def test_valid_values(self, value: int) -> None:
        assert Digit(value=value).value == value

    @pytest.mark.parametrize("value", [-1, 10, 100])
    def test_out_of_range_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError):
            Digit(value=value)

    @pytest.mark.parametrize("value", ["3", 3.0, True, None])
    def test_non_int_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError):
            Digit(value=value)  # type: ignore[arg-type]

    def test_value_is_required(self) -> None:
        with pytest.raises(ValidationError):
            Digit()  # type: ignore[call-arg]

    def test_digit_is_immutable(self) -> None:
        digit = Digit(value=4)
        with pytest.raises(ValidationError):
            digit.value = 5  # type: ignore[misc]


# ###############
# Equality and Kinds
# ###############


class TestEquality:
    def test_same_variant_is_equal(self) -> None:
        assert Plus() == Plus()
        assert Digit(value=2) == Digit(value=2)

    def test_different_payload_not_equal(self) -> None:
        assert Digit(value=2) != Digit(value=3)

    def test_different_variants_not_equal(self) -> None:
        assert Plus() != Minus()
        assert Empty() != Comment()

    def test_tokens_are_hashable(self) -> None:
        assert len({Plus(), Plus(), Digit(value=1), Digit(value=1), Digit(value=2)}) == 3

    def test_every_variant_has_a_distinct_kind(self) -> None:
        kinds = {cls().token_kind for cls in _PAYLOAD_FREE} | {Digit(value=0).token_kind}
        assert kinds == set(TokenKind)


# ###############
# Validation From Data
# ###############


class TestTokenAdapter:
    def test_digit_from_mapping(self) -> None:
        assert TOKEN_ADAPTER.validate_python({"kind": "digit", "value": 7}) == Digit(value=7)

    @pytest.mark.parametrize("cls", _PAYLOAD_FREE)
    def test_payload_free_variant_from_mapping(self, cls: type) -> None:
        token = cls()
        assert TOKEN_ADAPTER.validate_python({"kind": token.kind}) == token

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TOKEN_ADAPTER.validate_python({"kind": "number", "value": 1})

    def test_digit_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TOKEN_ADAPTER.validate_python({"kind": "digit", "value": 12})

    def test_dump_includes_kind(self) -> None:
        assert Digit(value=5).model_dump() == {"kind": "digit", "value": 5}
        assert Point().model_dump() == {"kind": "point"}
