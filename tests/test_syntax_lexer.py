"""Tests for the period tokenizer and its cursor.

Tests cover:
- Cursor immutability, EOF handling, peek and whitespace skipping
- Token kinds and offsets for compact and spaced input
- Four-digit cap on numbers
- Unknown characters
"""

import pytest

from bizcalendar.diagnostics import DiagnosticCode, UnexpectedTokenError
from bizcalendar.enums import TokenKind
from bizcalendar.syntax import Token, tokenize
from bizcalendar.syntax.cursor import Cursor, ParseResult


class TestCursor:
    """Tests for the immutable cursor."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor untouched."""
        cursor = Cursor("FY24", 0)
        advanced = cursor.advance(2)
        assert advanced.current == "2"
        assert cursor.current == "F"

    def test_advance_clamps_at_eof(self) -> None:
        """Advancing past the end stops at EOF."""
        assert Cursor("FY", 0).advance(10).is_eof

    def test_current_at_eof_raises(self) -> None:
        """EOF is a state; reading past it raises."""
        with pytest.raises(EOFError):
            _ = Cursor("FY", 2).current

    def test_peek(self) -> None:
        """peek() looks ahead without moving and returns None past EOF."""
        cursor = Cursor("Q3", 0)
        assert cursor.peek() == "Q"
        assert cursor.peek(1) == "3"
        assert cursor.peek(2) is None

    def test_skip_whitespace(self) -> None:
        """Spaces, tabs and newlines are skipped."""
        cursor = Cursor(" \t\nCY", 0).skip_whitespace()
        assert cursor.pos == 3

    def test_skip_whitespace_noop_returns_self(self) -> None:
        """No whitespace means no new cursor."""
        cursor = Cursor("CY", 0)
        assert cursor.skip_whitespace() is cursor

    def test_startswith_and_slice(self) -> None:
        """startswith() and slice_to() work from the current position."""
        cursor = Cursor("FY2023 Q1", 2)
        assert cursor.startswith("2023")
        assert cursor.slice_to(6) == "2023"

    def test_parse_result(self) -> None:
        """ParseResult pairs a value with the cursor after it."""
        result = ParseResult("Q", Cursor("Q3", 1))
        assert result.value == "Q"
        assert result.cursor.current == "3"


class TestTokenize:
    """Tests for tokenize()."""

    def test_compact_input(self) -> None:
        """Tokens need no separating whitespace."""
        tokens = tokenize("FY2037H2-NovCY42")
        assert [t.text for t in tokens] == ["FY", "2037", "H", "2", "-", "Nov", "CY", "42"]
        assert [t.kind for t in tokens] == [
            TokenKind.FY,
            TokenKind.NUMBER,
            TokenKind.HALF,
            TokenKind.NUMBER,
            TokenKind.DASH,
            TokenKind.MONTH,
            TokenKind.CY,
            TokenKind.NUMBER,
        ]

    def test_offsets(self) -> None:
        """Tokens record their source offsets."""
        tokens = tokenize(" CY 23  H 2 ")
        assert [(t.start, t.end) for t in tokens] == [(1, 3), (4, 6), (8, 9), (10, 11)]

    def test_token_end(self) -> None:
        """end is just past the token."""
        assert Token(TokenKind.MONTH, "Sep", 7).end == 10

    def test_sentinels(self) -> None:
        """TBD and Unknown are single tokens."""
        assert [t.kind for t in tokenize("TBD")] == [TokenKind.TBD]
        assert [t.kind for t in tokenize("Unknown")] == [TokenKind.UNKNOWN]

    def test_numbers_capped_at_four_digits(self) -> None:
        """A fifth digit starts a new number."""
        assert [t.text for t in tokenize("CY20245")] == ["CY", "2024", "5"]

    def test_empty(self) -> None:
        """Blank input has no tokens."""
        assert tokenize("") == ()
        assert tokenize("  \n ") == ()

    @pytest.mark.parametrize(
        ("text", "position"),
        [("FY2023 U76", 7), ("cy", 0), ("CY2023/Q1", 6), ("CY٢٠", 2)],
    )
    def test_unknown_character(self, text: str, position: int) -> None:
        """Characters that start no token raise with their position."""
        with pytest.raises(UnexpectedTokenError) as exc_info:
            tokenize(text)
        assert exc_info.value.position == position
        assert exc_info.value.input_value == text
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNEXPECTED_CHARACTER
