"""Period string tokenizer.

Splits a period string into tokens by longest match over an ordered token
table. When two entries match the same length, the earlier one wins.
Whitespace separates tokens and is otherwise ignored, so "FY 2023  Q1"
and "FY2023Q1" produce the same tokens.

Token table, in priority order:
    CY, FY          year kind markers
    NUMBER          1 to 4 ASCII digits ("20245" lexes as 2024, 5)
    H, Q            half and quarter markers
    TBD, Unknown    sentinels
    Jan .. Dec      English month abbreviations
    -               range separator

Python 3.13+.
"""

from dataclasses import dataclass
from functools import lru_cache

from bizcalendar.constants import MAX_YEAR_DIGITS, TBD_TEXT, UNKNOWN_TEXT
from bizcalendar.core.months import month_abbreviations
from bizcalendar.diagnostics import ErrorTemplate, UnexpectedTokenError
from bizcalendar.enums import TokenKind
from bizcalendar.syntax.cursor import Cursor, ParseResult

__all__ = ["Token", "tokenize"]

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class Token:
    """Lexical token.

    Attributes:
        kind: Token category
        text: Matched source text
        start: Character offset of the first character
    """

    kind: TokenKind
    text: str
    start: int

    @property
    def end(self) -> int:
        """Character offset just past the token."""
        return self.start + len(self.text)


@lru_cache(maxsize=1)
def _token_table() -> tuple[tuple[TokenKind, str | None], ...]:
    """Token entries in priority order. NUMBER has no fixed text."""
    return (
        (TokenKind.CY, "CY"),
        (TokenKind.FY, "FY"),
        (TokenKind.NUMBER, None),
        (TokenKind.HALF, "H"),
        (TokenKind.QUARTER, "Q"),
        (TokenKind.TBD, TBD_TEXT),
        (TokenKind.UNKNOWN, UNKNOWN_TEXT),
        *((TokenKind.MONTH, name) for name in month_abbreviations()),
        (TokenKind.DASH, "-"),
    )


def _match_number(cursor: Cursor) -> int:
    """Length of the digit run at cursor, capped at four digits."""
    length = 0
    while length < MAX_YEAR_DIGITS and cursor.peek(length) in _DIGITS:
        length += 1
    return length


def _match_token(cursor: Cursor) -> ParseResult[Token] | None:
    """Longest token starting at cursor, or None if nothing matches."""
    best_kind: TokenKind | None = None
    best_length = 0
    for kind, literal in _token_table():
        if literal is None:
            length = _match_number(cursor)
        else:
            length = len(literal) if cursor.startswith(literal) else 0
        if length > best_length:
            best_kind, best_length = kind, length
    if best_kind is None:
        return None
    end = cursor.advance(best_length)
    return ParseResult(Token(best_kind, cursor.slice_to(end.pos), cursor.pos), end)


def tokenize(text: str) -> tuple[Token, ...]:
    """Split a period string into tokens.

    Args:
        text: Period string

    Returns:
        Tokens in source order (whitespace dropped)

    Raises:
        UnexpectedTokenError: If a character starts no token

    Example:
        >>> [t.text for t in tokenize("FY2037H2-NovCY42")]
        ['FY', '2037', 'H', '2', '-', 'Nov', 'CY', '42']
    """
    tokens: list[Token] = []
    cursor = Cursor(text, 0).skip_whitespace()
    while not cursor.is_eof:
        result = _match_token(cursor)
        if result is None:
            diagnostic = ErrorTemplate.unexpected_character(cursor.current, cursor.pos, text)
            raise UnexpectedTokenError(diagnostic, input_value=text, position=cursor.pos)
        tokens.append(result.value)
        cursor = result.cursor.skip_whitespace()
    return tuple(tokens)
