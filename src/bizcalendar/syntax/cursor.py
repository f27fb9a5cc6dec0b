"""Immutable cursor infrastructure for the period tokenizer.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("FY24", 0)
        >>> cursor.current
        'F'
        >>> cursor.advance(2).current
        '2'
        >>> cursor.current  # Original unchanged (immutability)
        'F'
        >>> Cursor("FY", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Source text from the current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def startswith(self, literal: str) -> bool:
        """True if the source continues with literal at this position."""
        return self.source.startswith(literal, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip any Unicode whitespace, including tabs and line breaks."""
        pos = self.pos
        source = self.source
        while pos < len(source) and source[pos].isspace():
            pos += 1
        return Cursor(source, pos) if pos != self.pos else self


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Example:
        >>> cursor = Cursor("Q3", 0)
        >>> result = ParseResult("Q", cursor.advance())
        >>> result.value
        'Q'
        >>> result.cursor.current
        '3'
    """

    value: T
    cursor: Cursor
