"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (bad values passed to constructors)
        2000-2999: Parse errors (period strings that do not match the grammar)
    """

    # Argument errors (1000-1999)
    MONTH_OUT_OF_RANGE = 1001
    YEAR_OUT_OF_RANGE = 1002
    QUARTER_OUT_OF_RANGE = 1003
    HALF_OUT_OF_RANGE = 1004
    FISCAL_START_INVALID = 1005
    KIND_INVALID = 1006
    PERIOD_INVERTED = 1007
    GRANULARITY_MISMATCH = 1008
    EXTENSION_INVALID = 1009
    CONFIG_INVALID = 1010
    OPERATION_UNSUPPORTED = 1011
    PERIOD_OUT_OF_RANGE = 1012

    # Parse errors (2000-2999)
    UNEXPECTED_TOKEN = 2001
    UNEXPECTED_CHARACTER = 2002
    UNEXPECTED_END = 2003
    INPUT_TOO_LONG = 2004
    INPUT_NOT_STRING = 2005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of the offending text inside a period string.

    Period strings are single-line, so the column is derived from the start
    offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the parsed string (None for argument errors)
        hint: Suggestion for fixing the error
        argument_name: Argument that carried the bad value
        received_value: Bad value, rendered with repr()
        expected: Tokens or values that would have been accepted
        input_value: Full period string being parsed (parse errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    argument_name: str | None = None
    received_value: str | None = None
    expected: tuple[str, ...] = ()
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNEXPECTED_TOKEN]: Unexpected 'U' at column 8
              --> column 8
              = expected: H, Q, Jan, ..., end of input
              = help: A period looks like 'FY2023 Q1' or 'CY22 Sep'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
