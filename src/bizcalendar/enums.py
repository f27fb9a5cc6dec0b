"""Enumerations for bizcalendar type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class YearKind(StrEnum):
    """Year numbering used to display a period.

    StrEnum provides automatic string conversion: str(YearKind.FY) == "FY"
    """

    CY = "CY"
    """Calendar year: January through December."""

    FY = "FY"
    """Fiscal year: numbered by the calendar year in which it ends."""


class Granularity(StrEnum):
    """Shape of a period, selecting rendering and alignment behavior.

    StrEnum provides automatic string conversion: str(Granularity.HALF) == "half"
    """

    RANGE = "range"
    """Arbitrary contiguous run of months."""

    MONTH = "month"
    """Single month."""

    QUARTER = "quarter"
    """Three months aligned to the period's own year kind."""

    HALF = "half"
    """Six months aligned to the period's own year kind."""

    YEAR = "year"
    """Twelve months starting at January (CY) or the fiscal start (FY)."""

    TBD = "tbd"
    """To-be-determined sentinel."""

    UNKNOWN = "unknown"
    """Unknown sentinel."""


class TokenKind(StrEnum):
    """Lexical token categories of the period grammar.

    Member order is the tokenizer's priority order for equal-length matches.
    """

    CY = "CY"
    FY = "FY"
    NUMBER = "NUMBER"
    HALF = "H"
    QUARTER = "Q"
    TBD = "TBD"
    UNKNOWN = "Unknown"
    MONTH = "MONTH"
    DASH = "-"


__all__ = [
    "Granularity",
    "TokenKind",
    "YearKind",
]
