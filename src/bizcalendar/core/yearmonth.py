"""YearMonth arithmetic.

A YearMonth is a plain integer ``year * 100 + month`` with ``month`` in
[1, 12]. Integers compare chronologically, so period bounds can be
ordered and tested for containment with ordinary integer comparison.

YearMonths are always calendar coordinates. Fiscal coordinates exist only
at the edges: fiscal year numbers are converted on the way in (construction,
parsing) and on the way out (accessors, rendering).

A fiscal year is numbered by the calendar year in which it ends. With the
fiscal year starting in July, FY2024 runs from July 2023 through June 2024,
and July 2023 is fiscal month 1 of FY2024.

All functions are pure. Validation failures raise OutOfRangeError or
InvalidArgumentError with a structured Diagnostic.

Python 3.13+.
"""

from bizcalendar.constants import (
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    SHORT_YEAR_BASE,
    SHORT_YEAR_LIMIT,
)
from bizcalendar.diagnostics import ErrorTemplate, InvalidArgumentError, OutOfRangeError
from bizcalendar.enums import YearKind

__all__ = [
    "add_months",
    "calendar_to_fiscal",
    "calendar_year_of",
    "check_fiscal_start",
    "check_kind",
    "check_month",
    "check_year",
    "display_year",
    "fiscal_to_calendar",
    "length_in_months",
    "subtract_months",
    "tick_month",
    "year_and_month",
    "year_month",
]


# ============================================================================
# VALIDATION
# ============================================================================


def check_kind(kind: YearKind | str) -> YearKind:
    """Validate a year kind.

    Args:
        kind: YearKind member or its string value ("CY" / "FY")

    Returns:
        The YearKind member

    Raises:
        InvalidArgumentError: If kind names no YearKind
    """
    try:
        return YearKind(kind)
    except ValueError:
        raise InvalidArgumentError(ErrorTemplate.kind_invalid(kind)) from None


def check_month(month: int) -> int:
    """Validate a month ordinal.

    Returns:
        month unchanged

    Raises:
        OutOfRangeError: If month is not in [1, 12]
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise OutOfRangeError(ErrorTemplate.month_out_of_range(month))
    return month


def check_year(year: int) -> int:
    """Validate a year and expand two-digit shorthand.

    Years below 100 are shorthand for 20xx: ``23 -> 2023``, ``0 -> 2000``
    and ``-1 -> 1999``.

    Returns:
        The full four-digit year

    Raises:
        OutOfRangeError: If year is not in [-1, 9999]
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfRangeError(ErrorTemplate.year_out_of_range(year, MIN_YEAR, MAX_YEAR))
    if year < SHORT_YEAR_LIMIT:
        return SHORT_YEAR_BASE + year
    return year


def check_fiscal_start(month: int) -> int:
    """Validate a fiscal year start month.

    Raises:
        InvalidArgumentError: If month is not an integer in [1, 12]
    """
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidArgumentError(ErrorTemplate.fiscal_start_invalid(month))
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidArgumentError(ErrorTemplate.fiscal_start_invalid(month))
    return month


# ============================================================================
# ENCODING
# ============================================================================


def year_month(year: int, month: int) -> int:
    """Encode (year, month) as ``year * 100 + month``."""
    return year * 100 + month


def year_and_month(value: int) -> tuple[int, int]:
    """Decode a YearMonth into (year, month)."""
    return divmod(value, 100)


def tick_month(value: int) -> int:
    """Return the YearMonth one calendar month after ``value``.

    Example:
        >>> tick_month(202312)
        202401
    """
    year, month = year_and_month(value)
    if month == MONTHS_PER_YEAR:
        return year_month(year + 1, 1)
    return value + 1


def length_in_months(start: int, end: int) -> int:
    """Number of months in the closed YearMonth range [start, end].

    Raises:
        InvalidArgumentError: If end is before start
    """
    if start > end:
        raise InvalidArgumentError(ErrorTemplate.period_inverted(start, end))
    start_year, start_month = year_and_month(start)
    end_year, end_month = year_and_month(end)
    return (end_year - start_year) * MONTHS_PER_YEAR + end_month - start_month + 1


# ============================================================================
# MONTH ARITHMETIC
# ============================================================================


def add_months(month: int, count: int) -> tuple[int, int]:
    """Add months to a month ordinal.

    Args:
        month: Month ordinal in [1, 12]
        count: Months to add (may be negative)

    Returns:
        Tuple of (month, year_delta) where year_delta is the number of
        year boundaries crossed

    Example:
        >>> add_months(10, 25)
        (11, 2)
    """
    year_delta, offset = divmod(check_month(month) - 1 + count, MONTHS_PER_YEAR)
    return offset + 1, year_delta


def subtract_months(month: int, count: int) -> tuple[int, int]:
    """Subtract months from a month ordinal.

    Example:
        >>> subtract_months(3, 3)
        (12, -1)
    """
    return add_months(month, -count)


# ============================================================================
# CALENDAR / FISCAL CONVERSION
# ============================================================================


def calendar_to_fiscal(
    calendar_year: int, calendar_month: int, fiscal_start: int
) -> tuple[int, int]:
    """Convert calendar coordinates to fiscal coordinates.

    Args:
        calendar_year: Calendar year
        calendar_month: Calendar month ordinal in [1, 12]
        fiscal_start: Calendar month in which the fiscal year starts

    Returns:
        Tuple of (fiscal_year, fiscal_month)

    Example:
        >>> calendar_to_fiscal(2022, 7, 7)
        (2023, 1)
        >>> calendar_to_fiscal(2022, 1, 7)
        (2022, 7)
    """
    if fiscal_start == 1:
        return calendar_year, calendar_month
    fiscal_month = calendar_month - (fiscal_start - 1)
    if fiscal_month < 1:
        fiscal_month += MONTHS_PER_YEAR
    fiscal_year = calendar_year + 1 if calendar_month >= fiscal_start else calendar_year
    return fiscal_year, fiscal_month


def fiscal_to_calendar(
    fiscal_year: int, fiscal_month: int, fiscal_start: int
) -> tuple[int, int]:
    """Convert fiscal coordinates to calendar coordinates.

    Exact inverse of calendar_to_fiscal() for every fiscal_start.

    Example:
        >>> fiscal_to_calendar(2023, 7, 7)
        (2023, 1)
        >>> fiscal_to_calendar(2022, 1, 7)
        (2021, 7)
    """
    if fiscal_start == 1:
        return fiscal_year, fiscal_month
    calendar_year = fiscal_year - 1 if fiscal_start + fiscal_month <= 13 else fiscal_year
    calendar_month = fiscal_month + fiscal_start - 1
    if calendar_month > MONTHS_PER_YEAR:
        calendar_month -= MONTHS_PER_YEAR
    return calendar_year, calendar_month


def calendar_year_of(fiscal_year: int, calendar_month: int, fiscal_start: int) -> int:
    """Calendar year in which a calendar month of a fiscal year falls.

    With a July start, November of FY2025 is November 2024 while
    February of FY2025 is February 2025.
    """
    if fiscal_start != 1 and calendar_month >= fiscal_start:
        return fiscal_year - 1
    return fiscal_year


# ============================================================================
# DISPLAY
# ============================================================================


def display_year(year: int, short_year: bool = False) -> str:
    """Render a year, optionally as two digits (2023 -> "23")."""
    if short_year:
        return f"{year % 100:02d}"
    return str(year)
