"""Shared constants for bizcalendar.

This module provides centralized constants used across the core, periods
and syntax packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Fiscal defaults: Default fiscal year alignment
- Year limits: Accepted year range and short-year expansion
- Sentinels: Sort positions for TBD and Unknown
- Span lengths: Months covered by each fixed granularity
- Input limits: DoS prevention via size constraints

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fiscal defaults
    "DEFAULT_FISCAL_YEAR_START_MONTH",
    "MONTHS_PER_YEAR",
    # Year limits
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_PERIOD_YEAR",
    "SHORT_YEAR_LIMIT",
    "SHORT_YEAR_BASE",
    "MAX_YEAR_DIGITS",
    # Sentinels
    "SENTINEL_YEAR",
    "TBD_MONTH",
    "UNKNOWN_MONTH",
    "TBD_TEXT",
    "UNKNOWN_TEXT",
    # Span lengths
    "MONTHS_PER_QUARTER",
    "MONTHS_PER_HALF",
    "QUARTERS_PER_YEAR",
    "HALVES_PER_YEAR",
    # Input limits
    "MAX_PERIOD_TEXT_LENGTH",
]

# ============================================================================
# FISCAL DEFAULTS
# ============================================================================

# Fiscal years start in July unless configured otherwise.
# FY2024 therefore runs from July 2023 through June 2024.
DEFAULT_FISCAL_YEAR_START_MONTH: int = 7

MONTHS_PER_YEAR: int = 12

# ============================================================================
# YEAR LIMITS
# ============================================================================

# Inclusive bounds accepted by check_year() before short-year expansion.
# -1 is accepted and expands to 1999.
MIN_YEAR: int = -1
MAX_YEAR: int = 9999

# Smallest year a period may display. Lower years would render as
# shorthand and parse back into the 2000s.
MIN_PERIOD_YEAR: int = 100

# Years below this value are two-digit shorthand: 23 -> 2023.
SHORT_YEAR_LIMIT: int = 100
SHORT_YEAR_BASE: int = 2000

# Year numbers in period strings are at most four digits.
MAX_YEAR_DIGITS: int = 4

# ============================================================================
# SENTINELS
# ============================================================================

# TBD and Unknown are single-month pseudo-periods pinned after every real
# period. Unknown sorts after TBD.
SENTINEL_YEAR: int = 9999
TBD_MONTH: int = 11
UNKNOWN_MONTH: int = 12
TBD_TEXT: str = "TBD"
UNKNOWN_TEXT: str = "Unknown"

# ============================================================================
# SPAN LENGTHS
# ============================================================================

MONTHS_PER_QUARTER: int = 3
MONTHS_PER_HALF: int = 6
QUARTERS_PER_YEAR: int = 4
HALVES_PER_YEAR: int = 2

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest accepted period string. The longest canonical rendering is well
# under 40 characters; the limit leaves room for liberal whitespace while
# bounding tokenizer and backtracking work on hostile input.
MAX_PERIOD_TEXT_LENGTH: int = 256
