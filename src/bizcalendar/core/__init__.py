"""Core utilities shared across the periods and syntax layers.

This package provides the integer YearMonth arithmetic and month naming
that both Period construction and the parser depend on:

    core <- periods <- syntax

Exports:
    YearMonth helpers: encoding, validation, calendar/fiscal conversion
    Month names: English CLDR abbreviations

Python 3.13+.
"""

from .months import month_abbreviation, month_abbreviations, month_ordinal
from .yearmonth import (
    add_months,
    calendar_to_fiscal,
    calendar_year_of,
    check_fiscal_start,
    check_kind,
    check_month,
    check_year,
    display_year,
    fiscal_to_calendar,
    length_in_months,
    subtract_months,
    tick_month,
    year_and_month,
    year_month,
)

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
    "month_abbreviation",
    "month_abbreviations",
    "month_ordinal",
    "subtract_months",
    "tick_month",
    "year_and_month",
    "year_month",
]
