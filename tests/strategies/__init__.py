"""Hypothesis strategies for bizcalendar property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- periods: Fiscal alignments, configurations and periods

Usage:
    from tests.strategies import periods, period_configs
    from tests.strategies.periods import fiscal_year_start_months

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - periods
"""

from .periods import (
    calendar_months,
    common_fiscal_starts,
    fiscal_year_start_months,
    full_years,
    month_periods,
    pads,
    period_configs,
    periods,
    short_years,
    year_kinds,
)

__all__ = [
    "calendar_months",
    "common_fiscal_starts",
    "fiscal_year_start_months",
    "full_years",
    "month_periods",
    "pads",
    "period_configs",
    "periods",
    "short_years",
    "year_kinds",
]
