"""Period value type and literate construction helpers.

Exports:
    Period: Immutable closed range of calendar months
    PeriodPart: Callable piece of a year (month, quarter, half, range, year)
    CY / FY: Apply a part to a calendar or fiscal year
    Jan..Dec, Q1..Q4, H1, H2, Y, Range: Part builders
    TBD / Unknown: Sentinel constructors
    current_month / current_quarter / current_half / current_year

Python 3.13+.
"""

from .construction import (
    CY,
    FY,
    H1,
    H2,
    HALF_PARTS,
    MONTH_PARTS,
    Q1,
    Q2,
    Q3,
    Q4,
    QUARTER_PARTS,
    TBD,
    Apr,
    Aug,
    Dec,
    Feb,
    Jan,
    Jul,
    Jun,
    Mar,
    May,
    Nov,
    Oct,
    PartBuilder,
    PeriodPart,
    Range,
    Sep,
    Unknown,
    Y,
    current_half,
    current_month,
    current_quarter,
    current_year,
)
from .period import Period

__all__ = [
    "CY",
    "FY",
    "H1",
    "H2",
    "HALF_PARTS",
    "MONTH_PARTS",
    "Q1",
    "Q2",
    "Q3",
    "Q4",
    "QUARTER_PARTS",
    "TBD",
    "Apr",
    "Aug",
    "Dec",
    "Feb",
    "Jan",
    "Jul",
    "Jun",
    "Mar",
    "May",
    "Nov",
    "Oct",
    "PartBuilder",
    "Period",
    "PeriodPart",
    "Range",
    "Sep",
    "Unknown",
    "Y",
    "current_half",
    "current_month",
    "current_quarter",
    "current_year",
]
