"""bizcalendar - calendar and fiscal business periods.

Models business periods such as "FY2023 Q2", "CY22 Sep" or "FY2024": closed
runs of calendar months displayed in calendar or fiscal years, plus the TBD
and Unknown sentinels for unscheduled work. Provides literate construction,
display ordering, containment, calendar/fiscal conversion, canonical
rendering, and a forgiving parser that reads the rendering back.

Public API:
    Period - Immutable period value
    CY / FY - Literate constructors: CY(2023, Sep), FY(2024, H1)
    Jan..Dec, Q1..Q4, H1, H2, Y, Range - Parts of a year
    TBD / Unknown - Sentinel periods
    current_month / current_quarter / current_half / current_year
    parse_period / try_parse_period / PeriodParser - Parsing
    PeriodConfig / use_config - Fiscal alignment and rendering options
    YearKind / Granularity - Enumerations

Exceptions:
    BizPeriodError - Base exception class
    InvalidArgumentError - Unusable argument
    OutOfRangeError - Month, year, quarter or half out of range
    PeriodParseError - Unparseable period string
    UnexpectedTokenError - Grammar violation

Submodules:
    bizcalendar.core - YearMonth arithmetic and month names
    bizcalendar.diagnostics - Error codes, templates and formatting
    bizcalendar.syntax - Tokenizer and parser
"""

from .config import DEFAULT_CONFIG, PeriodConfig, get_config, use_config
from .diagnostics import (
    BizPeriodError,
    InvalidArgumentError,
    OutOfRangeError,
    PeriodParseError,
    UnexpectedTokenError,
)
from .enums import Granularity, YearKind
from .periods import (
    CY,
    FY,
    H1,
    H2,
    Q1,
    Q2,
    Q3,
    Q4,
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
    Period,
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
from .syntax import PeriodParser, parse_period, try_parse_period

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("bizcalendar")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CY",
    "DEFAULT_CONFIG",
    "FY",
    "H1",
    "H2",
    "Q1",
    "Q2",
    "Q3",
    "Q4",
    "TBD",
    "Apr",
    "Aug",
    "BizPeriodError",
    "Dec",
    "Feb",
    "Granularity",
    "InvalidArgumentError",
    "Jan",
    "Jul",
    "Jun",
    "Mar",
    "May",
    "Nov",
    "Oct",
    "OutOfRangeError",
    "Period",
    "PeriodConfig",
    "PeriodParseError",
    "PeriodParser",
    "PeriodPart",
    "Range",
    "Sep",
    "UnexpectedTokenError",
    "Unknown",
    "Y",
    "YearKind",
    "__version__",
    "current_half",
    "current_month",
    "current_quarter",
    "current_year",
    "get_config",
    "parse_period",
    "try_parse_period",
    "use_config",
]
