"""Period configuration: fiscal alignment and rendering.

Provides a frozen dataclass holding the fiscal year start month and the
padding used when periods are rendered, plus a context-local "current"
configuration that construction helpers and the parser fall back to when
no explicit ``config=`` is passed.

Architecture:
    - PeriodConfig: Immutable value, validated at construction
    - get_config / set_config / reset_config: ContextVar access
    - use_config: Context manager scoping an override

Thread Safety:
    The current configuration lives in a ContextVar. Each thread and each
    asyncio task sees its own value; overrides never leak between them.
    Periods capture the configuration in force when they are built, so a
    later override never changes how an existing period converts or renders.

Python 3.13+.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace

from bizcalendar.constants import DEFAULT_FISCAL_YEAR_START_MONTH, MONTHS_PER_QUARTER
from bizcalendar.core.yearmonth import check_fiscal_start
from bizcalendar.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = [
    "DEFAULT_CONFIG",
    "PeriodConfig",
    "get_config",
    "reset_config",
    "set_config",
    "use_config",
]

logger = logging.getLogger(__name__)

_PAD_FIELDS = (
    "half_and_quarter_pad",
    "month_pad",
    "date_range_pad",
    "month_range_pad",
    "tbd_pad",
)


@dataclass(frozen=True, slots=True)
class PeriodConfig:
    """Immutable configuration for period construction and rendering.

    Constructing ``PeriodConfig()`` with no arguments produces the default
    configuration: July fiscal years and the canonical string format.

    Attributes:
        fiscal_year_start_month: Calendar month in which fiscal years start
            (default: 7). FY2024 then runs July 2023 through June 2024.
        half_and_quarter_pad: Text between the year and "Q"/"H" (default: " ").
        month_pad: Text between the year and a month name (default: " ").
        date_range_pad: Text around "-" in a cross-year range (default: " ").
        month_range_pad: Text around "-" in a same-year month range (default: "").
        tbd_pad: Text before "TBD" (default: ""). Lets TBD line up with
            other periods in fixed-width reports.
        short_year: Render years as two digits (default: False).

    Example:
        >>> from bizcalendar import FY, Oct
        >>> compact = PeriodConfig(month_pad="", short_year=True)
        >>> str(FY(2023, Oct, config=compact))
        'FY23Oct'
    """

    fiscal_year_start_month: int = DEFAULT_FISCAL_YEAR_START_MONTH
    half_and_quarter_pad: str = " "
    month_pad: str = " "
    date_range_pad: str = " "
    month_range_pad: str = ""
    tbd_pad: str = ""
    short_year: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            InvalidArgumentError: If the fiscal start is not a month ordinal,
                a pad is not a whitespace-only string, or short_year is not
                a bool.
        """
        check_fiscal_start(self.fiscal_year_start_month)
        for name in _PAD_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or (value and not value.isspace()):
                raise InvalidArgumentError(
                    ErrorTemplate.config_invalid(name, value, "must be a whitespace string")
                )
        if not isinstance(self.short_year, bool):
            raise InvalidArgumentError(
                ErrorTemplate.config_invalid("short_year", self.short_year, "must be a bool")
            )

    @property
    def quarter_aligned(self) -> bool:
        """Fiscal quarters coincide with calendar quarters."""
        return self.fiscal_year_start_month % MONTHS_PER_QUARTER == 1

    @property
    def half_aligned(self) -> bool:
        """Fiscal halves coincide with calendar halves."""
        return self.fiscal_year_start_month == 7

    @property
    def year_aligned(self) -> bool:
        """Fiscal years coincide with calendar years."""
        return self.fiscal_year_start_month == 1

    def with_fiscal_start(self, month: int) -> PeriodConfig:
        """Return a copy using a different fiscal year start month."""
        return replace(self, fiscal_year_start_month=month)


DEFAULT_CONFIG = PeriodConfig()

# Context-local current configuration. Explicit ``config=`` arguments always
# win; this value is consulted only when a caller passes none.
_current_config: ContextVar[PeriodConfig] = ContextVar(
    "bizcalendar_period_config", default=DEFAULT_CONFIG
)


def get_config() -> PeriodConfig:
    """Return the configuration in force for the current context."""
    return _current_config.get()


def set_config(config: PeriodConfig) -> Token[PeriodConfig]:
    """Replace the current configuration.

    Returns:
        Token for reset_config()
    """
    logger.debug("Period configuration set: %r", config)
    return _current_config.set(config)


def reset_config(token: Token[PeriodConfig]) -> None:
    """Restore the configuration saved by set_config()."""
    _current_config.reset(token)


class use_config:  # noqa: N801 - used like a function
    """Context manager scoping a configuration override.

    Usage:
        with use_config(fiscal_year_start_month=4):
            period = parse_period("FY2024 Q1")  # April-June 2023

        with use_config(PeriodConfig(short_year=True)):
            ...

    Keyword overrides are applied on top of ``config`` (or the current
    configuration when ``config`` is None).
    """

    __slots__ = ("_config", "_token")

    def __init__(self, config: PeriodConfig | None = None, **overrides: object) -> None:
        base = config if config is not None else get_config()
        self._config = replace(base, **overrides) if overrides else base  # type: ignore[arg-type]
        self._token: Token[PeriodConfig] | None = None

    def __enter__(self) -> PeriodConfig:
        self._token = set_config(self._config)
        return self._config

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._token is not None:
            reset_config(self._token)
            self._token = None
            logger.debug("Period configuration restored")
