"""Literate period construction.

Part builders name a piece of a year; ``CY()`` and ``FY()`` pick the year
numbering and apply the part:

    CY(2023, Sep)             # September 2023
    FY(2024, H1)              # July-December 2023 with a July fiscal start
    CY(23, Q3)                # two-digit years mean 20xx
    FY(2024)                  # the whole fiscal year
    CY(2022, Range(Oct, Jan)) # October 2022 through January 2023
    TBD(), Unknown()          # sentinels

Part builders are also callable directly: ``Q1(2023, YearKind.FY)``.

The ``current_*`` helpers build the period containing today's UTC date.

Python 3.13+.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from bizcalendar.config import PeriodConfig, get_config
from bizcalendar.constants import MONTHS_PER_HALF, MONTHS_PER_QUARTER
from bizcalendar.core.yearmonth import (
    calendar_to_fiscal,
    calendar_year_of,
    check_kind,
    check_month,
    check_year,
    year_month,
)
from bizcalendar.diagnostics import ErrorTemplate, InvalidArgumentError
from bizcalendar.enums import Granularity, YearKind
from bizcalendar.periods.period import Period

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Types
    "PartBuilder",
    "PeriodPart",
    # Year kinds
    "CY",
    "FY",
    # Parts
    "Y",
    "H1",
    "H2",
    "Q1",
    "Q2",
    "Q3",
    "Q4",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
    "Range",
    "MONTH_PARTS",
    "QUARTER_PARTS",
    "HALF_PARTS",
    # Sentinels
    "TBD",
    "Unknown",
    # Current period
    "current_half",
    "current_month",
    "current_quarter",
    "current_year",
]


class PartBuilder(Protocol):
    """Anything that builds a period from a year and a year kind."""

    def __call__(
        self, year: int, kind: YearKind = ..., *, config: PeriodConfig | None = ...
    ) -> Period: ...


@dataclass(frozen=True, slots=True)
class PeriodPart:
    """A named piece of a year: a month, quarter, half, month range or the year.

    Attributes:
        name: Display name ("Sep", "Q3", "Oct-Jan", ...)
        granularity: Shape of the built period
        ordinal: Month, quarter or half number (start month for ranges)
        end_ordinal: End month for ranges, otherwise equal to ordinal
    """

    name: str
    granularity: Granularity
    ordinal: int = 1
    end_ordinal: int = 1

    def __call__(
        self, year: int, kind: YearKind = YearKind.CY, *, config: PeriodConfig | None = None
    ) -> Period:
        """Build this part of ``year`` in the given year kind."""
        match self.granularity:
            case Granularity.MONTH:
                return Period.month(kind, year, self.ordinal, config=config)
            case Granularity.QUARTER:
                return Period.quarter(kind, year, self.ordinal, config=config)
            case Granularity.HALF:
                return Period.half(kind, year, self.ordinal, config=config)
            case Granularity.YEAR:
                return Period.year(kind, year, config=config)
            case _:
                return self._month_range(year, kind, config)

    def _month_range(self, year: int, kind: YearKind, config: PeriodConfig | None) -> Period:
        # A fiscal range starting at or after the fiscal start month begins in
        # the previous calendar year: FY2022 Oct-Jan is Oct 2021 - Jan 2022.
        cfg = config if config is not None else get_config()
        kind = check_kind(kind)
        start_year = check_year(year)
        if kind is YearKind.FY:
            start_year = calendar_year_of(start_year, self.ordinal, cfg.fiscal_year_start_month)
        end_year = start_year + 1 if self.ordinal > self.end_ordinal else start_year
        return Period(
            kind,
            year_month(start_year, self.ordinal),
            year_month(end_year, self.end_ordinal),
            Granularity.RANGE,
            cfg,
        )


def _month(name: str, ordinal: int) -> PeriodPart:
    return PeriodPart(name, Granularity.MONTH, ordinal, ordinal)


Y = PeriodPart("Y", Granularity.YEAR)
H1 = PeriodPart("H1", Granularity.HALF, 1, 1)
H2 = PeriodPart("H2", Granularity.HALF, 2, 2)
Q1 = PeriodPart("Q1", Granularity.QUARTER, 1, 1)
Q2 = PeriodPart("Q2", Granularity.QUARTER, 2, 2)
Q3 = PeriodPart("Q3", Granularity.QUARTER, 3, 3)
Q4 = PeriodPart("Q4", Granularity.QUARTER, 4, 4)
Jan = _month("Jan", 1)
Feb = _month("Feb", 2)
Mar = _month("Mar", 3)
Apr = _month("Apr", 4)
May = _month("May", 5)
Jun = _month("Jun", 6)
Jul = _month("Jul", 7)
Aug = _month("Aug", 8)
Sep = _month("Sep", 9)
Oct = _month("Oct", 10)
Nov = _month("Nov", 11)
Dec = _month("Dec", 12)

MONTH_PARTS: tuple[PeriodPart, ...] = (Jan, Feb, Mar, Apr, May, Jun, Jul, Aug, Sep, Oct, Nov, Dec)
QUARTER_PARTS: tuple[PeriodPart, ...] = (Q1, Q2, Q3, Q4)
HALF_PARTS: tuple[PeriodPart, ...] = (H1, H2)


def Range(start: PeriodPart, end: PeriodPart) -> PeriodPart:  # noqa: N802 - literate API
    """Part builder for a run of months, ``Range(Oct, Jan)``.

    Args:
        start: First month part
        end: Last month part; before ``start`` means the next year

    Raises:
        InvalidArgumentError: If either part is not a month
    """
    for part in (start, end):
        if part.granularity is not Granularity.MONTH:
            raise InvalidArgumentError(
                ErrorTemplate.operation_unsupported("Range", part.granularity)
            )
    return PeriodPart(
        f"{start.name}-{end.name}",
        Granularity.RANGE,
        check_month(start.ordinal),
        check_month(end.ordinal),
    )


def CY(  # noqa: N802 - literate API
    year: int, part: PartBuilder = Y, *, config: PeriodConfig | None = None
) -> Period:
    """Build ``part`` of calendar year ``year``: ``CY(2023, Sep)``."""
    return part(year, YearKind.CY, config=config)


def FY(  # noqa: N802 - literate API
    year: int, part: PartBuilder = Y, *, config: PeriodConfig | None = None
) -> Period:
    """Build ``part`` of fiscal year ``year``: ``FY(2023, H1)``."""
    return part(year, YearKind.FY, config=config)


def TBD(*, config: PeriodConfig | None = None) -> Period:  # noqa: N802 - literate API
    """To-be-determined sentinel."""
    return Period.tbd(config=config)


def Unknown(*, config: PeriodConfig | None = None) -> Period:  # noqa: N802 - literate API
    """Unknown sentinel."""
    return Period.unknown(config=config)


# ============================================================================
# CURRENT PERIOD
# ============================================================================


def _today(
    kind: YearKind,
    fiscal_year_start_month: int | None,
    today: date | None,
    config: PeriodConfig | None,
) -> tuple[int, int, int, PeriodConfig]:
    """Resolve today's (own-kind year, own-kind month, calendar month, config)."""
    cfg = config if config is not None else get_config()
    if fiscal_year_start_month is not None:
        cfg = cfg.with_fiscal_start(fiscal_year_start_month)
    day = today if today is not None else datetime.now(UTC).date()
    year, month = day.year, day.month
    if check_kind(kind) is YearKind.FY:
        year, month = calendar_to_fiscal(year, month, cfg.fiscal_year_start_month)
    return year, month, day.month, cfg


def current_month(
    kind: YearKind = YearKind.CY,
    fiscal_year_start_month: int | None = None,
    *,
    today: date | None = None,
    config: PeriodConfig | None = None,
) -> Period:
    """Month containing today's UTC date.

    Args:
        kind: Year kind of the result
        fiscal_year_start_month: Overrides the configured fiscal start
        today: Date to use instead of the system clock
        config: Configuration to use instead of the current one
    """
    year, _, calendar_month, cfg = _today(kind, fiscal_year_start_month, today, config)
    return Period.month(kind, year, calendar_month, config=cfg)


def current_quarter(
    kind: YearKind = YearKind.CY,
    fiscal_year_start_month: int | None = None,
    *,
    today: date | None = None,
    config: PeriodConfig | None = None,
) -> Period:
    """Quarter containing today's UTC date."""
    year, month, _, cfg = _today(kind, fiscal_year_start_month, today, config)
    return Period.quarter(kind, year, math.ceil(month / MONTHS_PER_QUARTER), config=cfg)


def current_half(
    kind: YearKind = YearKind.CY,
    fiscal_year_start_month: int | None = None,
    *,
    today: date | None = None,
    config: PeriodConfig | None = None,
) -> Period:
    """Half containing today's UTC date."""
    year, month, _, cfg = _today(kind, fiscal_year_start_month, today, config)
    return Period.half(kind, year, math.ceil(month / MONTHS_PER_HALF), config=cfg)


def current_year(
    kind: YearKind = YearKind.CY,
    fiscal_year_start_month: int | None = None,
    *,
    today: date | None = None,
    config: PeriodConfig | None = None,
) -> Period:
    """Calendar or fiscal year containing today's UTC date."""
    year, _, _, cfg = _today(kind, fiscal_year_start_month, today, config)
    return Period.year(kind, year, config=cfg)
