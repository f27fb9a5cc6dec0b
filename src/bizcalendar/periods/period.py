"""Period value type.

A Period is an immutable closed range of calendar months, tagged with the
year kind used to display it (calendar or fiscal) and a granularity
(month, quarter, half, year, generic range, or one of the TBD / Unknown
sentinels).

Architecture:
    - One frozen record for every variant; the granularity tag selects
      rendering and conversion behavior through ``match``.
    - Bounds are YearMonth integers in calendar coordinates, so ordering
      and containment are integer comparisons regardless of kind.
    - Each period captures the PeriodConfig in force when it was built.
      Fiscal accessors, conversions and rendering read that captured
      configuration, never the ambient one.
    - The canonical string is computed once, in ``__post_init__``.

Ordering:
    compare() sorts for display: earlier periods first, and a period before
    the shorter periods it contains. It is equivalent to ordering on
    ``(start asc, end desc)``. The rich comparison operators delegate to it,
    so ``sorted(periods)`` produces the display order.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from bizcalendar.config import PeriodConfig, get_config
from bizcalendar.constants import (
    HALVES_PER_YEAR,
    MAX_YEAR,
    MIN_PERIOD_YEAR,
    MONTHS_PER_HALF,
    MONTHS_PER_QUARTER,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
    SENTINEL_YEAR,
    TBD_MONTH,
    TBD_TEXT,
    UNKNOWN_MONTH,
    UNKNOWN_TEXT,
)
from bizcalendar.core.months import month_abbreviation
from bizcalendar.core.yearmonth import (
    add_months,
    calendar_to_fiscal,
    calendar_year_of,
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
from bizcalendar.diagnostics import (
    ErrorTemplate,
    InvalidArgumentError,
    OutOfRangeError,
)
from bizcalendar.enums import Granularity, YearKind

__all__ = ["Period"]

logger = logging.getLogger(__name__)

_FIXED_LENGTHS: dict[Granularity, int] = {
    Granularity.MONTH: 1,
    Granularity.QUARTER: MONTHS_PER_QUARTER,
    Granularity.HALF: MONTHS_PER_HALF,
    Granularity.YEAR: MONTHS_PER_YEAR,
}

# Own-kind start months at which each fixed granularity may begin.
_ALIGNED_STARTS: dict[Granularity, tuple[int, ...]] = {
    Granularity.MONTH: tuple(range(1, MONTHS_PER_YEAR + 1)),
    Granularity.QUARTER: (1, 4, 7, 10),
    Granularity.HALF: (1, 7),
    Granularity.YEAR: (1,),
}

_SENTINEL_MONTHS: dict[Granularity, int] = {
    Granularity.TBD: TBD_MONTH,
    Granularity.UNKNOWN: UNKNOWN_MONTH,
}

# Real periods end before the first sentinel slot.
_FIRST_SENTINEL: int = year_month(SENTINEL_YEAR, TBD_MONTH)


def _resolve(config: PeriodConfig | None) -> PeriodConfig:
    return config if config is not None else get_config()


@dataclass(frozen=True, slots=True, eq=False)
class Period:
    """Immutable closed range of calendar months.

    Prefer the classmethod constructors (``Period.quarter()`` and friends),
    the ``CY()`` / ``FY()`` helpers, or ``parse_period()`` over the raw
    constructor. The raw constructor takes calendar YearMonth bounds and
    validates that they fit the granularity.

    Attributes:
        kind: Year numbering used for display (CY or FY)
        start_year_month: First month, ``year * 100 + month``, calendar
        end_year_month: Last month, ``year * 100 + month``, calendar
        granularity: Variant tag
        config: Configuration captured at construction

    Example:
        >>> p = Period.half(YearKind.FY, 2024, 1)
        >>> (p.start_year_month, p.end_year_month)
        (202307, 202312)
        >>> str(p)
        'FY2024 H1'
    """

    kind: YearKind
    start_year_month: int
    end_year_month: int
    granularity: Granularity = Granularity.RANGE
    config: PeriodConfig = field(default_factory=get_config, repr=False)
    _text: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate bounds against the granularity and render the string.

        Raises:
            InvalidArgumentError: If the kind is unknown, the period ends
                before it starts, or the bounds do not form the granularity.
            OutOfRangeError: If a bound carries a month outside 1..12, or a
                real period reaches the sentinel slots or a calendar or fiscal
                year outside [100, 9999].
        """
        object.__setattr__(self, "kind", check_kind(self.kind))
        object.__setattr__(self, "granularity", Granularity(self.granularity))
        check_month(self.start_year_month % 100)
        check_month(self.end_year_month % 100)
        if self.start_year_month > self.end_year_month:
            raise InvalidArgumentError(
                ErrorTemplate.period_inverted(self.start_year_month, self.end_year_month)
            )
        if not self.is_sentinel:
            self._check_years()
        self._check_shape()
        object.__setattr__(self, "_text", self._render())

    # ------------------------------------------------------------------
    # Variant constructors
    # ------------------------------------------------------------------

    @classmethod
    def range(
        cls,
        kind: YearKind,
        year: int,
        start_month: int,
        end_month: int,
        end_year: int | None = None,
        *,
        config: PeriodConfig | None = None,
    ) -> Period:
        """Generic run of months, in calendar coordinates.

        Args:
            kind: Display kind
            year: Calendar year of the start month (two-digit shorthand allowed)
            start_month: Calendar start month
            end_month: Calendar end month
            end_year: Calendar year of the end month. When omitted, the end
                falls in the start year, or the next one if end_month is
                before start_month (Oct-Jan).

        Raises:
            OutOfRangeError: If a month or year is out of range
            InvalidArgumentError: If the end falls before the start
        """
        start_year = check_year(year)
        check_month(start_month)
        check_month(end_month)
        if end_year is None:
            final_year = start_year + 1 if start_month > end_month else start_year
        else:
            final_year = check_year(end_year)
        return cls(
            kind,
            year_month(start_year, start_month),
            year_month(final_year, end_month),
            Granularity.RANGE,
            _resolve(config),
        )

    @classmethod
    def month(
        cls, kind: YearKind, year: int, month: int, *, config: PeriodConfig | None = None
    ) -> Period:
        """Single month of a calendar or fiscal year.

        For FY periods, months at or after the fiscal start belong to the
        previous calendar year: with a July start, FY2025 Nov is Nov 2024.
        """
        cfg = _resolve(config)
        kind = check_kind(kind)
        full_year = check_year(year)
        check_month(month)
        if kind is YearKind.FY:
            full_year = calendar_year_of(full_year, month, cfg.fiscal_year_start_month)
        bound = year_month(full_year, month)
        return cls(kind, bound, bound, Granularity.MONTH, cfg)

    @classmethod
    def quarter(
        cls, kind: YearKind, year: int, quarter: int, *, config: PeriodConfig | None = None
    ) -> Period:
        """Quarter ``quarter`` (1..4) of a calendar or fiscal year.

        Raises:
            OutOfRangeError: If quarter is not in [1, 4]
        """
        if not 1 <= quarter <= QUARTERS_PER_YEAR:
            raise OutOfRangeError(ErrorTemplate.quarter_out_of_range(quarter))
        return cls._fixed_span(
            kind, year, quarter * MONTHS_PER_QUARTER, Granularity.QUARTER, config
        )

    @classmethod
    def half(
        cls, kind: YearKind, year: int, half: int, *, config: PeriodConfig | None = None
    ) -> Period:
        """Half ``half`` (1..2) of a calendar or fiscal year.

        Raises:
            OutOfRangeError: If half is not in [1, 2]
        """
        if not 1 <= half <= HALVES_PER_YEAR:
            raise OutOfRangeError(ErrorTemplate.half_out_of_range(half))
        return cls._fixed_span(kind, year, half * MONTHS_PER_HALF, Granularity.HALF, config)

    @classmethod
    def year(cls, kind: YearKind, year: int, *, config: PeriodConfig | None = None) -> Period:
        """Whole calendar year, or whole fiscal year starting at the fiscal start."""
        return cls._fixed_span(kind, year, MONTHS_PER_YEAR, Granularity.YEAR, config)

    @classmethod
    def tbd(cls, *, config: PeriodConfig | None = None) -> Period:
        """To-be-determined sentinel, sorted after every real period."""
        bound = year_month(SENTINEL_YEAR, TBD_MONTH)
        return cls(YearKind.CY, bound, bound, Granularity.TBD, _resolve(config))

    @classmethod
    def unknown(cls, *, config: PeriodConfig | None = None) -> Period:
        """Unknown sentinel, sorted after TBD."""
        bound = year_month(SENTINEL_YEAR, UNKNOWN_MONTH)
        return cls(YearKind.CY, bound, bound, Granularity.UNKNOWN, _resolve(config))

    @classmethod
    def _fixed_span(
        cls,
        kind: YearKind,
        year: int,
        end_month: int,
        granularity: Granularity,
        config: PeriodConfig | None,
    ) -> Period:
        """Span of a fixed length ending at own-kind month ``end_month``."""
        cfg = _resolve(config)
        kind = check_kind(kind)
        full_year = check_year(year)
        if kind is YearKind.FY:
            end_year, end_calendar_month = fiscal_to_calendar(
                full_year, end_month, cfg.fiscal_year_start_month
            )
        else:
            end_year, end_calendar_month = full_year, end_month
        start_month, year_delta = subtract_months(
            end_calendar_month, _FIXED_LENGTHS[granularity] - 1
        )
        return cls(
            kind,
            year_month(end_year + year_delta, start_month),
            year_month(end_year, end_calendar_month),
            granularity,
            cfg,
        )

    # ------------------------------------------------------------------
    # Validation and rendering
    # ------------------------------------------------------------------

    def _check_shape(self) -> None:
        granularity = self.granularity
        if granularity in _SENTINEL_MONTHS:
            bound = year_month(SENTINEL_YEAR, _SENTINEL_MONTHS[granularity])
            if (
                self.kind is YearKind.CY
                and self.start_year_month == bound
                and self.end_year_month == bound
            ):
                return
        elif granularity is Granularity.RANGE or (
            self.length_in_months() == _FIXED_LENGTHS[granularity]
            and self._own_start_month() in _ALIGNED_STARTS[granularity]
        ):
            return
        raise InvalidArgumentError(
            ErrorTemplate.granularity_mismatch(
                granularity, self.kind, self.start_year_month, self.end_year_month
            )
        )

    def _check_years(self) -> None:
        # Fiscal years never trail calendar years, so the start calendar year
        # and the end fiscal year bound every displayed year.
        if (
            self.start_calendar_year < MIN_PERIOD_YEAR
            or self.end_fiscal_year > MAX_YEAR
            or self.end_year_month >= _FIRST_SENTINEL
        ):
            raise OutOfRangeError(
                ErrorTemplate.period_out_of_range(
                    self.start_year_month, self.end_year_month, MIN_PERIOD_YEAR, MAX_YEAR
                )
            )

    def _own_month(self, value: int) -> int:
        """Month ordinal of a YearMonth in this period's own year numbering."""
        if self.kind is YearKind.FY:
            return calendar_to_fiscal(
                *year_and_month(value), self.config.fiscal_year_start_month
            )[1]
        return value % 100

    def _own_start_month(self) -> int:
        return self._own_month(self.start_year_month)

    def _own_end(self) -> tuple[int, int]:
        if self.kind is YearKind.FY:
            return self.end_fiscal_year, self.end_fiscal_month
        return self.end_calendar_year, self.end_calendar_month

    def _year_text(self, year: int) -> str:
        return f"{self.kind}{display_year(year, self.config.short_year)}"

    def _render(self) -> str:
        cfg = self.config
        match self.granularity:
            case Granularity.TBD:
                return f"{cfg.tbd_pad}{TBD_TEXT}"
            case Granularity.UNKNOWN:
                return UNKNOWN_TEXT
            case Granularity.QUARTER:
                year, month = self._own_end()
                ordinal = math.ceil(month / MONTHS_PER_QUARTER)
                return f"{self._year_text(year)}{cfg.half_and_quarter_pad}Q{ordinal}"
            case Granularity.HALF:
                year, month = self._own_end()
                ordinal = math.ceil(month / MONTHS_PER_HALF)
                return f"{self._year_text(year)}{cfg.half_and_quarter_pad}H{ordinal}"
            case Granularity.YEAR:
                if self.kind is YearKind.FY:
                    return self._year_text(self.start_fiscal_year)
                return self._year_text(self.start_calendar_year)
            case Granularity.MONTH | Granularity.RANGE:
                return self._render_months()

    def _render_months(self) -> str:
        cfg = self.config
        if self.kind is YearKind.FY:
            start_year, end_year = self.start_fiscal_year, self.end_fiscal_year
        else:
            start_year, end_year = self.start_calendar_year, self.end_calendar_year
        start_name = month_abbreviation(self.start_calendar_month)
        end_name = month_abbreviation(self.end_calendar_month)
        head = f"{self._year_text(start_year)}{cfg.month_pad}{start_name}"
        if start_year != end_year:
            # FY2023 Jan - FY2024 Dec
            pad = cfg.date_range_pad
            return f"{head}{pad}-{pad}{self._year_text(end_year)}{cfg.month_pad}{end_name}"
        if self.start_calendar_month == self.end_calendar_month:
            # CY2022 Sep
            return head
        # CY2023 Feb-Oct
        pad = cfg.month_range_pad
        return f"{head}{pad}-{pad}{end_name}"

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.start_year_month, self.end_year_month))

    def __lt__(self, other: Period) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Period) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Period) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Period) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) >= 0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def start_calendar_year(self) -> int:
        return self.start_year_month // 100

    @property
    def start_calendar_month(self) -> int:
        return self.start_year_month % 100

    @property
    def end_calendar_year(self) -> int:
        return self.end_year_month // 100

    @property
    def end_calendar_month(self) -> int:
        return self.end_year_month % 100

    @property
    def start_fiscal_year(self) -> int:
        return calendar_to_fiscal(
            *year_and_month(self.start_year_month), self.config.fiscal_year_start_month
        )[0]

    @property
    def start_fiscal_month(self) -> int:
        return calendar_to_fiscal(
            *year_and_month(self.start_year_month), self.config.fiscal_year_start_month
        )[1]

    @property
    def end_fiscal_year(self) -> int:
        return calendar_to_fiscal(
            *year_and_month(self.end_year_month), self.config.fiscal_year_start_month
        )[0]

    @property
    def end_fiscal_month(self) -> int:
        return calendar_to_fiscal(
            *year_and_month(self.end_year_month), self.config.fiscal_year_start_month
        )[1]

    @property
    def is_sentinel(self) -> bool:
        """True for TBD and Unknown."""
        return self.granularity in _SENTINEL_MONTHS

    def is_calendar_period(self) -> bool:
        return self.kind is YearKind.CY

    def is_fiscal_period(self) -> bool:
        return self.kind is YearKind.FY

    def length_in_months(self) -> int:
        """Number of months covered, bounds included."""
        return length_in_months(self.start_year_month, self.end_year_month)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: Period) -> int:
        """Display order of two periods.

        Returns:
            -1 if this sorts first, 0 if both cover the same months,
            1 if other sorts first. A period that starts earlier sorts
            first; with equal starts the longer period sorts first.
        """
        if self.is_before(other):
            return -1
        if self.is_after(other):
            return 1
        if self.starts_before(other):
            return -1
        if self.starts_same_month(other) and self.ends_same_month(other):
            return 0
        if self.contains(other):
            return -1
        return 1

    def contains(self, other: Period) -> bool:
        """True if every month of other is inside this period."""
        return (
            self.start_year_month <= other.start_year_month
            and other.end_year_month <= self.end_year_month
        )

    def equals(self, other: Period) -> bool:
        """True if both periods cover the same months in a compatible kind.

        The kind test accepts periods that agree on being fiscal or agree on
        being calendar. With two kinds, a CY and an FY period never agree on
        either, so ``CY(2025, Jun)`` does not equal ``FY(2025, Jun)`` even
        though both cover June 2025; compare() still returns 0 for them.
        """
        return (
            self.is_fiscal_period() == other.is_fiscal_period()
            or self.is_calendar_period() == other.is_calendar_period()
        ) and (
            self.start_year_month == other.start_year_month
            and self.end_year_month == other.end_year_month
        )

    def ends_after(self, other: Period) -> bool:
        return self.end_year_month > other.end_year_month

    def ends_before(self, other: Period) -> bool:
        return self.end_year_month < other.end_year_month

    def ends_same_month(self, other: Period) -> bool:
        return self.end_year_month == other.end_year_month

    def starts_after(self, other: Period) -> bool:
        return self.start_year_month > other.start_year_month

    def starts_before(self, other: Period) -> bool:
        return self.start_year_month < other.start_year_month

    def starts_same_month(self, other: Period) -> bool:
        return self.start_year_month == other.start_year_month

    def is_after(self, other: Period) -> bool:
        """True if this starts after other ends (no overlap)."""
        return self.start_year_month > other.end_year_month

    def is_before(self, other: Period) -> bool:
        """True if this ends before other starts (no overlap)."""
        return self.end_year_month < other.start_year_month

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_calendar(self, *, config: PeriodConfig | None = None) -> Period:
        """Same months displayed in calendar years.

        Args:
            config: Configuration for the result. Defaults to the one this
                period captured.
        """
        return self._convert(YearKind.CY, config)

    def to_fiscal(self, *, config: PeriodConfig | None = None) -> Period:
        """Same months displayed in fiscal years.

        Args:
            config: Configuration for the result, e.g. another fiscal start.
                Defaults to the one this period captured.

        Example:
            >>> april = PeriodConfig(fiscal_year_start_month=4)
            >>> str(Period.quarter(YearKind.CY, 2023, 2).to_fiscal(config=april))
            'FY2024 Q1'
        """
        return self._convert(YearKind.FY, config)

    def _convert(self, kind: YearKind, config: PeriodConfig | None) -> Period:
        if config is None and (self.kind is kind or self.is_sentinel):
            return self
        cfg = self.config if config is None else config
        if self.is_sentinel:
            return Period(
                self.kind, self.start_year_month, self.end_year_month, self.granularity, cfg
            )
        match self.granularity:
            case _ if self.kind is kind:
                granularity = (
                    self.granularity if self._keeps_shape_under(cfg) else Granularity.RANGE
                )
            case Granularity.MONTH:
                granularity = Granularity.MONTH
            case Granularity.QUARTER if cfg.quarter_aligned:
                granularity = Granularity.QUARTER
            case Granularity.HALF if cfg.half_aligned:
                granularity = Granularity.HALF
            case Granularity.YEAR if cfg.year_aligned:
                granularity = Granularity.YEAR
            case _:
                granularity = Granularity.RANGE
        if granularity is not self.granularity:
            logger.debug(
                "%s as %s is a month range: fiscal year starts in month %d",
                self,
                kind,
                cfg.fiscal_year_start_month,
            )
        return Period(kind, self.start_year_month, self.end_year_month, granularity, cfg)

    def _keeps_shape_under(self, cfg: PeriodConfig) -> bool:
        """True if the bounds still form this granularity in this kind under cfg."""
        if self.kind is YearKind.CY or self.granularity is Granularity.RANGE:
            return True
        month = calendar_to_fiscal(
            *year_and_month(self.start_year_month), cfg.fiscal_year_start_month
        )[1]
        return month in _ALIGNED_STARTS[self.granularity]

    # ------------------------------------------------------------------
    # Dividing
    # ------------------------------------------------------------------

    def first_month(self) -> Period:
        """The first month of this period, same kind."""
        bound = self.start_year_month
        return Period(self.kind, bound, bound, Granularity.MONTH, self.config)

    def last_month(self) -> Period:
        """The last month of this period, same kind."""
        bound = self.end_year_month
        return Period(self.kind, bound, bound, Granularity.MONTH, self.config)

    def to_months(self) -> list[Period]:
        """One MONTH period per covered month, in order. Sentinels return themselves."""
        if self.is_sentinel:
            return [self]
        months: list[Period] = []
        current = self.start_year_month
        while current <= self.end_year_month:
            months.append(Period(self.kind, current, current, Granularity.MONTH, self.config))
            current = tick_month(current)
        return months

    def divide(self) -> list[Period]:
        """Split into the next smaller granularity.

        Years split into halves, halves into quarters, and quarters and
        ranges into months. Months and sentinels return themselves.
        """
        match self.granularity:
            case Granularity.YEAR:
                return self._split(MONTHS_PER_HALF, Granularity.HALF)
            case Granularity.HALF:
                return self._split(MONTHS_PER_QUARTER, Granularity.QUARTER)
            case Granularity.MONTH | Granularity.TBD | Granularity.UNKNOWN:
                return [self]
            case Granularity.QUARTER | Granularity.RANGE:
                return self.to_months()

    def _split(self, size: int, granularity: Granularity) -> list[Period]:
        parts: list[Period] = []
        start_year, start_month = year_and_month(self.start_year_month)
        for offset in range(0, self.length_in_months(), size):
            first, first_delta = add_months(start_month, offset)
            last, last_delta = add_months(start_month, offset + size - 1)
            parts.append(
                Period(
                    self.kind,
                    year_month(start_year + first_delta, first),
                    year_month(start_year + last_delta, last),
                    granularity,
                    self.config,
                )
            )
        return parts

    # ------------------------------------------------------------------
    # Quarter and half relationships
    # ------------------------------------------------------------------

    def in_half(self) -> int:
        """Half (1 or 2) of its own kind's year that this quarter falls in.

        Raises:
            InvalidArgumentError: If this period is not a quarter
        """
        if self.granularity is not Granularity.QUARTER:
            raise InvalidArgumentError(
                ErrorTemplate.operation_unsupported("in_half", self.granularity)
            )
        return 1 if self._own_start_month() in (1, 4) else 2

    def in_same_half_as(self, other: Period) -> bool:
        """True if two quarters are adjacent and together form a half.

        Raises:
            InvalidArgumentError: If this period is not a quarter
        """
        if self.granularity is not Granularity.QUARTER:
            raise InvalidArgumentError(
                ErrorTemplate.operation_unsupported("in_same_half_as", self.granularity)
            )
        if other.granularity is not Granularity.QUARTER or not self._adjoins(other):
            return False
        # Judged in this period's configuration; other may use another fiscal start.
        start = min(self.start_year_month, other.start_year_month)
        return self._own_month(start) in _ALIGNED_STARTS[Granularity.HALF]

    def is_part_of_same_year_as(self, other: Period) -> bool:
        """True if two halves are the two halves of one year.

        Raises:
            InvalidArgumentError: If this period is not a half
        """
        if self.granularity is not Granularity.HALF:
            raise InvalidArgumentError(
                ErrorTemplate.operation_unsupported("is_part_of_same_year_as", self.granularity)
            )
        if other.granularity is not Granularity.HALF or not self._adjoins(other):
            return False
        start = min(self.start_year_month, other.start_year_month)
        return self._own_month(start) in _ALIGNED_STARTS[Granularity.YEAR]

    def _adjoins(self, other: Period) -> bool:
        """Same kind, and one period starts the month after the other ends."""
        return self.kind is other.kind and (
            tick_month(self.end_year_month) == other.start_year_month
            or tick_month(other.end_year_month) == self.start_year_month
        )

    # ------------------------------------------------------------------
    # Combining
    # ------------------------------------------------------------------

    def combined_with(self, other: Period) -> Period:
        """Smallest period covering both, displayed in this period's kind.

        Two quarters of the same half combine into that half, and the two
        halves of a year combine into the year.
        """
        start = min(self.start_year_month, other.start_year_month)
        end = max(self.end_year_month, other.end_year_month)
        granularity = Granularity.RANGE
        match self.granularity:
            case Granularity.QUARTER if self.in_same_half_as(other):
                granularity = Granularity.HALF
            case Granularity.HALF if self.is_part_of_same_year_as(other):
                granularity = Granularity.YEAR
        return Period(self.kind, start, end, granularity, self.config)

    def extended_to(self, other: Period) -> Period:
        """Period from this start through the end of ``other``.

        Raises:
            InvalidArgumentError: If other starts before this period or this
                period ends after other
        """
        if other.starts_before(self) or self.ends_after(other):
            raise InvalidArgumentError(
                ErrorTemplate.extension_invalid("to", str(self), str(other))
            )
        if self._combines_with(other):
            return self.combined_with(other)
        return Period(
            self.kind, self.start_year_month, other.end_year_month, Granularity.RANGE, self.config
        )

    def extended_from(self, other: Period) -> Period:
        """Period from the start of ``other`` through this end.

        Raises:
            InvalidArgumentError: If this period starts before other or other
                ends after this period
        """
        if self.starts_before(other) or other.ends_after(self):
            raise InvalidArgumentError(
                ErrorTemplate.extension_invalid("from", str(self), str(other))
            )
        if self._combines_with(other):
            return self.combined_with(other)
        return Period(
            self.kind, other.start_year_month, self.end_year_month, Granularity.RANGE, self.config
        )

    def _combines_with(self, other: Period) -> bool:
        return self.granularity is other.granularity and self.granularity in (
            Granularity.QUARTER,
            Granularity.HALF,
        )
