"""Tests for YearMonth arithmetic.

Tests cover:
- Validation: kind, month, year (two-digit shorthand), fiscal start
- Encoding and decoding of year * 100 + month integers
- tick_month and length_in_months across year boundaries
- add_months / subtract_months year deltas
- calendar_to_fiscal / fiscal_to_calendar for July, May and January starts
- calendar_year_of and display_year
"""

import pytest

from bizcalendar.core import (
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
from bizcalendar.diagnostics import DiagnosticCode, InvalidArgumentError, OutOfRangeError
from bizcalendar.enums import YearKind


class TestValidation:
    """Tests for argument validation helpers."""

    def test_check_kind_accepts_members_and_values(self) -> None:
        """Kinds are accepted as enum members or their string values."""
        assert check_kind(YearKind.CY) is YearKind.CY
        assert check_kind("FY") is YearKind.FY

    def test_check_kind_rejects_unknown(self) -> None:
        """Anything but CY and FY is rejected with KIND_INVALID."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            check_kind("QY")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.KIND_INVALID

    @pytest.mark.parametrize("month", [1, 6, 12])
    def test_check_month_accepts_ordinals(self, month: int) -> None:
        """Months 1..12 pass through unchanged."""
        assert check_month(month) == month

    @pytest.mark.parametrize("month", [0, 13, -1, 100])
    def test_check_month_rejects_out_of_range(self, month: int) -> None:
        """Months outside 1..12 raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError, match=f"{month} is not a month"):
            check_month(month)

    def test_out_of_range_is_value_error(self) -> None:
        """OutOfRangeError can be caught as ValueError."""
        with pytest.raises(ValueError, match="is not a month"):
            check_month(0)

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(23, 2023), (0, 2000), (-1, 1999), (99, 2099), (100, 100), (2023, 2023), (9999, 9999)],
    )
    def test_check_year_expands_short_years(self, year: int, expected: int) -> None:
        """Years below 100 mean 20xx; others are kept."""
        assert check_year(year) == expected

    @pytest.mark.parametrize("year", [-2, 10000, 20245])
    def test_check_year_rejects_out_of_range(self, year: int) -> None:
        """Years outside [-1, 9999] raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError) as exc_info:
            check_year(year)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.YEAR_OUT_OF_RANGE

    @pytest.mark.parametrize("month", [0, 13, True, 7.0, "7"])
    def test_check_fiscal_start_rejects(self, month: object) -> None:
        """Fiscal start must be a real int in 1..12; bools are not ints here."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            check_fiscal_start(month)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FISCAL_START_INVALID


class TestEncoding:
    """Tests for YearMonth encoding, tick_month and length_in_months."""

    def test_round_trip(self) -> None:
        """year_and_month inverts year_month."""
        assert year_month(2023, 9) == 202309
        assert year_and_month(202309) == (2023, 9)

    def test_tick_month_within_year(self) -> None:
        """tick_month advances one month."""
        assert tick_month(202301) == 202302

    def test_tick_month_rolls_year(self) -> None:
        """December ticks to January of the next year."""
        assert tick_month(202312) == 202401

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            (202209, 202209, 1),
            (202210, 202212, 3),
            (202207, 202306, 12),
            (200001, 202011, 251),
        ],
    )
    def test_length_in_months(self, start: int, end: int, expected: int) -> None:
        """Both bounds are counted."""
        assert length_in_months(start, end) == expected

    def test_length_in_months_rejects_inverted(self) -> None:
        """A range that ends before it starts has no length."""
        with pytest.raises(InvalidArgumentError, match="cannot end"):
            length_in_months(202302, 202301)


class TestMonthArithmetic:
    """Tests for add_months and subtract_months."""

    @pytest.mark.parametrize(
        ("month", "count", "expected"),
        [
            (1, 0, (1, 0)),
            (10, 2, (12, 0)),
            (10, 3, (1, 1)),
            (10, 25, (11, 2)),
            (3, -3, (12, -1)),
            (1, -24, (1, -2)),
        ],
    )
    def test_add_months(self, month: int, count: int, expected: tuple[int, int]) -> None:
        """add_months reports the month and the year boundaries crossed."""
        assert add_months(month, count) == expected

    def test_subtract_months_is_negative_add(self) -> None:
        """subtract_months(m, n) equals add_months(m, -n)."""
        assert subtract_months(3, 3) == (12, -1)
        assert subtract_months(12, 11) == (1, 0)

    def test_add_months_validates_month(self) -> None:
        """The starting month must be an ordinal."""
        with pytest.raises(OutOfRangeError):
            add_months(13, 1)


class TestFiscalConversion:
    """Tests for calendar/fiscal coordinate conversion."""

    @pytest.mark.parametrize(
        ("calendar", "fiscal"),
        [
            ((2022, 7), (2023, 1)),
            ((2022, 12), (2023, 6)),
            ((2023, 1), (2023, 7)),
            ((2023, 6), (2023, 12)),
        ],
    )
    def test_july_start(self, calendar: tuple[int, int], fiscal: tuple[int, int]) -> None:
        """With a July start, FY2023 runs July 2022 through June 2023."""
        assert calendar_to_fiscal(*calendar, 7) == fiscal
        assert fiscal_to_calendar(*fiscal, 7) == calendar

    @pytest.mark.parametrize(
        ("calendar", "fiscal"),
        [
            ((2022, 5), (2023, 1)),
            ((2022, 11), (2023, 7)),
            ((2023, 4), (2023, 12)),
            ((2023, 1), (2023, 9)),
        ],
    )
    def test_may_start(self, calendar: tuple[int, int], fiscal: tuple[int, int]) -> None:
        """With a May start, FY2023 runs May 2022 through April 2023."""
        assert calendar_to_fiscal(*calendar, 5) == fiscal
        assert fiscal_to_calendar(*fiscal, 5) == calendar

    def test_january_start_is_identity(self) -> None:
        """A January start makes fiscal and calendar coordinates identical."""
        assert calendar_to_fiscal(2023, 9, 1) == (2023, 9)
        assert fiscal_to_calendar(2023, 9, 1) == (2023, 9)

    @pytest.mark.parametrize("start", range(1, 13))
    def test_inverse_for_every_start(self, start: int) -> None:
        """fiscal_to_calendar inverts calendar_to_fiscal for every start month."""
        for month in range(1, 13):
            fiscal = calendar_to_fiscal(2024, month, start)
            assert fiscal_to_calendar(*fiscal, start) == (2024, month)

    @pytest.mark.parametrize(
        ("fiscal_year", "month", "start", "expected"),
        [
            (2025, 11, 7, 2024),
            (2025, 7, 7, 2024),
            (2025, 6, 7, 2025),
            (2025, 2, 7, 2025),
            (2025, 11, 1, 2025),
        ],
    )
    def test_calendar_year_of(self, fiscal_year: int, month: int, start: int, expected: int) -> None:
        """Months at or after the fiscal start fall in the previous calendar year."""
        assert calendar_year_of(fiscal_year, month, start) == expected


class TestDisplayYear:
    """Tests for display_year."""

    def test_full_year(self) -> None:
        """Years render with all digits by default."""
        assert display_year(2023) == "2023"

    def test_short_year(self) -> None:
        """Short years keep two zero-padded digits."""
        assert display_year(2023, short_year=True) == "23"
        assert display_year(2005, short_year=True) == "05"
