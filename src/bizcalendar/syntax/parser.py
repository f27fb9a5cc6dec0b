"""Period string parser.

Grammar (fixed tokens are case-sensitive; whitespace is ignored):

    PERIOD := DATE | DATE "-" DATE | "TBD" | "Unknown"
    DATE   := YEAR PART? | PART YEAR
    YEAR   := ("CY" | "FY") NUMBER
    PART   := "H" NUMBER | "Q" NUMBER | MONTH | MONTH "-" MONTH
    MONTH  := "Jan" | "Feb" | ... | "Dec"

Accepted inputs include every canonical rendering plus liberal variants:

    parse_period("CY2023 Sep")
    parse_period("FY23")
    parse_period("H2 FY24")
    parse_period(" CY 23  H 2 ")
    parse_period("FY24 Jun-Oct")
    parse_period("FY2061 Q1 - CY2072 H2")

Parsing strategy:
    Recursive descent over the token tuple. Each rule is a generator that
    yields every way it can match at a position, in grammar order, so
    alternatives backtrack naturally ("CY22 Feb - Sep CY23" first tries the
    month range Feb-Sep, then the date range). The first parse that consumes
    every token wins. Periods are built only for that parse, so half and
    quarter numbers are range-checked once, raising OutOfRangeError.

Error reporting:
    The parser remembers the furthest token position any alternative
    reached and which tokens would have been accepted there; a failed parse
    reports that position.

Thread Safety:
    PeriodParser holds only immutable configuration and is safe to share.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from bizcalendar.config import PeriodConfig, get_config
from bizcalendar.constants import MAX_PERIOD_TEXT_LENGTH
from bizcalendar.core.months import month_ordinal
from bizcalendar.core.yearmonth import check_fiscal_start
from bizcalendar.diagnostics import (
    BizPeriodError,
    ErrorTemplate,
    PeriodParseError,
    UnexpectedTokenError,
)
from bizcalendar.enums import Granularity, TokenKind, YearKind
from bizcalendar.periods.construction import MONTH_PARTS, Y, PeriodPart, Range
from bizcalendar.periods.period import Period
from bizcalendar.syntax.lexer import Token, tokenize

__all__ = ["PeriodParser", "parse_period", "try_parse_period"]

logger = logging.getLogger(__name__)

_EXPECTED_NAMES: dict[TokenKind | None, str] = {
    TokenKind.CY: "CY",
    TokenKind.FY: "FY",
    TokenKind.NUMBER: "number",
    TokenKind.HALF: "H",
    TokenKind.QUARTER: "Q",
    TokenKind.TBD: "TBD",
    TokenKind.UNKNOWN: "Unknown",
    TokenKind.MONTH: "month name",
    TokenKind.DASH: "-",
    None: "end of input",
}

_YEAR_KINDS: dict[TokenKind, YearKind] = {
    TokenKind.CY: YearKind.CY,
    TokenKind.FY: YearKind.FY,
}

_PART_MARKERS: tuple[tuple[TokenKind, Granularity], ...] = (
    (TokenKind.HALF, Granularity.HALF),
    (TokenKind.QUARTER, Granularity.QUARTER),
)


# ============================================================================
# SYNTAX TREE
# ============================================================================


@dataclass(frozen=True, slots=True)
class _Date:
    kind: YearKind
    year: int
    part: PeriodPart | None

    def build(self, config: PeriodConfig) -> Period:
        part = self.part if self.part is not None else Y
        return part(self.year, self.kind, config=config)


@dataclass(frozen=True, slots=True)
class _DateRange:
    first: _Date
    last: _Date

    def build(self, config: PeriodConfig) -> Period:
        return self.first.build(config).extended_to(self.last.build(config))


@dataclass(frozen=True, slots=True)
class _Sentinel:
    granularity: Granularity

    def build(self, config: PeriodConfig) -> Period:
        if self.granularity is Granularity.TBD:
            return Period.tbd(config=config)
        return Period.unknown(config=config)


type _Node = _Date | _DateRange | _Sentinel


# ============================================================================
# RECURSIVE DESCENT
# ============================================================================


class _Grammar:
    """One parse of one token tuple, with furthest-failure bookkeeping."""

    __slots__ = ("_expected", "_furthest", "_tokens")

    def __init__(self, tokens: tuple[Token, ...]) -> None:
        self._tokens = tokens
        self._furthest = 0
        self._expected: list[TokenKind | None] = []

    def _note(self, pos: int, kind: TokenKind | None) -> None:
        if pos > self._furthest:
            self._furthest = pos
            self._expected = []
        if pos == self._furthest and kind not in self._expected:
            self._expected.append(kind)

    def _accept(self, pos: int, kind: TokenKind) -> bool:
        if pos < len(self._tokens) and self._tokens[pos].kind is kind:
            return True
        self._note(pos, kind)
        return False

    def parse(self) -> _Node | None:
        """First PERIOD that consumes every token, or None."""
        for node, pos in self._period(0):
            if pos == len(self._tokens):
                return node
            self._note(pos, None)
        return None

    def failure(self) -> tuple[Token | None, tuple[str, ...]]:
        """Token at the furthest failure (None at end) and what was expected."""
        token = self._tokens[self._furthest] if self._furthest < len(self._tokens) else None
        expected = tuple(_EXPECTED_NAMES[kind] for kind in self._expected)
        return token, expected

    def _period(self, pos: int) -> Iterator[tuple[_Node, int]]:
        yield from self._date(pos)
        for first, after_first in self._date(pos):
            if self._accept(after_first, TokenKind.DASH):
                for last, end in self._date(after_first + 1):
                    yield _DateRange(first, last), end
        if self._accept(pos, TokenKind.TBD):
            yield _Sentinel(Granularity.TBD), pos + 1
        if self._accept(pos, TokenKind.UNKNOWN):
            yield _Sentinel(Granularity.UNKNOWN), pos + 1

    def _date(self, pos: int) -> Iterator[tuple[_Date, int]]:
        for (kind, year), after_year in self._year(pos):
            for part, end in self._part(after_year):
                yield _Date(kind, year, part), end
            yield _Date(kind, year, None), after_year
        for part, after_part in self._part(pos):
            for (kind, year), end in self._year(after_part):
                yield _Date(kind, year, part), end

    def _year(self, pos: int) -> Iterator[tuple[tuple[YearKind, int], int]]:
        for marker, kind in _YEAR_KINDS.items():
            if self._accept(pos, marker) and self._accept(pos + 1, TokenKind.NUMBER):
                yield (kind, int(self._tokens[pos + 1].text)), pos + 2

    def _part(self, pos: int) -> Iterator[tuple[PeriodPart, int]]:
        for marker, granularity in _PART_MARKERS:
            if self._accept(pos, marker) and self._accept(pos + 1, TokenKind.NUMBER):
                number = int(self._tokens[pos + 1].text)
                name = f"{self._tokens[pos].text}{number}"
                yield PeriodPart(name, granularity, number, number), pos + 2
        if self._accept(pos, TokenKind.MONTH):
            start = self._month(pos)
            yield start, pos + 1
            if self._accept(pos + 1, TokenKind.DASH) and self._accept(pos + 2, TokenKind.MONTH):
                yield Range(start, self._month(pos + 2)), pos + 3

    def _month(self, pos: int) -> PeriodPart:
        ordinal = month_ordinal(self._tokens[pos].text)
        assert ordinal is not None  # lexer only emits known month names
        return MONTH_PARTS[ordinal - 1]


# ============================================================================
# PUBLIC API
# ============================================================================


class PeriodParser:
    """Period string parser bound to a fiscal year alignment.

    Use this when a caller needs a fiscal start other than the current
    configuration's; otherwise parse_period() is simpler.

    Example:
        >>> parser = PeriodParser(fiscal_year_start_month=4)
        >>> p = parser.parse("FY2024 Q1")
        >>> (p.start_year_month, p.end_year_month)
        (202304, 202306)

    Attributes:
        max_length: Longest accepted input, in characters
    """

    __slots__ = ("_config", "_fiscal_year_start_month", "max_length")

    def __init__(
        self,
        fiscal_year_start_month: int | None = None,
        *,
        config: PeriodConfig | None = None,
        max_length: int = MAX_PERIOD_TEXT_LENGTH,
    ) -> None:
        """Initialize parser.

        Args:
            fiscal_year_start_month: Fiscal start for parsed periods. None
                uses the fiscal start of ``config`` (or of the current
                configuration at parse time).
            config: Configuration captured by parsed periods. None uses the
                current configuration at parse time.
            max_length: Longest accepted input

        Raises:
            InvalidArgumentError: If fiscal_year_start_month is not in [1, 12]
        """
        if fiscal_year_start_month is not None:
            check_fiscal_start(fiscal_year_start_month)
        self._fiscal_year_start_month = fiscal_year_start_month
        self._config = config
        self.max_length = max_length

    @property
    def config(self) -> PeriodConfig:
        """Configuration parsed periods will capture, resolved now."""
        base = self._config if self._config is not None else get_config()
        start = self._fiscal_year_start_month
        if start is None or start == base.fiscal_year_start_month:
            return base
        return base.with_fiscal_start(start)

    def parse(self, text: str) -> Period:
        """Parse a period string.

        Args:
            text: Period string such as "FY2023 Q1"

        Returns:
            The parsed Period

        Raises:
            PeriodParseError: If text is not a string or is too long
            UnexpectedTokenError: If text does not follow the grammar
            OutOfRangeError: If a half, quarter or year number is out of range
            InvalidArgumentError: If a date range ends before it starts
        """
        try:
            return self._parse(text)
        except BizPeriodError as error:
            logger.debug("Failed to parse period %r: %s", text, error)
            raise

    def try_parse(self, text: str) -> tuple[Period | None, tuple[BizPeriodError, ...]]:
        """Parse a period string without raising.

        Returns:
            Tuple of (result, errors):
            - result: Parsed Period, or None if parsing failed
            - errors: Tuple of BizPeriodError (empty tuple on success)

        Example:
            >>> period, errors = PeriodParser().try_parse("CY2022 H4")
            >>> period is None
            True
            >>> type(errors[0]).__name__
            'OutOfRangeError'
        """
        try:
            return (self._parse(text), ())
        except BizPeriodError as error:
            logger.debug("Failed to parse period %r: %s", text, error)
            return (None, (error,))

    def _parse(self, text: str) -> Period:
        if not isinstance(text, str):
            raise PeriodParseError(
                ErrorTemplate.input_not_string(text), input_value=str(text)
            )
        if len(text) > self.max_length:
            raise PeriodParseError(
                ErrorTemplate.input_too_long(len(text), self.max_length),
                input_value=text[: self.max_length],
            )

        grammar = _Grammar(tokenize(text))
        node = grammar.parse()
        if node is None:
            raise self._syntax_error(grammar, text)
        return node.build(self.config)

    @staticmethod
    def _syntax_error(grammar: _Grammar, text: str) -> UnexpectedTokenError:
        token, expected = grammar.failure()
        if token is None:
            position = len(text.rstrip())
            diagnostic = ErrorTemplate.unexpected_end(position, expected, text)
        else:
            position = token.start
            diagnostic = ErrorTemplate.unexpected_token(token.text, position, expected, text)
        return UnexpectedTokenError(diagnostic, input_value=text, position=position)


def parse_period(text: str, *, config: PeriodConfig | None = None) -> Period:
    """Parse a period string such as "FY2023 Q1" or "CY22 Sep".

    Args:
        text: Period string
        config: Configuration for the parsed period (default: current)

    Returns:
        The parsed Period

    Raises:
        PeriodParseError: If the string cannot be parsed
        OutOfRangeError: If a half, quarter or year number is out of range
        InvalidArgumentError: If a date range ends before it starts
    """
    return PeriodParser(config=config).parse(text)


def try_parse_period(
    text: str, *, config: PeriodConfig | None = None
) -> tuple[Period | None, tuple[BizPeriodError, ...]]:
    """Parse a period string, returning errors instead of raising.

    Example:
        >>> period, errors = try_parse_period("FY2023 Q1")
        >>> str(period), errors
        ('FY2023 Q1', ())
    """
    return PeriodParser(config=config).try_parse(text)
