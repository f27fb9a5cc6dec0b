"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

_PERIOD_HINT = "A period looks like 'FY2023 Q1', 'CY22 Sep', 'H2 FY24' or 'TBD'"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def month_out_of_range(month: int) -> Diagnostic:
        """Month ordinal outside 1..12.

        Args:
            month: The rejected month ordinal

        Returns:
            Diagnostic for MONTH_OUT_OF_RANGE
        """
        msg = f"{month} is not a month"
        return Diagnostic(
            code=DiagnosticCode.MONTH_OUT_OF_RANGE,
            message=msg,
            hint="Months are numbered 1 (Jan) through 12 (Dec)",
            argument_name="month",
            received_value=repr(month),
        )

    @staticmethod
    def year_out_of_range(year: int, min_year: int, max_year: int) -> Diagnostic:
        """Year outside the accepted range.

        Args:
            year: The rejected year
            min_year: Smallest accepted year
            max_year: Largest accepted year

        Returns:
            Diagnostic for YEAR_OUT_OF_RANGE
        """
        msg = f"{year} is not a valid year"
        return Diagnostic(
            code=DiagnosticCode.YEAR_OUT_OF_RANGE,
            message=msg,
            hint=f"Years must be in [{min_year}, {max_year}]; values below 100 mean 20xx",
            argument_name="year",
            received_value=repr(year),
        )

    @staticmethod
    def quarter_out_of_range(quarter: int) -> Diagnostic:
        """Quarter ordinal outside 1..4.

        Args:
            quarter: The rejected quarter ordinal

        Returns:
            Diagnostic for QUARTER_OUT_OF_RANGE
        """
        msg = f"There are four quarters in a year: {quarter}"
        return Diagnostic(
            code=DiagnosticCode.QUARTER_OUT_OF_RANGE,
            message=msg,
            hint="Use Q1, Q2, Q3 or Q4",
            argument_name="quarter",
            received_value=repr(quarter),
        )

    @staticmethod
    def half_out_of_range(half: int) -> Diagnostic:
        """Half ordinal outside 1..2.

        Args:
            half: The rejected half ordinal

        Returns:
            Diagnostic for HALF_OUT_OF_RANGE
        """
        msg = f"There are two halves in a year: {half}"
        return Diagnostic(
            code=DiagnosticCode.HALF_OUT_OF_RANGE,
            message=msg,
            hint="Use H1 or H2",
            argument_name="half",
            received_value=repr(half),
        )

    @staticmethod
    def fiscal_start_invalid(month: object) -> Diagnostic:
        """Fiscal year start month is not a month ordinal.

        Args:
            month: The rejected fiscal start value

        Returns:
            Diagnostic for FISCAL_START_INVALID
        """
        msg = f"Fiscal year start month must be an integer in [1, 12], got {month!r}"
        return Diagnostic(
            code=DiagnosticCode.FISCAL_START_INVALID,
            message=msg,
            hint="Use 1 for fiscal years that match calendar years, 7 for July starts",
            argument_name="fiscal_year_start_month",
            received_value=repr(month),
        )

    @staticmethod
    def kind_invalid(kind: object) -> Diagnostic:
        """Year kind is neither CY nor FY.

        Args:
            kind: The rejected kind value

        Returns:
            Diagnostic for KIND_INVALID
        """
        msg = f"{kind!r} is not a year kind"
        return Diagnostic(
            code=DiagnosticCode.KIND_INVALID,
            message=msg,
            hint="Use YearKind.CY or YearKind.FY",
            argument_name="kind",
            received_value=repr(kind),
        )

    @staticmethod
    def period_inverted(start_year_month: int, end_year_month: int) -> Diagnostic:
        """Period ends before it starts.

        Args:
            start_year_month: Start bound as year * 100 + month
            end_year_month: End bound as year * 100 + month

        Returns:
            Diagnostic for PERIOD_INVERTED
        """
        msg = (
            f"The period cannot end ({end_year_month}) "
            f"before it starts ({start_year_month})"
        )
        return Diagnostic(
            code=DiagnosticCode.PERIOD_INVERTED,
            message=msg,
            hint="Swap the bounds or give an end year after the start year",
        )

    @staticmethod
    def period_out_of_range(
        start_year_month: int, end_year_month: int, min_year: int, max_year: int
    ) -> Diagnostic:
        """Period displays a year that cannot be written back, or overlaps a sentinel.

        Args:
            start_year_month: Start bound as year * 100 + month
            end_year_month: End bound as year * 100 + month
            min_year: Smallest calendar or fiscal year a period may show
            max_year: Largest calendar or fiscal year a period may show

        Returns:
            Diagnostic for PERIOD_OUT_OF_RANGE
        """
        msg = f"The period {start_year_month}-{end_year_month} is outside the supported range"
        return Diagnostic(
            code=DiagnosticCode.PERIOD_OUT_OF_RANGE,
            message=msg,
            hint=(
                f"Calendar and fiscal years must stay in [{min_year}, {max_year}], "
                "and Nov-Dec 9999 are reserved for TBD and Unknown"
            ),
        )

    @staticmethod
    def granularity_mismatch(
        granularity: str, kind: str, start_year_month: int, end_year_month: int
    ) -> Diagnostic:
        """Bounds do not form a period of the requested granularity.

        Args:
            granularity: Granularity name
            kind: Year kind name ("CY" / "FY")
            start_year_month: Start bound as year * 100 + month
            end_year_month: End bound as year * 100 + month

        Returns:
            Diagnostic for GRANULARITY_MISMATCH
        """
        msg = f"{start_year_month}-{end_year_month} is not a {kind} {granularity}"
        return Diagnostic(
            code=DiagnosticCode.GRANULARITY_MISMATCH,
            message=msg,
            hint="Build fixed-size periods with Period.quarter(), Period.half() and friends",
            argument_name="granularity",
            received_value=repr(granularity),
        )

    @staticmethod
    def operation_unsupported(operation: str, granularity: str) -> Diagnostic:
        """Operation only applies to periods of another granularity.

        Args:
            operation: Method name
            granularity: Granularity of the receiving period

        Returns:
            Diagnostic for OPERATION_UNSUPPORTED
        """
        msg = f"{operation}() is not defined for {granularity} periods"
        return Diagnostic(
            code=DiagnosticCode.OPERATION_UNSUPPORTED,
            message=msg,
            argument_name="granularity",
            received_value=repr(granularity),
        )

    @staticmethod
    def extension_invalid(direction: str, period: str, other: str) -> Diagnostic:
        """Period cannot be extended to or from another period.

        Args:
            direction: "to" or "from"
            period: Canonical string of the period being extended
            other: Canonical string of the target period

        Returns:
            Diagnostic for EXTENSION_INVALID
        """
        if direction == "to":
            msg = f"'{period}' must start before '{other}' and '{other}' must end after it"
        else:
            msg = f"'{other}' must start before '{period}' and '{period}' must end after it"
        return Diagnostic(
            code=DiagnosticCode.EXTENSION_INVALID,
            message=msg,
            hint="Use combined_with() to cover two periods in any order",
        )

    @staticmethod
    def config_invalid(field_name: str, value: object, reason: str) -> Diagnostic:
        """Configuration field has an unusable value.

        Args:
            field_name: Name of the PeriodConfig field
            value: The rejected value
            reason: Why the value is rejected

        Returns:
            Diagnostic for CONFIG_INVALID
        """
        msg = f"PeriodConfig.{field_name} {reason}, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID,
            message=msg,
            argument_name=field_name,
            received_value=repr(value),
        )

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_token(
        found: str, position: int, expected: tuple[str, ...], input_value: str
    ) -> Diagnostic:
        """Token does not fit the grammar at this position.

        Args:
            found: Text of the offending token
            position: Character offset of the token
            expected: Tokens that would have been accepted
            input_value: Full input string

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        msg = f"Unexpected '{found}' at column {position + 1}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=msg,
            span=SourceSpan(start=position, end=position + len(found)),
            hint=_PERIOD_HINT,
            expected=expected,
            input_value=input_value,
        )

    @staticmethod
    def unexpected_character(char: str, position: int, input_value: str) -> Diagnostic:
        """Character that starts no token.

        Args:
            char: The offending character
            position: Character offset
            input_value: Full input string

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {char!r} at column {position + 1}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=SourceSpan(start=position, end=position + 1),
            hint=_PERIOD_HINT,
            input_value=input_value,
        )

    @staticmethod
    def unexpected_end(
        position: int, expected: tuple[str, ...], input_value: str
    ) -> Diagnostic:
        """Input ended before a complete period was read.

        Args:
            position: Character offset of the end of input
            expected: Tokens that would have been accepted
            input_value: Full input string

        Returns:
            Diagnostic for UNEXPECTED_END
        """
        msg = "Unexpected end of input" if input_value.strip() else "Empty period string"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_END,
            message=msg,
            span=SourceSpan(start=position, end=position),
            hint=_PERIOD_HINT,
            expected=expected,
            input_value=input_value,
        )

    @staticmethod
    def input_too_long(length: int, max_length: int) -> Diagnostic:
        """Input exceeds the accepted length.

        Args:
            length: Length of the input
            max_length: Largest accepted length

        Returns:
            Diagnostic for INPUT_TOO_LONG
        """
        msg = f"Period string is {length} characters long, limit is {max_length}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LONG,
            message=msg,
            received_value=str(length),
        )

    @staticmethod
    def input_not_string(value: object) -> Diagnostic:
        """Parser received something other than a string.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INPUT_NOT_STRING
        """
        msg = f"Expected string, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_NOT_STRING,
            message=msg,
            received_value=type(value).__name__,
        )
