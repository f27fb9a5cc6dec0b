"""Tests for diagnostics: codes, spans, templates, errors and formatting.

Tests cover:
- SourceSpan validation and column
- ErrorTemplate diagnostics for argument and parse errors
- Exception hierarchy and message handling
- DiagnosticFormatter RUST, SIMPLE and JSON output, color and sanitizing
"""

import json

import pytest

from bizcalendar.diagnostics import (
    BizPeriodError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    InvalidArgumentError,
    OutOfRangeError,
    OutputFormat,
    PeriodParseError,
    SourceSpan,
    UnexpectedTokenError,
)


class TestSourceSpan:
    """Tests for SourceSpan."""

    def test_column_is_one_based(self) -> None:
        """column is start + 1."""
        assert SourceSpan(start=0, end=4).column == 1
        assert SourceSpan(start=7, end=8).column == 8

    def test_rejects_negative_start(self) -> None:
        """Offsets cannot be negative."""
        with pytest.raises(ValueError, match="start must be >= 0"):
            SourceSpan(start=-1, end=0)

    def test_rejects_end_before_start(self) -> None:
        """Spans cannot be inverted."""
        with pytest.raises(ValueError, match="must be >= start"):
            SourceSpan(start=3, end=2)

    def test_empty_span_allowed(self) -> None:
        """End-of-input spans are empty."""
        assert SourceSpan(start=5, end=5).end == 5


class TestErrorTemplate:
    """Tests for ErrorTemplate diagnostics."""

    def test_codes_are_grouped(self) -> None:
        """Argument codes are 1xxx and parse codes are 2xxx."""
        assert DiagnosticCode.MONTH_OUT_OF_RANGE.value == 1001
        assert DiagnosticCode.UNEXPECTED_TOKEN.value == 2001
        assert all(1000 <= c.value < 3000 for c in DiagnosticCode)

    def test_quarter_out_of_range(self) -> None:
        """Quarter diagnostics name the argument and the bad value."""
        diagnostic = ErrorTemplate.quarter_out_of_range(5)
        assert diagnostic.code == DiagnosticCode.QUARTER_OUT_OF_RANGE
        assert diagnostic.message == "There are four quarters in a year: 5"
        assert diagnostic.argument_name == "quarter"
        assert diagnostic.received_value == "5"
        assert diagnostic.span is None

    def test_period_inverted(self) -> None:
        """Inverted periods show both bounds."""
        diagnostic = ErrorTemplate.period_inverted(202303, 202302)
        assert diagnostic.message == "The period cannot end (202302) before it starts (202303)"

    def test_granularity_mismatch(self) -> None:
        """Mismatches name the bounds, kind and granularity."""
        diagnostic = ErrorTemplate.granularity_mismatch("quarter", "CY", 202202, 202204)
        assert diagnostic.message == "202202-202204 is not a CY quarter"

    def test_extension_invalid_directions(self) -> None:
        """The message reads in the direction of the extension."""
        to = ErrorTemplate.extension_invalid("to", "CY2023 Q2", "CY2023 Q1")
        frm = ErrorTemplate.extension_invalid("from", "CY2023 Q1", "CY2023 Q2")
        assert to.message.startswith("'CY2023 Q2' must start before 'CY2023 Q1'")
        assert frm.message.startswith("'CY2023 Q2' must start before 'CY2023 Q1'")

    def test_config_invalid(self) -> None:
        """Configuration diagnostics name the field."""
        diagnostic = ErrorTemplate.config_invalid("month_pad", "-", "must be a whitespace string")
        assert diagnostic.message == "PeriodConfig.month_pad must be a whitespace string, got '-'"
        assert diagnostic.argument_name == "month_pad"

    def test_unexpected_token_span(self) -> None:
        """Token diagnostics span the token text."""
        diagnostic = ErrorTemplate.unexpected_token("2022", 0, ("CY", "FY"), "2022 Sep")
        assert diagnostic.span == SourceSpan(start=0, end=4)
        assert diagnostic.expected == ("CY", "FY")
        assert diagnostic.input_value == "2022 Sep"
        assert diagnostic.hint is not None

    def test_unexpected_end_messages(self) -> None:
        """Blank input and truncated input read differently."""
        assert ErrorTemplate.unexpected_end(0, (), "").message == "Empty period string"
        assert ErrorTemplate.unexpected_end(8, (), "CY2023 -").message == "Unexpected end of input"

    def test_input_too_long(self) -> None:
        """Length diagnostics report both lengths."""
        diagnostic = ErrorTemplate.input_too_long(300, 256)
        assert diagnostic.message == "Period string is 300 characters long, limit is 256"


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = BizPeriodError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages are formatted Rust-style."""
        diagnostic = ErrorTemplate.half_out_of_range(3)
        error = OutOfRangeError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
        assert str(error).startswith("error[HALF_OUT_OF_RANGE]")

    def test_hierarchy(self) -> None:
        """Every error is a BizPeriodError; argument and parse errors are ValueErrors."""
        assert issubclass(OutOfRangeError, InvalidArgumentError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(UnexpectedTokenError, PeriodParseError)
        assert issubclass(PeriodParseError, ValueError)
        assert issubclass(PeriodParseError, BizPeriodError)
        assert not issubclass(PeriodParseError, InvalidArgumentError)

    def test_parse_error_defaults(self) -> None:
        """Parse errors default to an empty input and an unknown position."""
        error = PeriodParseError("bad")
        assert error.input_value == ""
        assert error.position == -1

    def test_parse_error_fields(self) -> None:
        """Parse errors keep the input and position."""
        error = UnexpectedTokenError("bad", input_value="CY H1", position=3)
        assert (error.input_value, error.position) == ("CY H1", 3)


class TestDiagnosticFormatter:
    """Tests for DiagnosticFormatter."""

    def test_rust_argument_error(self) -> None:
        """Argument errors list argument, received value and help."""
        output = DiagnosticFormatter().format(ErrorTemplate.quarter_out_of_range(5))
        assert output == (
            "error[QUARTER_OUT_OF_RANGE]: There are four quarters in a year: 5\n"
            "  = argument: quarter\n"
            "  = received: 5\n"
            "  = help: Use Q1, Q2, Q3 or Q4"
        )

    def test_rust_parse_error(self) -> None:
        """Parse errors show the input with a caret under the offending token."""
        diagnostic = ErrorTemplate.unexpected_token("H", 3, ("number",), "CY H1")
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[0] == "error[UNEXPECTED_TOKEN]: Unexpected 'H' at column 4"
        assert lines[1] == "  --> 'CY H1'"
        assert lines[2] == "          ^"
        assert lines[2].index("^") == lines[1].index("H")
        assert lines[3] == "  = expected: number"
        assert lines[4].startswith("  = help: ")

    def test_rust_span_without_input(self) -> None:
        """Without the input the column is shown."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message="Unexpected 'H' at column 4",
            span=SourceSpan(start=3, end=4),
        )
        assert "  --> column 4" in DiagnosticFormatter().format(diagnostic)

    def test_rust_warning_with_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID, message="odd", severity="warning"
        )
        plain = DiagnosticFormatter().format(diagnostic)
        colored = DiagnosticFormatter(color=True).format(diagnostic)
        assert plain == "warning[CONFIG_INVALID]: odd"
        assert colored.startswith("\033[1;33mwarning\033[0m")

    def test_rust_error_with_color(self) -> None:
        """Errors are bold red."""
        output = DiagnosticFormatter(color=True).format(ErrorTemplate.month_out_of_range(13))
        assert output.startswith("\033[1;31merror\033[0m[MONTH_OUT_OF_RANGE]")

    def test_simple(self) -> None:
        """SIMPLE is a single line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.quarter_out_of_range(5))
        assert output == "QUARTER_OUT_OF_RANGE: There are four quarters in a year: 5"

    def test_json(self) -> None:
        """JSON output carries every populated field."""
        diagnostic = ErrorTemplate.unexpected_token("H", 3, ("number",), "CY H1")
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert data["code"] == "UNEXPECTED_TOKEN"
        assert data["code_value"] == 2001
        assert data["severity"] == "error"
        assert (data["column"], data["start"], data["end"]) == (4, 3, 4)
        assert data["input_value"] == "CY H1"
        assert data["expected"] == ["number"]
        assert "hint" in data
        assert "argument_name" not in data

    def test_json_argument_error(self) -> None:
        """Argument errors carry argument and received value, no span."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.half_out_of_range(3)))
        assert data["argument_name"] == "half"
        assert data["received_value"] == "3"
        assert "column" not in data

    def test_sanitize_truncates_input(self) -> None:
        """Sanitizing truncates echoed user input."""
        text = "CY2023 " + "x" * 50
        diagnostic = ErrorTemplate.unexpected_character("x", 7, text)
        formatter = DiagnosticFormatter(sanitize=True, max_content_length=10)
        output = formatter.format(diagnostic)
        assert "'CY2023 xxx...'" in output
        assert text not in output

    def test_format_all(self) -> None:
        """Several diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([
            ErrorTemplate.month_out_of_range(13),
            ErrorTemplate.half_out_of_range(3),
        ])
        assert output == (
            "MONTH_OUT_OF_RANGE: 13 is not a month\n\n"
            "HALF_OUT_OF_RANGE: There are two halves in a year: 3"
        )

    def test_output_format_values(self) -> None:
        """Formats are selectable by name."""
        assert OutputFormat("json") is OutputFormat.JSON
        assert str(OutputFormat.RUST) == "rust"
