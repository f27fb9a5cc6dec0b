"""Period exception hierarchy with structured diagnostics.

Every exception can carry a Diagnostic for Rust-style error messages.
Argument and parse errors also subclass ValueError so callers that only
know the standard library can still catch them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class BizPeriodError(Exception):
    """Base exception for all bizcalendar errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BizPeriodError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(BizPeriodError, ValueError):
    """A constructor or operation received an unusable argument.

    Examples:
    - Fiscal year start month outside 1..12
    - Period whose end falls before its start
    - Extending a period to one that starts earlier
    """


class OutOfRangeError(InvalidArgumentError):
    """A month, year, quarter or half number is outside its bounds.

    Subclasses InvalidArgumentError: an out-of-range quarter is both.
    """


class PeriodParseError(BizPeriodError, ValueError):
    """A period string could not be parsed.

    Attributes:
        input_value: The string that failed to parse
        position: Character offset where parsing failed (-1 if unknown)

    Example:
        >>> period, errors = try_parse_period("2022 Sep")
        >>> if errors:
        ...     print(f"Parse failed at {errors[0].position}")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        position: int = -1,
    ) -> None:
        """Initialize PeriodParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            position: Character offset where parsing failed
        """
        super().__init__(message)
        self.input_value = input_value
        self.position = position


class UnexpectedTokenError(PeriodParseError):
    """The input does not follow the period grammar.

    Raised for unknown characters, missing year markers, extra parts and
    trailing input.
    """
