"""Diagnostic system for period errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    BizPeriodError,
    InvalidArgumentError,
    OutOfRangeError,
    PeriodParseError,
    UnexpectedTokenError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BizPeriodError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentError",
    "OutOfRangeError",
    "OutputFormat",
    "PeriodParseError",
    "SourceSpan",
    "UnexpectedTokenError",
]
