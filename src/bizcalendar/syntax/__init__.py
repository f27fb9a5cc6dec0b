"""Period string tokenizer and parser.

Exports:
    parse_period: Parse a period string, raising on failure
    try_parse_period: Parse a period string, returning (period, errors)
    PeriodParser: Parser bound to a fiscal year alignment
    tokenize / Token: Lexical layer

Python 3.13+.
"""

from .lexer import Token, tokenize
from .parser import PeriodParser, parse_period, try_parse_period

__all__ = [
    "PeriodParser",
    "Token",
    "parse_period",
    "tokenize",
    "try_parse_period",
]
