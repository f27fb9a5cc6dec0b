"""English month abbreviations backed by CLDR data.

Month names come from Babel's CLDR tables for ``en_US`` in the abbreviated
format width ("Jan" .. "Dec"). The same table drives rendering and the
tokenizer, so every rendered month name is also a parseable one.

Thread Safety:
    Thread-safe. The table is computed once and cached.

Python 3.13+.
"""

from functools import lru_cache

from babel.dates import get_month_names

from bizcalendar.core.yearmonth import check_month

__all__ = ["MONTH_LOCALE", "month_abbreviation", "month_abbreviations", "month_ordinal"]

# Month names are English only.
MONTH_LOCALE = "en_US"


@lru_cache(maxsize=1)
def month_abbreviations() -> tuple[str, ...]:
    """Abbreviated month names, index 0 is January.

    Returns:
        Twelve CLDR abbreviations: ("Jan", "Feb", ..., "Dec")
    """
    names = get_month_names("abbreviated", context="format", locale=MONTH_LOCALE)
    return tuple(str(names[month]) for month in range(1, 13))


@lru_cache(maxsize=1)
def _ordinals() -> dict[str, int]:
    return {name: index for index, name in enumerate(month_abbreviations(), start=1)}


def month_abbreviation(month: int) -> str:
    """Abbreviated name of a month ordinal (1 -> "Jan").

    Raises:
        OutOfRangeError: If month is not in [1, 12]
    """
    return month_abbreviations()[check_month(month) - 1]


def month_ordinal(name: str) -> int | None:
    """Month ordinal of an abbreviation ("Sep" -> 9), or None if unknown."""
    return _ordinals().get(name)
