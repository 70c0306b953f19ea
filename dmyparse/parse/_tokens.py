"""Token splitting and conversion for the day/month/year grammar.

Every helper raises ParseError on structurally bad input; range checks
are left to the value types.

Internal module - use the functions in dmyparse.parse instead.
"""

from __future__ import annotations

import re

from dmyparse._internal.constants import (
    CENTURY_PREFIX,
    DATE_PARTS,
    DATE_SEPARATORS,
    DAY_INDEX,
    LONG_YEAR_LENGTH,
    MAX_TIME_PARTS,
    MIN_TIME_PARTS,
    MONTH_INDEX,
    SHORT_YEAR_LENGTH,
    TIME_SEPARATOR,
    YEAR_INDEX,
)
from dmyparse.errors import ParseError

_DATE_SPLIT_PATTERN = re.compile(DATE_SEPARATORS)

# Optional sign, then ASCII digits only
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _drop_trailing_empty(parts: list[str]) -> list[str]:
    """Remove empty parts left by trailing separators ("10:30:" -> 2 parts)."""
    while parts and not parts[-1]:
        parts.pop()
    return parts


def parse_int(token: str, name: str) -> int:
    """Convert a whole token to a base-10 integer.

    Unlike ``int()``, surrounding whitespace, underscores and non-ASCII
    digits are rejected.

    Args:
        token: The text to convert.
        name: Component name used in the error message.

    Raises:
        ParseError: If the token is not entirely an integer.

    Examples:
        >>> parse_int("07", "day")
        7
        >>> parse_int("7a", "day")
        Traceback (most recent call last):
        ...
        dmyparse.errors.ParseError: day is not an integer: '7a'
    """
    if not _INTEGER_PATTERN.fullmatch(token):
        raise ParseError(f"{name} is not an integer: {token!r}")
    return int(token)


def normalize_year(token: str) -> str:
    """Expand a two-character year to 20xx, pass four characters through.

    Raises:
        ParseError: If the token is neither 2 nor 4 characters long.

    Examples:
        >>> normalize_year("16")
        '2016'
        >>> normalize_year("1999")
        '1999'
    """
    if len(token) == SHORT_YEAR_LENGTH:
        return CENTURY_PREFIX + token
    if len(token) != LONG_YEAR_LENGTH:
        raise ParseError(
            f"year must have {SHORT_YEAR_LENGTH} or {LONG_YEAR_LENGTH} "
            f"characters, got {token!r}"
        )
    return token


def split_date(text: str) -> tuple[int, int, int]:
    """Split a date string into (year, month, day) integers.

    Empty parts at the end are dropped; parts beyond the third are ignored.

    Raises:
        ParseError: On too few parts, a bad year length or a non-integer part.
    """
    parts = _drop_trailing_empty(_DATE_SPLIT_PATTERN.split(text))
    if len(parts) < DATE_PARTS:
        raise ParseError(
            f"expected {DATE_PARTS} date parts, got {len(parts)} in {text!r}"
        )

    year = parse_int(normalize_year(parts[YEAR_INDEX]), "year")
    month = parse_int(parts[MONTH_INDEX], "month")
    day = parse_int(parts[DAY_INDEX], "day")
    return year, month, day


def split_time(text: str) -> tuple[int, int, int]:
    """Split a time string into (hour, minute, second) integers.

    Empty parts at the end are dropped. A missing second is returned as 0.

    Raises:
        ParseError: On a wrong part count or a non-integer part.
    """
    parts = _drop_trailing_empty(text.split(TIME_SEPARATOR))
    if not (MIN_TIME_PARTS <= len(parts) <= MAX_TIME_PARTS):
        raise ParseError(
            f"expected {MIN_TIME_PARTS} or {MAX_TIME_PARTS} time parts, "
            f"got {len(parts)} in {text!r}"
        )

    hour = parse_int(parts[0], "hour")
    minute = parse_int(parts[1], "minute")
    second = parse_int(parts[2], "second") if len(parts) == MAX_TIME_PARTS else 0
    return hour, minute, second


__all__ = [
    "normalize_year",
    "parse_int",
    "split_date",
    "split_time",
]
