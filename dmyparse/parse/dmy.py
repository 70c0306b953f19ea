"""Day/month/year date and time parsing.

This module turns human-written strings into Date, Time and DateTime
values. The accepted grammar is:

Dates:
    - D.M.YYYY, DD.MM.YYYY, D.M.YY, DD.MM.YY
    - the same with "/" instead of "." (separators may be mixed)
    - two-digit years are always read as 20xx

Times:
    - H:MM, HH:MM
    - HH:MM:SS

DateTimes:
    - a date, optionally followed by a single space and a time

Every function returns None when the input cannot be parsed. No exception
raised while parsing reaches the caller, and no partially valid value is
ever returned.

Examples:
    >>> parse_date("29.2.16")
    Date(2016, 2, 29)

    >>> parse_time("23:59")
    Time(23, 59, 0)

    >>> parse_date_time("1/1/16 23:59:59")
    DateTime(2016, 1, 1, 23, 59, 59)

    >>> parse_date("30.02.2016") is None
    True
"""

from __future__ import annotations

import logging

from dmyparse._internal.constants import DATE_TIME_SEPARATOR
from dmyparse.core.date import Date
from dmyparse.core.datetime import DateTime
from dmyparse.core.time import Time
from dmyparse.errors import ParseError, ValidationError
from dmyparse.parse._tokens import split_date, split_time

logger = logging.getLogger(__name__)


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def parse_date(text: str | None) -> Date | None:
    """Parse a day/month/year date string.

    The string is split on every "." and "/". The first three parts are
    taken as day, month and year; further parts are ignored. A two-character
    year is prefixed with "20", a four-character year is used as-is.

    Args:
        text: The date string, or None.

    Returns:
        The parsed Date, or None if the string is blank, malformed, or does
        not name a real calendar day.

    Examples:
        >>> parse_date("01.01.2016") == parse_date("1/1/16")
        True

        >>> parse_date("29.02.2015") is None  # 2015 is not a leap year
        True

        >>> parse_date("01.01.201") is None  # 3-digit year
        True
    """
    if _is_blank(text):
        return None

    try:
        year, month, day = split_date(text)
        return Date(year, month, day)
    except (ParseError, ValidationError) as e:
        logger.debug("rejected date %r: %s", text, e)
        return None


def parse_time(text: str | None) -> Time | None:
    """Parse an hours:minutes[:seconds] time string.

    Args:
        text: The time string, or None.

    Returns:
        The parsed Time (seconds default to 0), or None if the string is
        blank, has other than 2 or 3 parts, or any part is out of range.

    Examples:
        >>> parse_time("9:05")
        Time(9, 5, 0)

        >>> parse_time("25:00") is None
        True

        >>> parse_time("00:00:60") is None
        True
    """
    if _is_blank(text):
        return None

    try:
        hour, minute, second = split_time(text)
        return Time(hour, minute, second)
    except (ParseError, ValidationError) as e:
        logger.debug("rejected time %r: %s", text, e)
        return None


def parse_date_time(
    text: str | None,
    default_time: Time | None = None,
) -> DateTime | None:
    """Parse a date string with an optional time suffix.

    The trimmed string is split on single spaces. The first token must be
    a date (see parse_date). The second token, if any, is parsed as a time
    (see parse_time). When there is no second token, or it does not parse,
    the time falls back to ``default_time``, or to midnight if that is None.

    Args:
        text: The date-time string, or None.
        default_time: Time used when the string carries no usable time.

    Returns:
        The parsed DateTime, or None if the string is blank or its date
        part does not parse.

    Examples:
        >>> parse_date_time("29/2/16 00:00")
        DateTime(2016, 2, 29, 0, 0, 0)

        >>> parse_date_time("1/1/16", Time(23, 59, 59))
        DateTime(2016, 1, 1, 23, 59, 59)

        >>> parse_date_time("1/1/16 25:00")  # bad time falls back
        DateTime(2016, 1, 1, 0, 0, 0)
    """
    if _is_blank(text):
        return None

    tokens = text.strip().split(DATE_TIME_SEPARATOR)

    date = parse_date(tokens[0])
    if date is None:
        return None

    time = parse_time(tokens[1]) if len(tokens) > 1 else None
    if time is None:
        # TODO: decide whether an unparseable time suffix should reject the
        # whole string instead of falling back to the default
        time = default_time if default_time is not None else Time.midnight()

    return DateTime.combine(date, time)


__all__ = [
    "parse_date",
    "parse_time",
    "parse_date_time",
]
