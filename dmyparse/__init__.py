"""dmyparse: parse day/month/year date and time strings.

dmyparse converts human-written strings such as "29.2.16",
"01/01/2016 23:59" or "9:05:30" into structured values. Parsing never
raises; an unparseable string yields None.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second)
    DateTime: Date paired with a Time

Parse Functions:
    parse_date: Parse a day/month/year date string
    parse_time: Parse an hours:minutes[:seconds] time string
    parse_date_time: Parse a date with an optional time suffix

Exceptions:
    DmyparseError: Base exception
    ValidationError: Invalid component values (direct construction only)
    ParseError: Malformed token

Example:
    >>> from dmyparse import parse_date_time, Time
    >>> parse_date_time("1/1/16", Time(23, 59, 59))
    DateTime(2016, 1, 1, 23, 59, 59)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from dmyparse.core.date import Date
from dmyparse.core.datetime import DateTime
from dmyparse.core.time import Time

# Exceptions
from dmyparse.errors import DmyparseError, ParseError, ValidationError

# Parse functions
from dmyparse.parse import parse_date, parse_date_time, parse_time

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Time",
    # Exceptions
    "DmyparseError",
    "ValidationError",
    "ParseError",
    # Parse functions
    "parse_date",
    "parse_time",
    "parse_date_time",
]
