"""Parsing of day/month/year dates and hours:minutes times.

Functions:
    parse_date: Parse "D.M.YYYY" / "D/M/YY" style dates.
    parse_time: Parse "H:MM" / "HH:MM:SS" style times.
    parse_date_time: Parse a date with an optional space-separated time.

All three return None when the input cannot be parsed.

Examples:
    >>> from dmyparse.parse import parse_date_time
    >>> parse_date_time("01.01.16 23:59:59")
    DateTime(2016, 1, 1, 23, 59, 59)
"""

from __future__ import annotations

from dmyparse.parse.dmy import parse_date, parse_date_time, parse_time

__all__: list[str] = [
    "parse_date",
    "parse_time",
    "parse_date_time",
]
