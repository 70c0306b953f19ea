"""Internal constants for dmyparse.

These constants fix the accepted input grammar and the calendar limits.
This module is not part of the public API.
"""

from __future__ import annotations

# Date grammar: day<sep>month<sep>year, each "." or "/" is one delimiter
DATE_SEPARATORS: str = r"[./]"
DAY_INDEX: int = 0
MONTH_INDEX: int = 1
YEAR_INDEX: int = 2
DATE_PARTS: int = 3

# Two-digit years always land in 20xx
SHORT_YEAR_LENGTH: int = 2
LONG_YEAR_LENGTH: int = 4
CENTURY_PREFIX: str = "20"

# Time grammar: hour:minute[:second]
TIME_SEPARATOR: str = ":"
MIN_TIME_PARTS: int = 2
MAX_TIME_PARTS: int = 3

# Date-time grammar: date[ time]
DATE_TIME_SEPARATOR: str = " "

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "DATE_SEPARATORS",
    "DAY_INDEX",
    "MONTH_INDEX",
    "YEAR_INDEX",
    "DATE_PARTS",
    "SHORT_YEAR_LENGTH",
    "LONG_YEAR_LENGTH",
    "CENTURY_PREFIX",
    "TIME_SEPARATOR",
    "MIN_TIME_PARTS",
    "MAX_TIME_PARTS",
    "DATE_TIME_SEPARATOR",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
]
