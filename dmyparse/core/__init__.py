"""Core value types.

This module provides the structured results of parsing:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with whole-second precision
    - DateTime: A Date paired with a Time
"""

from __future__ import annotations

from dmyparse.core.date import Date
from dmyparse.core.datetime import DateTime
from dmyparse.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Time",
]
