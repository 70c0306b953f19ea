"""Internal utilities for dmyparse.

This module contains private implementation details:
    - Grammar constants and calendar limits
    - Leap year and month length rules
    - Range validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from dmyparse._internal.calendar import days_in_month, is_leap_year
from dmyparse._internal.validation import (
    validate_clock,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "validate_clock",
    "validate_day",
    "validate_month",
    "validate_year",
]
