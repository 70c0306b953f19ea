"""Range validation for dmyparse values.

Each helper raises ValidationError with a message naming the offending
component. This module is not part of the public API.
"""

from __future__ import annotations

from dmyparse._internal.calendar import days_in_month
from dmyparse._internal.constants import MAX_YEAR, MIN_YEAR
from dmyparse.errors import ValidationError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    The month must already be valid.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_clock(hour: int, minute: int, second: int) -> None:
    """Validate the three components of a time of day.

    Raises:
        ValidationError: If any component is out of range.
    """
    if not (0 <= hour <= 23):
        raise ValidationError(f"hour must be between 0 and 23, got {hour}")
    if not (0 <= minute <= 59):
        raise ValidationError(f"minute must be between 0 and 59, got {minute}")
    if not (0 <= second <= 59):
        raise ValidationError(f"second must be between 0 and 59, got {second}")


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_clock",
]
