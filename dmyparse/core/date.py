"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar.
"""

from __future__ import annotations

from dmyparse._internal.calendar import is_leap_year
from dmyparse._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. The Gregorian leap year rule is extended to dates before
    its actual adoption in 1582. A Date is immutable and always names a
    real calendar day.

    Attributes:
        year: The year (MIN_YEAR to MAX_YEAR).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2016, 1, 1)
        >>> d.year
        2016
        >>> d.month
        1
        >>> d.day
        1

        >>> Date(2016, 2, 29)  # Valid leap year date
        Date(2016, 2, 29)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year.
            month: The month (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2015, 2, 29)  # Invalid: 2015 is not a leap year
            Traceback (most recent call last):
            ...
            dmyparse.errors.ValidationError: day must be between 1 and 28 for 2015-02, got 29
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._year: int = year
        self._month: int = month
        self._day: int = day

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> Date(2016, 1, 1).is_leap_year
            True
            >>> Date(1900, 1, 1).is_leap_year  # Divisible by 100 but not 400
            False
        """
        return is_leap_year(self._year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Any unspecified components retain their current values.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> Date(2016, 1, 31).replace(month=3)
            Date(2016, 3, 31)
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> Date(2016, 1, 1) < Date(2016, 1, 2)
            True
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a string like 'Date(2016, 1, 1)'."""
        return f"Date({self._year}, {self._month}, {self._day})"

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date"]
