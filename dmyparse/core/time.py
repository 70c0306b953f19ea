"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with whole-second precision.
"""

from __future__ import annotations

from dmyparse._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from dmyparse._internal.validation import validate_clock


class Time:
    """A time of day with whole-second precision.

    Time represents the time portion of a day, from midnight (00:00:00)
    to 23:59:59. It carries no date or timezone information.

    The internal representation stores the total seconds since midnight
    in a single `_seconds` slot.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).

    Examples:
        >>> t = Time(23, 59, 59)
        >>> t.hour
        23
        >>> t.second
        59

        >>> Time(10, 30)
        Time(10, 30, 0)
    """

    __slots__ = ("_seconds",)

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Time(24, 0)
            Traceback (most recent call last):
            ...
            dmyparse.errors.ValidationError: hour must be between 0 and 23, got 24
        """
        validate_clock(hour, minute, second)

        self._seconds: int = (
            hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        )

    @classmethod
    def _from_seconds(cls, seconds: int) -> Time:
        """Create a Time from seconds since midnight, skipping validation.

        Args:
            seconds: Seconds since midnight [0, 86400).
        """
        instance = object.__new__(cls)
        instance._seconds = seconds
        return instance

    @classmethod
    def midnight(cls) -> Time:
        """Return a Time representing midnight (00:00:00).

        Examples:
            >>> Time.midnight()
            Time(0, 0, 0)
        """
        return cls._from_seconds(0)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._seconds // SECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self._seconds % SECONDS_PER_MINUTE

    @property
    def total_seconds(self) -> int:
        """Return the total seconds since midnight.

        Examples:
            >>> Time(1, 0, 1).total_seconds
            3601
        """
        return self._seconds

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> Time:
        """Return a new Time with specified components replaced.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Time(14, 30, 45).replace(second=0)
            Time(14, 30, 0)
        """
        return Time(
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds == other._seconds

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this Time is earlier (closer to midnight) than another."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second})"

    def __bool__(self) -> bool:
        """Times are always truthy (even midnight)."""
        return True


__all__ = ["Time"]
