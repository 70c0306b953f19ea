"""DateTime class combining a calendar date with a time of day."""

from __future__ import annotations

from dmyparse.core.date import Date
from dmyparse.core.time import Time


class DateTime:
    """A calendar date paired with a time of day.

    DateTime holds a validated Date and a validated Time. It adds no
    invariants of its own and carries no timezone.

    Attributes:
        year: The year component.
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).

    Examples:
        >>> dt = DateTime(2016, 1, 1, 23, 59, 59)
        >>> dt.year
        2016
        >>> dt.hour
        23

        >>> DateTime.combine(Date(2016, 2, 29), Time.midnight())
        DateTime(2016, 2, 29, 0, 0, 0)
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        # Reuse the validation of both halves
        self._date: Date = Date(year, month, day)
        self._time: Time = Time(hour, minute, second)

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Create a DateTime from an existing Date and Time.

        Both parts are already valid, so no validation is repeated.

        Args:
            date: The date component.
            time: The time component.

        Returns:
            A new DateTime.
        """
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    def date(self) -> Date:
        """Return the date component."""
        return self._date

    def time(self) -> Time:
        """Return the time component."""
        return self._time

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> DateTime:
        """Return a new DateTime with specified components replaced.

        Raises:
            ValidationError: If the result is invalid.

        Examples:
            >>> DateTime(2016, 1, 1, 12, 0).replace(day=31, hour=0)
            DateTime(2016, 1, 31, 0, 0, 0)
        """
        return DateTime.combine(
            self._date.replace(year, month, day),
            self._time.replace(hour, minute, second),
        )

    def _key(self) -> tuple[Date, Time]:
        return (self._date, self._time)

    def __eq__(self, other: object) -> bool:
        """Check equality with another DateTime.

        Examples:
            >>> DateTime(2016, 1, 1) == DateTime(2016, 1, 1, 0, 0, 0)
            True
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DateTime({self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second})"
        )

    def __bool__(self) -> bool:
        return True


__all__ = ["DateTime"]
