"""Tests for the internal calendar and validation helpers."""

from __future__ import annotations

import pytest

from dmyparse._internal.calendar import days_in_month, is_leap_year
from dmyparse._internal.validation import (
    validate_clock,
    validate_day,
    validate_month,
    validate_year,
)
from dmyparse.errors import ValidationError


class TestLeapYear:
    """Tests for the Gregorian leap year rule."""

    def test_divisible_by_four(self) -> None:
        """Years divisible by 4 are leap years."""
        assert is_leap_year(2016)
        assert is_leap_year(2024)

    def test_not_divisible_by_four(self) -> None:
        """Other years are not."""
        assert not is_leap_year(2015)
        assert not is_leap_year(2023)

    def test_century_not_divisible_by_400(self) -> None:
        """Centuries are common years unless divisible by 400."""
        assert not is_leap_year(1900)
        assert not is_leap_year(2100)

    def test_century_divisible_by_400(self) -> None:
        """Years divisible by 400 are leap years."""
        assert is_leap_year(2000)
        assert is_leap_year(1600)


class TestDaysInMonth:
    """Tests for month lengths."""

    def test_thirty_one_day_months(self) -> None:
        """January, March and December have 31 days."""
        assert days_in_month(2016, 1) == 31
        assert days_in_month(2016, 3) == 31
        assert days_in_month(2016, 12) == 31

    def test_thirty_day_months(self) -> None:
        """April and November have 30 days."""
        assert days_in_month(2016, 4) == 30
        assert days_in_month(2016, 11) == 30

    def test_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2016, 2) == 29
        assert days_in_month(2015, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_invalid_month(self) -> None:
        """Month 13 is rejected."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2016, 13)


class TestValidation:
    """Tests for the range validators."""

    def test_validate_year_limits(self) -> None:
        """Years outside -9999..9999 are rejected."""
        validate_year(9999)
        validate_year(-9999)
        with pytest.raises(ValidationError, match="year must be between"):
            validate_year(10000)

    def test_validate_month(self) -> None:
        """Month 0 is rejected."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            validate_month(0)

    def test_validate_day(self) -> None:
        """The day must fit the month."""
        validate_day(2016, 4, 30)
        with pytest.raises(ValidationError, match="day must be between 1 and 30"):
            validate_day(2016, 4, 31)

    def test_validate_clock(self) -> None:
        """Each clock component has its own range."""
        validate_clock(23, 59, 59)
        with pytest.raises(ValidationError, match="hour"):
            validate_clock(24, 0, 0)
        with pytest.raises(ValidationError, match="minute"):
            validate_clock(0, 60, 0)
        with pytest.raises(ValidationError, match="second"):
            validate_clock(0, 0, 60)
        with pytest.raises(ValidationError, match="hour"):
            validate_clock(-1, 0, 0)
