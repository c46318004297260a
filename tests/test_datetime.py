"""Tests for the DateTime class."""

from __future__ import annotations

import pytest

from chronoperiod import Date, DateTime, Field, Period, PeriodUnit, Time
from chronoperiod.errors import ParseError, UnsupportedUnitError, ValidationError


class TestDateTimeConstruction:
    """Tests for DateTime construction."""

    def test_components(self):
        """Date and time parts are exposed separately."""
        dt = DateTime(2024, 1, 15, 14, 30, 45, nanosecond=5)
        assert dt.date() == Date(2024, 1, 15)
        assert dt.time() == Time(14, 30, 45, nanosecond=5)
        assert (dt.year, dt.month, dt.day) == (2024, 1, 15)
        assert (dt.hour, dt.minute, dt.second, dt.nanosecond) == (14, 30, 45, 5)

    def test_combine(self):
        """combine joins a Date and a Time."""
        dt = DateTime.combine(Date(2024, 1, 15), Time(9, 0))
        assert dt == DateTime(2024, 1, 15, 9)

    def test_invalid(self):
        """Invalid components raise ValidationError."""
        with pytest.raises(ValidationError):
            DateTime(2024, 2, 30)
        with pytest.raises(ValidationError):
            DateTime(2024, 2, 1, 24)

    def test_iso_format(self):
        """ISO text round-trips."""
        dt = DateTime.from_iso_format("2024-01-15T14:30:45.5")
        assert dt == DateTime(2024, 1, 15, 14, 30, 45, nanosecond=500_000_000)
        assert dt.to_iso_format() == "2024-01-15T14:30:45.5"
        with pytest.raises(ParseError):
            DateTime.from_iso_format("2024-01-15 14:30")


class TestDateTimeFields:
    """Tests for DateTime field access."""

    def test_get_dispatches(self):
        """Date fields come from the date, time fields from the time."""
        dt = DateTime(2012, 6, 12, 1, 2, 3)
        assert dt.get(Field.YEAR) == 2012
        assert dt.get(Field.DAY_OF_MONTH) == 12
        assert dt.get(Field.MINUTE_OF_HOUR) == 2
        assert dt.get(Field.NANO_OF_DAY) == 3_723_000_000_000
        assert dt.range(Field.DAY_OF_MONTH).maximum == 30


class TestDateTimeArithmetic:
    """Tests for DateTime arithmetic."""

    def test_plus_hours_carries(self):
        """Time units carry across midnight into the date."""
        assert DateTime(2024, 1, 31, 23, 0).plus(2, PeriodUnit.HOURS) == DateTime(2024, 2, 1, 1, 0)
        assert DateTime(2024, 1, 1, 0, 30).minus(1, PeriodUnit.HOURS) == DateTime(2023, 12, 31, 23, 30)

    def test_plus_date_units(self):
        """Date units go to the date part."""
        assert DateTime(2024, 1, 31, 12).plus(1, PeriodUnit.MONTHS) == DateTime(2024, 2, 29, 12)

    def test_forever_rejected(self):
        """FOREVER cannot be added."""
        with pytest.raises(UnsupportedUnitError):
            DateTime(2024, 1, 31).plus(1, PeriodUnit.FOREVER)

    def test_add_period_in_order(self):
        """Months are applied before the time component."""
        dt = DateTime(2012, 1, 31, 12, 0)
        assert dt + Period.of_units(0, 1, 0, 13, 0, 0) == DateTime(2012, 3, 1, 1, 0)

    def test_subtract_period(self):
        """Subtracting a Period borrows from the date."""
        assert DateTime(2012, 3, 1, 1, 0) - Period.of_hours(2) == DateTime(2012, 2, 29, 23, 0)

    def test_until(self):
        """The ISO period between date-times keeps date and time apart."""
        start = DateTime(2010, 1, 1, 12)
        end = DateTime(2010, 2, 1, 11)
        assert str(start.until(end)) == "P1MT-1H"


class TestDateTimeComparison:
    """Tests for DateTime comparison."""

    def test_ordering(self):
        """Date-times order by date, then time."""
        assert DateTime(2024, 1, 1, 23) < DateTime(2024, 1, 2, 0)
        assert DateTime(2024, 1, 1, 1) > DateTime(2024, 1, 1, 0, 59)
        assert DateTime(2024, 1, 1) == DateTime.combine(Date(2024, 1, 1), Time.midnight())
        assert hash(DateTime(2024, 1, 1)) == hash(DateTime(2024, 1, 1, 0, 0, 0))
