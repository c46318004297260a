"""Tests for the Date class."""

from __future__ import annotations

import pytest

from chronoperiod import Date, Field, Period, PeriodUnit
from chronoperiod.chrono import ISO
from chronoperiod.errors import (
    ParseError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValidationError,
)


# =============================================================================
# Construction Tests
# =============================================================================


class TestDateConstruction:
    """Tests for Date construction."""

    def test_components(self):
        """Year, month and day round-trip through the epoch day."""
        d = Date(2024, 1, 15)
        assert (d.year, d.month, d.day) == (2024, 1, 15)
        assert d.day_of_month == 15
        assert d.chronology is ISO

    def test_invalid_components(self):
        """Out-of-range components raise ValidationError."""
        with pytest.raises(ValidationError):
            Date(2024, 13, 1)
        with pytest.raises(ValidationError):
            Date(2023, 2, 29)
        with pytest.raises(ValidationError):
            Date(1_000_000_000, 1, 1)

    def test_epoch_day(self):
        """Epoch day zero is 1970-01-01."""
        assert Date.of_epoch_day(0) == Date(1970, 1, 1)
        assert Date.of_epoch_day(-1) == Date(1969, 12, 31)
        assert Date(2000, 1, 1).epoch_day == 10_957

    def test_epoch_month(self):
        """Epoch month counts months since January 1970."""
        assert Date(1970, 2, 28).epoch_month == 1
        assert Date(1969, 12, 1).epoch_month == -1

    def test_of_year_day(self):
        """Day-of-year construction honors leap years."""
        assert Date.of_year_day(2024, 60) == Date(2024, 2, 29)
        with pytest.raises(ValidationError):
            Date.of_year_day(2023, 366)

    def test_from_iso_format(self):
        """ISO text parses, including signed years."""
        assert Date.from_iso_format("2024-01-15") == Date(2024, 1, 15)
        assert Date.from_iso_format("-0044-03-15") == Date(-44, 3, 15)
        with pytest.raises(ParseError):
            Date.from_iso_format("2024/01/15")

    def test_to_iso_format(self):
        """ISO output pads and signs the year."""
        assert Date(2024, 1, 5).to_iso_format() == "2024-01-05"
        assert Date(-44, 3, 15).to_iso_format() == "-0044-03-15"
        assert Date(12345, 1, 1).to_iso_format() == "+12345-01-01"


# =============================================================================
# Field Access Tests
# =============================================================================


class TestDateFields:
    """Tests for Date field access."""

    def test_get(self):
        """Date fields are answered, time fields are not."""
        d = Date(2012, 6, 12)
        assert d.get(Field.YEAR) == 2012
        assert d.get(Field.MONTH_OF_YEAR) == 6
        assert d.get(Field.DAY_OF_MONTH) == 12
        assert d.get(Field.ERA) == 1
        assert d.get(Field.YEAR_OF_ERA) == 2012
        with pytest.raises(UnsupportedFieldError):
            d.get(Field.HOUR_OF_DAY)

    def test_bce_year_of_era(self):
        """Year 0 is 1 BCE."""
        d = Date(0, 6, 1)
        assert d.get(Field.ERA) == 0
        assert d.get(Field.YEAR_OF_ERA) == 1

    def test_range(self):
        """Day-of-month range depends on the month."""
        assert str(Date(2023, 2, 1).range(Field.DAY_OF_MONTH)) == "1 - 28"
        assert str(Date(2024, 2, 1).range(Field.DAY_OF_MONTH)) == "1 - 29"
        assert Date(2024, 2, 1).range(Field.MONTH_OF_YEAR).is_fixed()

    def test_with_field(self):
        """Setting a field clamps the day where needed."""
        d = Date(2024, 3, 31)
        assert d.with_field(Field.MONTH_OF_YEAR, 2) == Date(2024, 2, 29)
        assert d.with_field(Field.DAY_OF_MONTH, 1) == Date(2024, 3, 1)
        assert d.with_field(Field.ERA, 0) == Date(-2023, 3, 31)
        with pytest.raises(ValidationError):
            d.with_field(Field.MONTH_OF_YEAR, 13)


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestDateArithmetic:
    """Tests for Date arithmetic."""

    def test_plus_months_clamps(self):
        """Adding months clamps to the end of the month."""
        assert Date(2024, 1, 31).plus_months(1) == Date(2024, 2, 29)
        assert Date(2023, 1, 31).plus_months(1) == Date(2023, 2, 28)
        assert Date(2024, 3, 31).plus_months(-13) == Date(2023, 2, 28)

    def test_plus_years_leap_day(self):
        """Feb 29 becomes Feb 28 in a common year."""
        assert Date(2024, 2, 29).plus_years(1) == Date(2025, 2, 28)

    def test_plus_units(self):
        """Every date-based unit is supported."""
        d = Date(2010, 1, 31)
        assert d.plus(1, PeriodUnit.MONTHS) == Date(2010, 2, 28)
        assert d.plus(2, PeriodUnit.WEEKS) == Date(2010, 2, 14)
        assert d.plus(1, PeriodUnit.QUARTER_YEARS) == Date(2010, 4, 30)
        assert d.plus(1, PeriodUnit.DECADES) == Date(2020, 1, 31)
        assert d.plus(-1, PeriodUnit.CENTURIES) == Date(1910, 1, 31)
        assert d.plus(1, PeriodUnit.MILLENNIA) == Date(3010, 1, 31)
        assert d.plus(-1, PeriodUnit.ERAS) == Date(-2009, 1, 31)

    def test_time_unit_rejected(self):
        """Time-based units cannot be added to a Date."""
        with pytest.raises(UnsupportedUnitError):
            Date(2010, 1, 31).plus(1, PeriodUnit.HOURS)

    def test_minus_unit(self):
        """minus is plus of the negated amount."""
        assert Date(2010, 3, 31).minus(1, PeriodUnit.MONTHS) == Date(2010, 2, 28)

    def test_add_period_order(self):
        """Months are added before days."""
        assert Date(2023, 1, 31) + Period.of_date_fields(0, 1, 1) == Date(2023, 3, 1)
        assert Date(2024, 1, 15) + Period.of_days(10) == Date(2024, 1, 25)

    def test_subtract_period(self):
        """Subtracting a Period goes field by field in the same order."""
        assert Date(2024, 3, 31) - Period.of_months(1) == Date(2024, 2, 29)
        assert Date(2024, 3, 31).minus(Period.of_units(1, 1, 1, 0, 0, 0)) == Date(2023, 2, 27)

    def test_time_period_rejected(self):
        """A Period with a time component cannot be added to a Date."""
        with pytest.raises(UnsupportedUnitError):
            Date(2024, 1, 1) + Period.of_hours(1)

    def test_date_difference(self):
        """Subtracting two dates gives the ISO period between them."""
        assert Date(2014, 2, 28) - Date(2012, 2, 29) == Period.of_date_fields(1, 11, 30)
        assert Date(2010, 1, 10).until(Date(2010, 2, 9)) == Period.of_days(30)


# =============================================================================
# Comparison Tests
# =============================================================================


class TestDateComparison:
    """Tests for Date comparison and hashing."""

    def test_ordering(self):
        """Dates order chronologically."""
        assert Date(2024, 1, 1) < Date(2024, 1, 2)
        assert Date(2024, 1, 2) >= Date(2024, 1, 2)
        assert Date(2024, 1, 1) != Date(2024, 1, 2)

    def test_hash(self):
        """Equal dates hash equally."""
        assert hash(Date(2024, 1, 1)) == hash(Date.of_epoch_day(Date(2024, 1, 1).epoch_day))

    def test_foreign_type(self):
        """Comparison with another type is not equality."""
        assert Date(2024, 1, 1) != "2024-01-01"
