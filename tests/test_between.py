"""Tests for the between-calculations."""

from __future__ import annotations

import pytest

from chronoperiod import (
    ISO,
    MINGUO,
    Date,
    DateTime,
    Field,
    Month,
    Period,
    PeriodUnit,
    Time,
    YearMonth,
)
from chronoperiod.arithmetic import between, between_iso, units_between
from chronoperiod.errors import (
    ArithmeticOverflowError,
    ChronologyMismatchError,
    NoValidFieldsError,
    NullInputError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValidationError,
)


class _NoFields:
    """An ISO value that supports none of the between fields."""

    @property
    def chronology(self):
        return ISO

    def get(self, field):
        raise UnsupportedFieldError(f"Unsupported field: {field.name}")

    def range(self, field):
        raise UnsupportedFieldError(f"Unsupported field: {field.name}")


class _HugeYear:
    """An ISO value whose year is far outside 32 bits."""

    def __init__(self, year):
        self._year = year

    @property
    def chronology(self):
        return ISO

    def get(self, field):
        if field is Field.YEAR:
            return self._year
        raise UnsupportedFieldError(f"Unsupported field: {field.name}")

    def range(self, field):
        return field.range()


# =============================================================================
# ISO Date Algorithm
# =============================================================================


class TestBetweenIsoDates:
    """Tests for the calendar-exact ISO date algorithm."""

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            (Date(2010, 1, 10), Date(2010, 2, 9), (0, 0, 30)),
            (Date(2012, 2, 29), Date(2014, 2, 28), (1, 11, 30)),
            (Date(2010, 1, 1), Date(2009, 12, 1), (0, -1, 0)),
            (Date(2012, 2, 29), Date(2009, 2, 28), (-3, 0, -1)),
            (Date(2010, 3, 30), Date(2011, 5, 1), (1, 1, 1)),
            (Date(2010, 1, 15), Date(2009, 12, 14), (0, -1, -1)),
            (Date(2010, 2, 28), Date(2008, 2, 29), (-1, -11, -28)),
            (Date(2010, 1, 31), Date(2010, 3, 1), (0, 1, 1)),
            (Date(2010, 1, 1), Date(2010, 1, 1), (0, 0, 0)),
        ],
    )
    def test_date_pairs(self, start, end, expected):
        """Years, months and days follow the end-of-month policy."""
        assert between_iso(start, end) == Period.of_date_fields(*expected)
        assert Period.between_iso(start, end) == Period.of_date_fields(*expected)

    def test_text_results(self):
        """Results render in canonical form."""
        assert str(between_iso(Date(2010, 1, 1), Date(2010, 2, 1))) == "P1M"
        assert str(between_iso(Date(2012, 2, 28), Date(2012, 2, 27))) == "P-1D"

    def test_same_date_is_zero(self):
        """The same date gives the canonical zero."""
        assert between_iso(Date(2010, 1, 1), Date(2010, 1, 1)) is Period.ZERO

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            (Date(2010, 1, 31), Date(2010, 3, 1)),
            (Date(2010, 3, 30), Date(2011, 5, 1)),
            (Date(2011, 12, 31), Date(2012, 12, 31)),
        ],
    )
    def test_forward_result_reaches_end(self, start, end):
        """For forward pairs, start plus the result is end."""
        assert start + between_iso(start, end) == end


# =============================================================================
# ISO Time and Date-Time
# =============================================================================


class TestBetweenIsoTimes:
    """Tests for the ISO time and date-time algorithm."""

    def test_times(self):
        """Times give a time-only Period."""
        assert str(between_iso(Time(11, 0), Time(12, 30))) == "PT1H30M"
        assert str(between_iso(Time(12, 30, 40), Time(11, 30, 40))) == "PT-1H"

    def test_date_times(self):
        """Date-times combine the two results with no carry."""
        start = DateTime(2010, 1, 1, 12)
        end = DateTime(2010, 2, 1, 11)
        assert between_iso(start, end) == Period(months=1, nanos=-3_600_000_000_000)

    def test_mixed_types_rejected(self):
        """A Date and a Time are not a valid pair."""
        with pytest.raises(ValidationError):
            between_iso(Date(2010, 1, 1), Time(12, 0))
        with pytest.raises(ValidationError):
            between_iso(YearMonth(2010, 1), YearMonth(2010, 2))

    def test_none_rejected(self):
        """None is rejected."""
        with pytest.raises(NullInputError):
            between_iso(None, Date(2010, 1, 1))
        with pytest.raises(NullInputError):
            between_iso(Date(2010, 1, 1), None)


# =============================================================================
# Generic Field Algorithm
# =============================================================================


class TestBetweenGeneric:
    """Tests for the field-by-field algorithm."""

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            (Date(2010, 6, 12), Date(2009, 9, 24), (0, -9, 12)),
            (Date(2010, 6, 12), Date(2008, 9, 24), (-1, -9, 12)),
            (Date(2010, 6, 12), Date(2010, 1, 1), (0, -5, -11)),
            (Date(2010, 1, 31), Date(2010, 3, 1), (0, 2, -30)),
        ],
    )
    def test_dates(self, start, end, expected):
        """Each field differs independently; years and months share a sign."""
        assert between(start, end) == Period.of_date_fields(*expected)

    def test_year_months(self):
        """A YearMonth gives years and months only."""
        assert between(YearMonth(2012, 6), YearMonth(2013, 7)) == Period.of_date_fields(1, 1, 0)
        assert between(YearMonth(2012, 6), YearMonth(2011, 7)) == Period.of_date_fields(0, -11, 0)

    def test_months(self):
        """A Month gives months only."""
        assert Period.between(Month.FEBRUARY, Month.MAY) == Period.of_months(3)
        assert Period.between(Month.NOVEMBER, Month.MAY) == Period.of_months(-6)

    def test_times(self):
        """A Time gives the nano-of-day difference."""
        assert str(Period.between(Time(12, 30, 40), Time(11, 30, 40))) == "PT-1H"

    def test_date_times(self):
        """A DateTime contributes every field."""
        p = between(DateTime(2010, 1, 31, 12), DateTime(2010, 3, 1, 11))
        assert p == Period(0, 2, -30, -3_600_000_000_000)

    def test_regional_dates(self):
        """Regional dates use their own year numbering."""
        start = MINGUO.date(101, 6, 12)
        assert between(start, MINGUO.date(102, 7, 13)) == Period.of_date_fields(1, 1, 1)
        assert start.until(MINGUO.date(100, 6, 12)) == Period.of_years(-1)

    def test_chronology_mismatch(self):
        """Values of different chronologies cannot be compared."""
        with pytest.raises(ChronologyMismatchError):
            between(Date(2012, 6, 12), MINGUO.date(101, 6, 12))

    def test_no_valid_fields(self):
        """A value supporting no between field is rejected."""
        with pytest.raises(NoValidFieldsError):
            between(_NoFields(), _NoFields())

    def test_year_overflow(self):
        """A year difference beyond 32 bits overflows."""
        with pytest.raises(ArithmeticOverflowError):
            between(_HugeYear(-(2**31)), _HugeYear(2**31))

    def test_none_rejected(self):
        """None is rejected."""
        with pytest.raises(NullInputError):
            between(Date(2010, 1, 1), None)


# =============================================================================
# Unit Counting
# =============================================================================


class TestUnitsBetween:
    """Tests for counting whole units."""

    @pytest.mark.parametrize(
        ("start", "end", "unit", "expected"),
        [
            (Date(1939, 9, 2), Date(1940, 9, 2), PeriodUnit.YEARS, 1),
            (Date(1939, 9, 2), Date(1940, 9, 1), PeriodUnit.YEARS, 0),
            (Date(2012, 7, 2), Date(2012, 8, 1), PeriodUnit.MONTHS, 0),
            (Date(2012, 7, 2), Date(2012, 8, 2), PeriodUnit.MONTHS, 1),
            (Date(2012, 8, 2), Date(2012, 7, 3), PeriodUnit.MONTHS, 0),
            (Date(2012, 7, 8), Date(2012, 7, 1), PeriodUnit.WEEKS, -1),
            (Date(2012, 7, 1), Date(2012, 7, 7), PeriodUnit.WEEKS, 0),
            (Date(2012, 1, 1), Date(2012, 3, 1), PeriodUnit.DAYS, 60),
            (Date(2012, 1, 15), Date(2012, 7, 14), PeriodUnit.QUARTER_YEARS, 1),
            (Date(1900, 1, 1), Date(2100, 1, 1), PeriodUnit.CENTURIES, 2),
            (Date(2000, 1, 1), Date(1000, 1, 2), PeriodUnit.MILLENNIA, 0),
        ],
    )
    def test_counts(self, start, end, unit, expected):
        """Whole units are counted toward zero."""
        assert units_between(start, end, unit) == expected

    def test_unsupported_units(self):
        """Time-based units, ERAS and FOREVER are rejected."""
        for unit in (PeriodUnit.HOURS, PeriodUnit.ERAS, PeriodUnit.FOREVER):
            with pytest.raises(UnsupportedUnitError):
                units_between(Date(2012, 1, 1), Date(2013, 1, 1), unit)

    def test_regional_dates(self):
        """Unit counts work on any value with epoch fields."""
        assert units_between(MINGUO.date(101, 1, 1), MINGUO.date(102, 1, 1), PeriodUnit.YEARS) == 1
