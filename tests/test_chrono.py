"""Tests for chronologies and regional dates."""

from __future__ import annotations

import pytest

from chronoperiod import (
    ISO,
    JAPANESE,
    MINGUO,
    THAI_BUDDHIST,
    ChronoDate,
    Chronology,
    Date,
    Field,
    IsoEra,
    JapaneseEra,
    MinguoEra,
    Period,
    PeriodUnit,
    ThaiBuddhistEra,
    ValueRange,
)
from chronoperiod._internal.constants import MAX_YEAR, MIN_YEAR
from chronoperiod.errors import NullInputError, UnsupportedFieldError, ValidationError


# =============================================================================
# Registry Tests
# =============================================================================


class TestChronologyRegistry:
    """Tests for looking up chronologies."""

    def test_lookup_by_name_and_type(self):
        """Chronologies are found by name or calendar type."""
        assert Chronology.of("ISO") is ISO
        assert Chronology.of("iso8601") is ISO
        assert Chronology.of("Minguo") is MINGUO
        assert Chronology.of("ROC") is MINGUO
        assert Chronology.of("buddhist") is THAI_BUDDHIST
        assert Chronology.of("Japanese") is JAPANESE

    def test_unknown(self):
        """Unknown names raise ValidationError."""
        with pytest.raises(ValidationError):
            Chronology.of("Coptic")
        with pytest.raises(NullInputError):
            Chronology.of(None)

    def test_available(self):
        """Each chronology is listed once, ISO first."""
        available = Chronology.available()
        assert available[0] is ISO
        assert len(available) == len(set(map(id, available)))
        assert {MINGUO, THAI_BUDDHIST, JAPANESE} <= set(available)

    def test_incomplete_chronology_cannot_be_created(self):
        """A chronology must implement the calendar rules."""

        class DatesOnly(Chronology):
            __slots__ = ()

            def date(self, year, month, day):
                return Date(year, month, day)

        with pytest.raises(TypeError, match="abstract"):
            DatesOnly("DatesOnly", "dates-only")

    def test_names(self):
        """repr and str identify the chronology."""
        assert repr(MINGUO) == "Chronology.of('Minguo')"
        assert str(THAI_BUDDHIST) == "ThaiBuddhist"
        assert MINGUO.calendar_type == "roc"


# =============================================================================
# ISO Chronology
# =============================================================================


class TestIsoChronology:
    """Tests for the ISO chronology."""

    def test_dates_are_plain_dates(self):
        """The ISO chronology builds Date values."""
        assert ISO.date(2012, 6, 12) == Date(2012, 6, 12)
        assert ISO.date_from_epoch_day(0) == Date(1970, 1, 1)
        assert Date(2012, 6, 12).chronology is ISO

    def test_eras(self):
        """ISO eras map year-of-era to proleptic years."""
        assert ISO.eras == [IsoEra.BCE, IsoEra.CE]
        assert ISO.proleptic_year(IsoEra.BCE, 1) == 0
        assert ISO.date_of_era(IsoEra.CE, 2012, 6, 12) == Date(2012, 6, 12)
        with pytest.raises(ValidationError):
            ISO.proleptic_year(MinguoEra.ROC, 1)

    def test_rules(self):
        """Leap years and month-of-year range."""
        assert ISO.is_leap_year(2000)
        assert not ISO.is_leap_year(1900)
        assert ISO.range(Field.MONTH_OF_YEAR).is_fixed()


# =============================================================================
# Offset Chronologies
# =============================================================================


class TestMinguoChronology:
    """Tests for the Minguo calendar."""

    def test_date(self):
        """ROC 101 is ISO 2012."""
        d = MINGUO.date(101, 6, 12)
        assert isinstance(d, ChronoDate)
        assert d.to_iso_date() == Date(2012, 6, 12)
        assert (d.year, d.month, d.day) == (101, 6, 12)
        assert d.era is MinguoEra.ROC
        assert d.year_of_era == 101
        assert str(d) == "Minguo ROC 101-06-12"
        assert repr(d) == "ChronoDate('Minguo', 101, 6, 12)"

    def test_before_roc(self):
        """Year zero and earlier are before ROC."""
        d = MINGUO.date(0, 1, 1)
        assert d.to_iso_date() == Date(1911, 1, 1)
        assert d.era is MinguoEra.BEFORE_ROC
        assert d.year_of_era == 1
        assert MINGUO.date_of_era(MinguoEra.BEFORE_ROC, 1, 1, 1) == d

    def test_fields(self):
        """Year fields come from the chronology, the rest from ISO."""
        d = MINGUO.date(101, 6, 12)
        assert d.get(Field.YEAR) == 101
        assert d.get(Field.ERA) == 1
        assert d.get(Field.MONTH_OF_YEAR) == 6
        assert d.get(Field.EPOCH_DAY) == Date(2012, 6, 12).epoch_day
        with pytest.raises(UnsupportedFieldError):
            d.get(Field.HOUR_OF_DAY)

    def test_ranges(self):
        """The year range is shifted by the offset."""
        assert MINGUO.range(Field.YEAR) == ValueRange(MIN_YEAR - 1911, MAX_YEAR - 1911)
        assert MINGUO.date(101, 2, 1).range(Field.DAY_OF_MONTH) == ValueRange(1, 29)
        assert MINGUO.date(101, 2, 1).range(Field.YEAR_OF_ERA).maximum == MAX_YEAR - 1911

    def test_with_field(self):
        """Year fields are set in ROC terms."""
        d = MINGUO.date(101, 6, 12)
        assert d.with_field(Field.YEAR_OF_ERA, 1).to_iso_date() == Date(1912, 6, 12)
        assert d.with_field(Field.ERA, 0).to_iso_date() == Date(1811, 6, 12)
        assert d.with_field(Field.DAY_OF_MONTH, 1) == MINGUO.date(101, 6, 1)

    def test_arithmetic(self):
        """Arithmetic clamps the day like ISO."""
        d = MINGUO.date(101, 1, 31)
        assert d.plus(1, PeriodUnit.MONTHS) == MINGUO.date(101, 2, 29)
        assert d + Period.of_years(1) == MINGUO.date(102, 1, 31)
        assert d - Period.of_days(31) == MINGUO.date(100, 12, 31)
        assert d.plus(-1, PeriodUnit.ERAS).era is MinguoEra.BEFORE_ROC

    def test_leap_year(self):
        """Leap years follow the ISO year."""
        assert MINGUO.is_leap_year(101)
        assert MINGUO.date(101, 1, 1).is_leap_year

    def test_equality_is_per_chronology(self):
        """The same day in two calendars is not equal."""
        assert MINGUO.date(101, 6, 12) != THAI_BUDDHIST.date(2555, 6, 12)
        assert MINGUO.date_from(Date(2012, 6, 12)) == MINGUO.date(101, 6, 12)
        assert hash(MINGUO.date(101, 6, 12)) == hash(MINGUO.date_from_epoch_day(Date(2012, 6, 12).epoch_day))


class TestThaiBuddhistChronology:
    """Tests for the Thai Buddhist calendar."""

    def test_date(self):
        """BE 2555 is ISO 2012."""
        d = THAI_BUDDHIST.date(2555, 6, 12)
        assert d.to_iso_date() == Date(2012, 6, 12)
        assert d.era is ThaiBuddhistEra.BE
        assert str(d) == "ThaiBuddhist BE 2555-06-12"

    def test_year_out_of_range(self):
        """Years beyond the shifted range are rejected."""
        with pytest.raises(ValidationError):
            THAI_BUDDHIST.date(MAX_YEAR + 544, 1, 1)


# =============================================================================
# Japanese Chronology
# =============================================================================


class TestJapaneseEra:
    """Tests for the Japanese eras."""

    def test_values_and_starts(self):
        """Eras are numbered from Meiji at -1."""
        assert JapaneseEra.of(-1) is JapaneseEra.MEIJI
        assert JapaneseEra.HEISEI.since == Date(1989, 1, 8)
        assert JapaneseEra.SHOWA.next is JapaneseEra.HEISEI
        assert JapaneseEra.REIWA.next is None
        with pytest.raises(ValidationError):
            JapaneseEra.of(4)

    def test_from_date(self):
        """Era boundaries fall on their start dates."""
        assert JapaneseEra.from_date(Date(1989, 1, 7)) is JapaneseEra.SHOWA
        assert JapaneseEra.from_date(Date(1989, 1, 8)) is JapaneseEra.HEISEI
        assert JapaneseEra.from_date(Date(2019, 5, 1)) is JapaneseEra.REIWA
        with pytest.raises(ValidationError):
            JapaneseEra.from_date(Date(1867, 12, 31))


class TestJapaneseChronology:
    """Tests for the Japanese calendar."""

    def test_date_of_era(self):
        """Heisei 24 is 2012."""
        d = JAPANESE.date_of_era(JapaneseEra.HEISEI, 24, 6, 12)
        assert d.to_iso_date() == Date(2012, 6, 12)
        assert d.era is JapaneseEra.HEISEI
        assert d.year_of_era == 24
        assert d.get(Field.YEAR) == 2012
        assert str(d) == "Japanese HEISEI 24-06-12"

    @pytest.mark.parametrize(
        ("era", "year_of_era", "expected"),
        [
            (JapaneseEra.SHOWA, 64, 1989),
            (JapaneseEra.HEISEI, 31, 2019),
            (JapaneseEra.MEIJI, 45, 1912),
            (JapaneseEra.TAISHO, 1, 1912),
        ],
    )
    def test_valid_years_of_era(self, era, year_of_era, expected):
        """The final partial year of an era exists."""
        assert JAPANESE.proleptic_year(era, year_of_era) == expected

    @pytest.mark.parametrize(
        ("era", "year_of_era"),
        [
            (JapaneseEra.TAISHO, 16),
            (JapaneseEra.SHOWA, 65),
            (JapaneseEra.HEISEI, 32),
            (JapaneseEra.HEISEI, 0),
        ],
    )
    def test_invalid_years_of_era(self, era, year_of_era):
        """Years after the era ended do not exist."""
        with pytest.raises(ValidationError):
            JAPANESE.proleptic_year(era, year_of_era)

    def test_date_outside_era(self):
        """A date in the next era is not part of the named era."""
        assert JAPANESE.date_of_era(JapaneseEra.SHOWA, 64, 1, 7).era is JapaneseEra.SHOWA
        with pytest.raises(ValidationError):
            JAPANESE.date_of_era(JapaneseEra.SHOWA, 64, 1, 8)

    def test_before_meiji_rejected(self):
        """Dates before Meiji 1 are not supported."""
        with pytest.raises(ValidationError):
            JAPANESE.date(1867, 12, 31)

    def test_wrong_era_type(self):
        """Eras of other calendars are rejected."""
        with pytest.raises(ValidationError):
            JAPANESE.proleptic_year(IsoEra.CE, 1)

    def test_ranges(self):
        """Era and year-of-era ranges."""
        assert JAPANESE.range(Field.ERA) == ValueRange(-1, 3)
        assert JAPANESE.range(Field.YEAR).minimum == 1868
        heisei = JAPANESE.date(2012, 6, 12)
        assert heisei.range(Field.YEAR_OF_ERA) == ValueRange(1, 31)

    def test_with_year_fields(self):
        """Changing era or year-of-era keeps the month and day."""
        d = JAPANESE.date(2012, 6, 12)
        assert d.with_field(Field.ERA, JapaneseEra.SHOWA.value).to_iso_date() == Date(1949, 6, 12)
        assert d.with_field(Field.YEAR_OF_ERA, 30).to_iso_date() == Date(2018, 6, 12)
        with pytest.raises(ValidationError):
            d.with_field(Field.YEAR_OF_ERA, 40)

    def test_between_across_eras(self):
        """The generic algorithm works across an era boundary."""
        start = JAPANESE.date(1989, 1, 7)
        end = JAPANESE.date(1989, 1, 8)
        assert start.until(end) == Period.of_days(1)
        assert Period.between(start, JAPANESE.date(1990, 2, 7)) == Period.of_date_fields(1, 1, 0)
