"""The Japanese imperial calendar.

Years are ISO years, but the year-of-era restarts at 1 on the day a new
era begins, so era boundaries fall part way through an ISO year. Only
dates from Meiji 1 (1868-01-01) onwards are supported.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from chronoperiod._internal.calendar import is_leap_year
from chronoperiod._internal.constants import JAPANESE_ERA_SINCE, MAX_YEAR
from chronoperiod.chrono.chronology import Chronology, register
from chronoperiod.core.date import Date
from chronoperiod.errors import ValidationError
from chronoperiod.units.field import Field
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from chronoperiod.chrono.chrono_date import ChronoDate


class JapaneseEra(Enum):
    """Eras of the Japanese calendar from Meiji onwards.

    Values follow Field.ERA: Meiji is -1 and Taisho 0.

    Examples:
        >>> JapaneseEra.HEISEI.since
        Date(1989, 1, 8)
        >>> JapaneseEra.from_date(Date(1989, 1, 7))
        <JapaneseEra.SHOWA: 1>
    """

    MEIJI = -1
    TAISHO = 0
    SHOWA = 1
    HEISEI = 2
    REIWA = 3

    @classmethod
    def of(cls, value: int) -> JapaneseEra:
        """Return the era with the given Field.ERA value.

        Raises:
            ValidationError: If no era has that value.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid era for JapaneseEra: {value}") from None

    @classmethod
    def from_date(cls, date: Date) -> JapaneseEra:
        """Return the era containing an ISO date.

        Raises:
            ValidationError: If the date is before Meiji 1.
        """
        for era in reversed(cls):
            if date >= era.since:
                return era
        raise ValidationError(f"Japanese calendar does not support dates before Meiji 1: {date}")

    @property
    def since(self) -> Date:
        """Return the first day of this era."""
        return Date(*JAPANESE_ERA_SINCE[self.value + 1])

    @property
    def next(self) -> JapaneseEra | None:
        if self is JapaneseEra.REIWA:
            return None
        return JapaneseEra(self.value + 1)


class JapaneseChronology(Chronology):
    """The Japanese imperial calendar system.

    Examples:
        >>> JAPANESE.date_of_era(JapaneseEra.HEISEI, 24, 6, 12).to_iso_date()
        Date(2012, 6, 12)
        >>> JAPANESE.proleptic_year(JapaneseEra.SHOWA, 64)
        1989
    """

    __slots__ = ()

    def date(self, year: int, month: int, day: int) -> ChronoDate:
        return self.date_from_iso(Date(year, month, day))

    def date_of_era(self, era: JapaneseEra, year_of_era: int, month: int, day: int) -> ChronoDate:  # type: ignore[override]
        """Return the date for an era, year-of-era, month and day.

        Raises:
            ValidationError: If the date does not lie within the era.
        """
        result = self.date(self.proleptic_year(era, year_of_era), month, day)
        if JapaneseEra.from_date(result.to_iso_date()) is not era:
            raise ValidationError(
                f"{result.to_iso_date()} is not within era {era.name} year {year_of_era}"
            )
        return result

    def date_from_iso(self, iso_date: Date) -> ChronoDate:
        from chronoperiod.chrono.chrono_date import ChronoDate

        JapaneseEra.from_date(iso_date)
        return ChronoDate(self, iso_date)

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def proleptic_year(self, era: JapaneseEra, year_of_era: int) -> int:  # type: ignore[override]
        """Return the ISO year of a year-of-era.

        Year 1 always exists. Any later year-of-era must begin (on the
        first of January) before the next era starts.

        Raises:
            ValidationError: If the year-of-era does not exist in the era.
        """
        if not isinstance(era, JapaneseEra):
            raise ValidationError(f"Era must be JapaneseEra, got {era!r}")
        if year_of_era < 1:
            raise ValidationError(f"Invalid year-of-era for {era.name}: {year_of_era}")
        year = era.since.year + year_of_era - 1
        if year_of_era == 1:
            return year
        next_era = era.next
        if year > MAX_YEAR or (next_era is not None and Date(year, 1, 1) >= next_era.since):
            raise ValidationError(f"Invalid year-of-era for {era.name}: {year_of_era}")
        return year

    @property
    def eras(self) -> list[JapaneseEra]:  # type: ignore[override]
        return list(JapaneseEra)

    def era_of(self, value: int) -> JapaneseEra:
        return JapaneseEra.of(value)

    def range(self, field: Field) -> ValueRange:
        if field is Field.ERA:
            return ValueRange(JapaneseEra.MEIJI.value, JapaneseEra.REIWA.value)
        if field is Field.YEAR:
            return ValueRange(JapaneseEra.MEIJI.since.year, MAX_YEAR)
        if field is Field.YEAR_OF_ERA:
            # Taisho is the shortest era at 15 years
            return ValueRange(1, MAX_YEAR - JapaneseEra.REIWA.since.year + 1, smallest_maximum=15)
        return field.range()

    def get_year_field(self, iso_date: Date, field: Field) -> int:
        if field is Field.YEAR:
            return iso_date.year
        era = JapaneseEra.from_date(iso_date)
        if field is Field.ERA:
            return era.value
        return iso_date.year - era.since.year + 1

    def with_year_field(self, iso_date: Date, field: Field, value: int) -> Date:
        era = JapaneseEra.from_date(iso_date)
        if field is Field.YEAR:
            self.range(field).check_valid_value(value, field)
            new_year = value
        elif field is Field.ERA:
            year_of_era = iso_date.year - era.since.year + 1
            new_year = self.proleptic_year(JapaneseEra.of(value), year_of_era)
        else:
            new_year = self.proleptic_year(era, value)
        result = iso_date.with_field(Field.YEAR, new_year)
        JapaneseEra.from_date(result)
        return result

    def year_field_range(self, iso_date: Date, field: Field) -> ValueRange:
        if field is Field.YEAR_OF_ERA:
            era = JapaneseEra.from_date(iso_date)
            next_era = era.next
            last_year = next_era.since.year if next_era is not None else MAX_YEAR
            return ValueRange(1, last_year - era.since.year + 1)
        return self.range(field)


JAPANESE = register(JapaneseChronology("Japanese", "japanese"))


__all__ = ["JapaneseEra", "JapaneseChronology", "JAPANESE"]
