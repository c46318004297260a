"""Calendar systems and the registry used to look them up by name.

A Chronology maps an ISO epoch-day-backed date onto its own year
numbering and eras. Months and days of month are shared with ISO in
every built-in chronology, so only the year fields ever differ.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from chronoperiod._internal.calendar import is_leap_year
from chronoperiod._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    MINGUO_YEARS_DIFFERENCE,
    THAI_BUDDHIST_YEARS_DIFFERENCE,
)
from chronoperiod._internal.validation import check_not_none
from chronoperiod.errors import ValidationError
from chronoperiod.units.era import IsoEra, MinguoEra, ThaiBuddhistEra
from chronoperiod.units.field import Field
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from enum import Enum

    from chronoperiod.chrono.chrono_date import ChronoDate
    from chronoperiod.core.date import Date

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, Chronology] = {}


class Chronology(ABC):
    """A calendar system.

    Chronologies are singletons compared by identity. Look them up with
    ``Chronology.of`` using either the name or the calendar type.
    Subclasses implement date construction, the calendar rules and the
    year fields.

    Examples:
        >>> Chronology.of("Minguo").date(101, 6, 12).to_iso_date()
        Date(2012, 6, 12)
        >>> Chronology.of("buddhist") is THAI_BUDDHIST
        True
    """

    __slots__ = ("_name", "_calendar_type")

    def __init__(self, name: str, calendar_type: str) -> None:
        self._name = name
        self._calendar_type = calendar_type

    @classmethod
    def of(cls, name: str) -> Chronology:
        """Return the chronology registered under a name or calendar type.

        Raises:
            NullInputError: If name is None.
            ValidationError: If no chronology has that name.
        """
        check_not_none(name, "name")
        chronology = _REGISTRY.get(name) or _REGISTRY.get(name.lower())
        if chronology is None:
            logger.debug("Unknown chronology %r, known: %s", name, sorted(_REGISTRY))
            raise ValidationError(f"Unknown chronology: {name}")
        return chronology

    @classmethod
    def available(cls) -> list[Chronology]:
        """Return the registered chronologies, ISO first."""
        seen: list[Chronology] = []
        for chronology in _REGISTRY.values():
            if chronology not in seen:
                seen.append(chronology)
        return seen

    @property
    def name(self) -> str:
        return self._name

    @property
    def calendar_type(self) -> str:
        return self._calendar_type

    # -------------------------------------------------------------------------
    # Date construction
    # -------------------------------------------------------------------------

    @abstractmethod
    def date(self, year: int, month: int, day: int) -> Date | ChronoDate:
        """Return the date with this chronology's proleptic year, month and day."""
        raise NotImplementedError

    def date_of_era(self, era: Enum, year_of_era: int, month: int, day: int) -> Date | ChronoDate:
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    @abstractmethod
    def date_from_iso(self, iso_date: Date) -> Date | ChronoDate:
        """Return the date in this chronology for the same day as iso_date."""
        raise NotImplementedError

    def date_from_epoch_day(self, epoch_day: int) -> Date | ChronoDate:
        from chronoperiod.core.date import Date

        return self.date_from_iso(Date.of_epoch_day(epoch_day))

    def date_from(self, value: object) -> Date | ChronoDate:
        """Convert any value that supports EPOCH_DAY into this chronology."""
        return self.date_from_epoch_day(value.get(Field.EPOCH_DAY))  # type: ignore[attr-defined]

    # -------------------------------------------------------------------------
    # Calendar rules
    # -------------------------------------------------------------------------

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def proleptic_year(self, era: Enum, year_of_era: int) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def eras(self) -> list[Enum]:
        raise NotImplementedError

    @abstractmethod
    def era_of(self, value: int) -> Enum:
        raise NotImplementedError

    def range(self, field: Field) -> ValueRange:
        """Return the range of field across every date of this chronology."""
        return field.range()

    # -------------------------------------------------------------------------
    # Year fields of a ChronoDate
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_year_field(self, iso_date: Date, field: Field) -> int:
        raise NotImplementedError

    @abstractmethod
    def with_year_field(self, iso_date: Date, field: Field, value: int) -> Date:
        """Return the ISO date whose year field in this chronology is value."""
        raise NotImplementedError

    def year_field_range(self, iso_date: Date, field: Field) -> ValueRange:
        return self.range(field)

    def __repr__(self) -> str:
        return f"Chronology.of({self._name!r})"

    def __str__(self) -> str:
        return self._name


class IsoChronology(Chronology):
    """The proleptic Gregorian calendar, whose dates are ``Date`` values."""

    __slots__ = ()

    def date(self, year: int, month: int, day: int) -> Date:
        from chronoperiod.core.date import Date

        return Date(year, month, day)

    def date_from_iso(self, iso_date: Date) -> Date:
        return iso_date

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def proleptic_year(self, era: Enum, year_of_era: int) -> int:
        if not isinstance(era, IsoEra):
            raise ValidationError(f"Era must be IsoEra, got {era!r}")
        return year_of_era if era is IsoEra.CE else 1 - year_of_era

    @property
    def eras(self) -> list[Enum]:
        return list(IsoEra)

    def era_of(self, value: int) -> IsoEra:
        return IsoEra.of(value)

    def get_year_field(self, iso_date: Date, field: Field) -> int:
        return iso_date.get(field)

    def with_year_field(self, iso_date: Date, field: Field, value: int) -> Date:
        return iso_date.with_field(field, value)


class OffsetChronology(Chronology):
    """A chronology whose years are the ISO year shifted by a constant.

    Year 1 of the current era is ISO year ``1 - offset``; earlier years
    count backwards from 1 in the era before it.
    """

    __slots__ = ("_offset", "_era_type")

    def __init__(self, name: str, calendar_type: str, offset: int, era_type: type[Enum]) -> None:
        super().__init__(name, calendar_type)
        self._offset = offset
        self._era_type = era_type

    def date(self, year: int, month: int, day: int) -> ChronoDate:
        from chronoperiod.core.date import Date

        self.range(Field.YEAR).check_valid_value(year, Field.YEAR)
        return self.date_from_iso(Date(year - self._offset, month, day))

    def date_from_iso(self, iso_date: Date) -> ChronoDate:
        from chronoperiod.chrono.chrono_date import ChronoDate

        return ChronoDate(self, iso_date)

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year - self._offset)

    def proleptic_year(self, era: Enum, year_of_era: int) -> int:
        if not isinstance(era, self._era_type):
            raise ValidationError(f"Era must be {self._era_type.__name__}, got {era!r}")
        return year_of_era if era.value == 1 else 1 - year_of_era

    @property
    def eras(self) -> list[Enum]:
        return list(self._era_type)

    def era_of(self, value: int) -> Enum:
        return self._era_type.of(value)  # type: ignore[attr-defined]

    def range(self, field: Field) -> ValueRange:
        if field is Field.YEAR:
            return ValueRange(MIN_YEAR + self._offset, MAX_YEAR + self._offset)
        if field is Field.YEAR_OF_ERA:
            current = MAX_YEAR + self._offset
            before = 1 - (MIN_YEAR + self._offset)
            return ValueRange(1, max(current, before), smallest_maximum=min(current, before))
        return field.range()

    def get_year_field(self, iso_date: Date, field: Field) -> int:
        year = iso_date.year + self._offset
        if field is Field.YEAR:
            return year
        if field is Field.ERA:
            return 1 if year >= 1 else 0
        return year if year >= 1 else 1 - year

    def with_year_field(self, iso_date: Date, field: Field, value: int) -> Date:
        self.year_field_range(iso_date, field).check_valid_value(value, field)
        year = iso_date.year + self._offset
        if field is Field.YEAR:
            new_year = value
        elif field is Field.YEAR_OF_ERA:
            new_year = value if year >= 1 else 1 - value
        elif value == (1 if year >= 1 else 0):
            new_year = year
        else:
            new_year = 1 - year
        return iso_date.with_field(Field.YEAR, new_year - self._offset)

    def year_field_range(self, iso_date: Date, field: Field) -> ValueRange:
        if field is Field.YEAR_OF_ERA:
            if iso_date.year + self._offset <= 0:
                return ValueRange(1, 1 - (MIN_YEAR + self._offset))
            return ValueRange(1, MAX_YEAR + self._offset)
        return self.range(field)


def register(chronology: Chronology) -> Chronology:
    """Make a chronology available to ``Chronology.of``."""
    _REGISTRY[chronology.name] = chronology
    _REGISTRY[chronology.calendar_type] = chronology
    return chronology


ISO = register(IsoChronology("ISO", "iso8601"))
MINGUO = register(OffsetChronology("Minguo", "roc", -MINGUO_YEARS_DIFFERENCE, MinguoEra))
THAI_BUDDHIST = register(
    OffsetChronology("ThaiBuddhist", "buddhist", THAI_BUDDHIST_YEARS_DIFFERENCE, ThaiBuddhistEra)
)


__all__ = [
    "Chronology",
    "IsoChronology",
    "OffsetChronology",
    "register",
    "ISO",
    "MINGUO",
    "THAI_BUDDHIST",
]
