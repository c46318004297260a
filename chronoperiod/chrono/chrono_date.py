"""ChronoDate: a date in a non-ISO calendar system.

Every regional date is an ISO ``Date`` tagged with its chronology. Month,
day and epoch fields come straight from the ISO date; the chronology
only answers for YEAR, ERA and YEAR_OF_ERA.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from chronoperiod._internal.constants import LONG_MAX, LONG_MIN
from chronoperiod._internal.safe_math import safe_add
from chronoperiod.core.date import Date
from chronoperiod.units.field import Field, unsupported_field
from chronoperiod.units.period_unit import PeriodUnit
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from enum import Enum

    from chronoperiod.chrono.chronology import Chronology
    from chronoperiod.core.period import Period

_YEAR_FIELDS = frozenset({Field.YEAR, Field.ERA, Field.YEAR_OF_ERA})


class ChronoDate:
    """A calendar date in a regional chronology.

    Create instances through the chronology rather than directly.

    Examples:
        >>> from chronoperiod.chrono.chronology import MINGUO
        >>> d = MINGUO.date(101, 6, 12)
        >>> d.year, d.month, d.day
        (101, 6, 12)
        >>> str(d)
        'Minguo ROC 101-06-12'
    """

    __slots__ = ("_chronology", "_iso")

    def __init__(self, chronology: Chronology, iso_date: Date) -> None:
        self._chronology = chronology
        self._iso = iso_date

    @property
    def chronology(self) -> Chronology:
        return self._chronology

    def to_iso_date(self) -> Date:
        return self._iso

    @property
    def year(self) -> int:
        """Return the proleptic year in this chronology."""
        return self._chronology.get_year_field(self._iso, Field.YEAR)

    @property
    def year_of_era(self) -> int:
        return self._chronology.get_year_field(self._iso, Field.YEAR_OF_ERA)

    @property
    def era(self) -> Enum:
        return self._chronology.era_of(self._chronology.get_year_field(self._iso, Field.ERA))

    @property
    def month(self) -> int:
        return self._iso.month

    @property
    def day(self) -> int:
        return self._iso.day

    @property
    def day_of_month(self) -> int:
        return self._iso.day

    @property
    def length_of_month(self) -> int:
        return self._iso.length_of_month

    @property
    def is_leap_year(self) -> bool:
        return self._chronology.is_leap_year(self.year)

    @property
    def epoch_day(self) -> int:
        return self._iso.epoch_day

    @property
    def epoch_month(self) -> int:
        return self._iso.epoch_month

    def get(self, field: Field) -> int:
        """Return the value of a date field in this chronology.

        Raises:
            UnsupportedFieldError: For time fields.
        """
        if field in _YEAR_FIELDS:
            return self._chronology.get_year_field(self._iso, field)
        if field.is_date_field:
            return self._iso.get(field)
        raise unsupported_field(field, self)

    def range(self, field: Field) -> ValueRange:
        if field in (Field.DAY_OF_MONTH, Field.DAY_OF_YEAR):
            return self._iso.range(field)
        if field is Field.YEAR_OF_ERA:
            return self._chronology.year_field_range(self._iso, field)
        if field.is_date_field:
            return self._chronology.range(field)
        raise unsupported_field(field, self)

    def with_field(self, field: Field, value: int) -> ChronoDate:
        """Return a copy with one field set, clamping the day where needed."""
        if field in _YEAR_FIELDS:
            return self._wrap(self._chronology.with_year_field(self._iso, field, value))
        return self._wrap(self._iso.with_field(field, value))

    def plus_days(self, days: int) -> ChronoDate:
        return self._wrap(self._iso.plus_days(days))

    def plus_months(self, months: int) -> ChronoDate:
        return self._wrap(self._iso.plus_months(months))

    def plus_years(self, years: int) -> ChronoDate:
        return self._wrap(self._iso.plus_years(years))

    @overload
    def plus(self, amount: Period) -> ChronoDate: ...

    @overload
    def plus(self, amount: int, unit: PeriodUnit) -> ChronoDate: ...

    def plus(self, amount: Period | int, unit: PeriodUnit | None = None) -> ChronoDate:
        """Add a Period, or an amount of a date-based unit.

        Raises:
            UnsupportedUnitError: If unit is time-based.
        """
        if unit is None:
            return amount.apply_to(self)  # type: ignore[union-attr]
        if amount == 0:
            return self
        if unit is PeriodUnit.ERAS:
            return self.with_field(Field.ERA, safe_add(self.get(Field.ERA), amount))
        return self._wrap(self._iso.plus(amount, unit))

    @overload
    def minus(self, amount: Period) -> ChronoDate: ...

    @overload
    def minus(self, amount: int, unit: PeriodUnit) -> ChronoDate: ...

    def minus(self, amount: Period | int, unit: PeriodUnit | None = None) -> ChronoDate:
        if unit is None:
            return amount.subtract_from(self)  # type: ignore[union-attr]
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def until(self, end: ChronoDate) -> Period:
        """Return the field-by-field Period between this date and end."""
        from chronoperiod.core.period import Period

        return Period.between(self, end)

    def _wrap(self, iso_date: Date) -> ChronoDate:
        if iso_date is self._iso:
            return self
        return self._chronology.date_from_iso(iso_date)  # type: ignore[return-value]

    def __add__(self, other: object) -> ChronoDate:
        from chronoperiod.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.apply_to(self)

    def __sub__(self, other: object) -> ChronoDate:
        from chronoperiod.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.subtract_from(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChronoDate):
            return NotImplemented
        return self._chronology is other._chronology and self._iso == other._iso

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._chronology.name, self._iso.epoch_day))

    def __repr__(self) -> str:
        return f"ChronoDate({self._chronology.name!r}, {self.year}, {self.month}, {self.day})"

    def __str__(self) -> str:
        return f"{self._chronology.name} {self.era.name} {self.year_of_era}-{self.month:02d}-{self.day:02d}"


__all__ = ["ChronoDate"]
