"""Month enumeration for the twelve ISO months.

A Month on its own only knows its month-of-year, so it answers
``get(Field.MONTH_OF_YEAR)`` and nothing else. That is still enough for
Period.between, which yields a months-only period for two months.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from chronoperiod.errors import ValidationError
from chronoperiod.units.field import Field, unsupported_field

if TYPE_CHECKING:
    from chronoperiod.chrono.chronology import Chronology
    from chronoperiod.units.value_range import ValueRange


class Month(Enum):
    """A month-of-year, January (1) to December (12).

    Examples:
        >>> Month.of(2)
        <Month.FEBRUARY: 2>
        >>> Month.NOVEMBER.plus(3)
        <Month.FEBRUARY: 2>
        >>> Month.FEBRUARY.length(leap_year=True)
        29
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Return the Month for a month-of-year value.

        Raises:
            ValidationError: If month is outside 1-12.
        """
        if month < 1 or month > 12:
            raise ValidationError(f"Invalid value for MonthOfYear: {month}")
        return cls(month)

    @classmethod
    def from_accessor(cls, value: object) -> Month:
        """Extract the Month from any value supporting MONTH_OF_YEAR."""
        if isinstance(value, Month):
            return value
        return cls.of(value.get(Field.MONTH_OF_YEAR))  # type: ignore[attr-defined]

    @property
    def chronology(self) -> Chronology:
        from chronoperiod.chrono.chronology import ISO

        return ISO

    def get(self, field: Field) -> int:
        if field is Field.MONTH_OF_YEAR:
            return self.value
        raise unsupported_field(field, self)

    def range(self, field: Field) -> ValueRange:
        if field is Field.MONTH_OF_YEAR:
            return field.range()
        raise unsupported_field(field, self)

    def plus(self, months: int) -> Month:
        """Return the month the given number of months later, wrapping around."""
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        """Return the month the given number of months earlier, wrapping around."""
        return self.plus(-months)

    def length(self, leap_year: bool) -> int:
        """Return the number of days in this month."""
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        if self in _THIRTY_DAY_MONTHS:
            return 30
        return 31

    def min_length(self) -> int:
        return self.length(leap_year=False)

    def max_length(self) -> int:
        return self.length(leap_year=True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day-of-year on which this month starts.

        Examples:
            >>> Month.MARCH.first_day_of_year(leap_year=False)
            60
            >>> Month.MARCH.first_day_of_year(leap_year=True)
            61
        """
        day = 1
        for month in Month:
            if month is self:
                return day
            day += month.length(leap_year)
        return day

    def first_month_of_quarter(self) -> Month:
        return Month(((self.value - 1) // 3) * 3 + 1)


_THIRTY_DAY_MONTHS = frozenset({Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER})


__all__ = ["Month"]
