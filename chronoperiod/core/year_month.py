"""YearMonth class representing a month in a particular ISO year."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoperiod._internal.calendar import days_in_month, epoch_month_to_ym, ym_to_epoch_month
from chronoperiod._internal.constants import LONG_MAX, LONG_MIN, MAX_YEAR
from chronoperiod._internal.safe_math import floor_div, floor_mod, safe_add, safe_multiply
from chronoperiod._internal.validation import validate_month, validate_year
from chronoperiod.errors import UnsupportedUnitError
from chronoperiod.units.field import Field, unsupported_field
from chronoperiod.units.month import Month
from chronoperiod.units.period_unit import PeriodUnit
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from chronoperiod.chrono.chronology import Chronology
    from chronoperiod.core.period import Period


class YearMonth:
    """A year and month, such as 2012-06, with no day.

    Examples:
        >>> YearMonth(2012, 6).plus_months(7)
        YearMonth(2013, 1)
        >>> YearMonth(2012, 2).length_of_month
        29
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        validate_year(year)
        validate_month(month)
        self._year = year
        self._month = month

    @classmethod
    def of_epoch_month(cls, epoch_month: int) -> YearMonth:
        """Create a YearMonth from a count of months since January 1970."""
        Field.EPOCH_MONTH.check_valid_value(epoch_month)
        return cls(*epoch_month_to_ym(epoch_month))

    @property
    def chronology(self) -> Chronology:
        from chronoperiod.chrono.chronology import ISO

        return ISO

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def month_of_year(self) -> Month:
        return Month(self._month)

    @property
    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    @property
    def epoch_month(self) -> int:
        return ym_to_epoch_month(self._year, self._month)

    def get(self, field: Field) -> int:
        """Return YEAR, MONTH_OF_YEAR, EPOCH_MONTH, ERA or YEAR_OF_ERA.

        Raises:
            UnsupportedFieldError: For any other field.
        """
        if field is Field.YEAR:
            return self._year
        if field is Field.MONTH_OF_YEAR:
            return self._month
        if field is Field.EPOCH_MONTH:
            return self.epoch_month
        if field is Field.ERA:
            return 1 if self._year >= 1 else 0
        if field is Field.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        raise unsupported_field(field, self)

    def range(self, field: Field) -> ValueRange:
        if field is Field.YEAR_OF_ERA:
            return ValueRange(1, MAX_YEAR + 1 if self._year <= 0 else MAX_YEAR)
        if field in (Field.YEAR, Field.MONTH_OF_YEAR, Field.EPOCH_MONTH, Field.ERA):
            return field.range()
        raise unsupported_field(field, self)

    def plus_months(self, months: int) -> YearMonth:
        """Return a YearMonth offset by the given number of months.

        Examples:
            >>> YearMonth(2012, 6).plus_months(-6)
            YearMonth(2011, 12)
        """
        if months == 0:
            return self
        calc_months = safe_add(self._year * 12 + (self._month - 1), months)
        new_year = floor_div(calc_months, 12)
        validate_year(new_year)
        return YearMonth(new_year, floor_mod(calc_months, 12) + 1)

    def plus_years(self, years: int) -> YearMonth:
        if years == 0:
            return self
        new_year = safe_add(self._year, years)
        validate_year(new_year)
        return YearMonth(new_year, self._month)

    def plus(self, amount: Period | int, unit: PeriodUnit | None = None) -> YearMonth:
        """Add a Period, or an amount of a month-or-larger unit.

        Raises:
            UnsupportedUnitError: For DAYS, WEEKS and time-based units.
        """
        if unit is None:
            return amount.apply_to(self)  # type: ignore[union-attr]
        if amount == 0:
            return self
        if unit is PeriodUnit.MONTHS:
            return self.plus_months(amount)
        if unit is PeriodUnit.QUARTER_YEARS:
            return self.plus_months(safe_multiply(amount, 3))
        if unit is PeriodUnit.YEARS:
            return self.plus_years(amount)
        if unit is PeriodUnit.DECADES:
            return self.plus_years(safe_multiply(amount, 10))
        if unit is PeriodUnit.CENTURIES:
            return self.plus_years(safe_multiply(amount, 100))
        if unit is PeriodUnit.MILLENNIA:
            return self.plus_years(safe_multiply(amount, 1000))
        raise UnsupportedUnitError(f"Unsupported unit for YearMonth: {unit.value}")

    def minus(self, amount: Period | int, unit: PeriodUnit | None = None) -> YearMonth:
        if unit is None:
            return amount.subtract_from(self)  # type: ignore[union-attr]
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def to_iso_format(self) -> str:
        if self._year > 9999:
            return f"+{self._year}-{self._month:02d}"
        if self._year >= 0:
            return f"{self._year:04d}-{self._month:02d}"
        return f"{self._year:05d}-{self._month:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._year == other._year and self._month == other._month

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) < (other._year, other._month)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) <= (other._year, other._month)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) > (other._year, other._month)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) >= (other._year, other._month)

    def __hash__(self) -> int:
        return hash((self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["YearMonth"]
