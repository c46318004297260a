"""Date class representing an ISO calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian (ISO) calendar, backed by an epoch-day count.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, overload

from chronoperiod._internal.calendar import (
    days_before_month,
    days_in_month,
    days_in_year,
    doy_to_md,
    epoch_day_to_ymd,
    is_leap_year,
    ym_to_epoch_month,
    ymd_to_epoch_day,
)
from chronoperiod._internal.constants import LONG_MAX, LONG_MIN, MAX_YEAR
from chronoperiod._internal.safe_math import (
    floor_div,
    floor_mod,
    safe_add,
    safe_multiply,
)
from chronoperiod._internal.validation import validate_day, validate_month, validate_year
from chronoperiod.errors import ParseError, UnsupportedUnitError, ValidationError
from chronoperiod.units.era import IsoEra
from chronoperiod.units.field import Field, unsupported_field
from chronoperiod.units.month import Month
from chronoperiod.units.period_unit import PeriodUnit
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from chronoperiod.chrono.chronology import Chronology
    from chronoperiod.core.period import Period


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. It uses the proleptic Gregorian calendar, which means
    the Gregorian calendar rules are extended to dates before its
    actual adoption in 1582. Year 0 exists and equals 1 BCE.

    Internal representation is the epoch day (days since 1970-01-01),
    which makes day arithmetic and comparisons a single integer operation.

    Attributes:
        year: The year (can be negative for BCE dates).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2024, 1, 31).plus_months(1)  # Clamps to Feb 29
        Date(2024, 2, 29)

        >>> Date(2014, 2, 28) - Date(2012, 2, 29)
        Period(years=1, months=11, days=30, nanos=0)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The proleptic year. Year 0 = 1 BCE.
            month: The month (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2024, 2, 30)
            Traceback (most recent call last):
            ...
            chronoperiod.errors.ValidationError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days = ymd_to_epoch_day(year, month, day)

    @classmethod
    def _from_epoch_day(cls, epoch_day: int) -> Date:
        instance = object.__new__(cls)
        instance._days = epoch_day
        return instance

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> Date:
        """Create a Date from a count of days since 1970-01-01.

        Raises:
            ValidationError: If the epoch day is outside the supported years.

        Examples:
            >>> Date.of_epoch_day(0)
            Date(1970, 1, 1)
            >>> Date.of_epoch_day(-1)
            Date(1969, 12, 31)
        """
        Field.EPOCH_DAY.check_valid_value(epoch_day)
        return cls._from_epoch_day(epoch_day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> Date:
        """Create a Date from a year and a day-of-year.

        Raises:
            ValidationError: If the day does not exist in that year.

        Examples:
            >>> Date.of_year_day(2024, 60)
            Date(2024, 2, 29)
        """
        validate_year(year)
        if day_of_year < 1 or day_of_year > days_in_year(year):
            raise ValidationError(
                f"day of year must be between 1 and {days_in_year(year)} for {year}, "
                f"got {day_of_year}"
            )
        month, day = doy_to_md(year, day_of_year)
        return cls(year, month, day)

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        Years beyond four digits carry a sign, as in '+10000-01-01'.

        Args:
            s: The ISO 8601 date string.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If the string is not valid ISO 8601 format.
            ValidationError: If the date components are invalid.

        Examples:
            >>> Date.from_iso_format("2024-01-15")
            Date(2024, 1, 15)

            >>> Date.from_iso_format("-0044-03-15")
            Date(-44, 3, 15)
        """
        match = re.match(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$", s)
        if not match:
            raise ParseError(
                f"Invalid ISO 8601 date format: {s!r}. Expected YYYY-MM-DD or -YYYY-MM-DD",
                s,
                0,
            )

        return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    @property
    def chronology(self) -> Chronology:
        """Return the ISO chronology."""
        from chronoperiod.chrono.chronology import ISO

        return ISO

    @property
    def year(self) -> int:
        """Return the proleptic year (can be negative for BCE dates)."""
        year, _, _ = epoch_day_to_ymd(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        _, month, _ = epoch_day_to_ymd(self._days)
        return month

    @property
    def month_of_year(self) -> Month:
        return Month(self.month)

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = epoch_day_to_ymd(self._days)
        return day

    @property
    def day_of_month(self) -> int:
        return self.day

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
        """
        year, month, day = epoch_day_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def era(self) -> IsoEra:
        """Return the era (BCE or CE) for this date.

        Year 0 and negative years are BCE; positive years are CE.
        """
        return IsoEra.BCE if self.year <= 0 else IsoEra.CE

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def length_of_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = epoch_day_to_ymd(self._days)
        return days_in_month(year, month)

    @property
    def length_of_year(self) -> int:
        return days_in_year(self.year)

    @property
    def epoch_day(self) -> int:
        """Return the count of days since 1970-01-01."""
        return self._days

    @property
    def epoch_month(self) -> int:
        """Return the count of months since January 1970."""
        year, month, _ = epoch_day_to_ymd(self._days)
        return ym_to_epoch_month(year, month)

    def get(self, field: Field) -> int:
        """Return the value of a date field.

        Raises:
            UnsupportedFieldError: For time fields.

        Examples:
            >>> Date(2012, 6, 12).get(Field.MONTH_OF_YEAR)
            6
        """
        year, month, day = epoch_day_to_ymd(self._days)
        if field is Field.YEAR:
            return year
        if field is Field.MONTH_OF_YEAR:
            return month
        if field is Field.DAY_OF_MONTH:
            return day
        if field is Field.DAY_OF_YEAR:
            return days_before_month(year, month) + day
        if field is Field.EPOCH_DAY:
            return self._days
        if field is Field.EPOCH_MONTH:
            return ym_to_epoch_month(year, month)
        if field is Field.ERA:
            return 1 if year >= 1 else 0
        if field is Field.YEAR_OF_ERA:
            return year if year >= 1 else 1 - year
        raise unsupported_field(field, self)

    def range(self, field: Field) -> ValueRange:
        """Return the valid values of a field for this particular date.

        Examples:
            >>> str(Date(2023, 2, 1).range(Field.DAY_OF_MONTH))
            '1 - 28'
        """
        if field is Field.DAY_OF_MONTH:
            return ValueRange(1, self.length_of_month)
        if field is Field.DAY_OF_YEAR:
            return ValueRange(1, self.length_of_year)
        if field is Field.YEAR_OF_ERA:
            return ValueRange(1, MAX_YEAR + 1 if self.year <= 0 else MAX_YEAR)
        if field.is_date_field:
            return field.range()
        raise unsupported_field(field, self)

    def with_field(self, field: Field, value: int) -> Date:
        """Return a copy of this date with one field set.

        Month and year changes clamp the day to the end of the month.

        Raises:
            ValidationError: If value is invalid for the field.
            UnsupportedFieldError: For time fields.
        """
        if not field.is_date_field:
            raise unsupported_field(field, self)
        field.check_valid_value(value)
        year, month, day = epoch_day_to_ymd(self._days)
        if field is Field.YEAR:
            return _resolve_previous_valid(value, month, day)
        if field is Field.MONTH_OF_YEAR:
            return _resolve_previous_valid(year, value, day)
        if field is Field.DAY_OF_MONTH:
            return Date(year, month, value)
        if field is Field.DAY_OF_YEAR:
            return Date.of_year_day(year, value)
        if field is Field.EPOCH_DAY:
            return Date.of_epoch_day(value)
        if field is Field.EPOCH_MONTH:
            return self.plus_months(value - ym_to_epoch_month(year, month))
        if field is Field.YEAR_OF_ERA:
            return _resolve_previous_valid(value if year >= 1 else 1 - value, month, day)
        # Field.ERA
        if self.get(Field.ERA) == value:
            return self
        return _resolve_previous_valid(1 - year, month, day)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        y, m, d = epoch_day_to_ymd(self._days)
        return Date(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def plus_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Examples:
            >>> Date(2024, 1, 15).plus_days(-20)
            Date(2023, 12, 26)
        """
        if days == 0:
            return self
        return Date.of_epoch_day(safe_add(self._days, days))

    def plus_weeks(self, weeks: int) -> Date:
        return self.plus_days(safe_multiply(weeks, 7))

    def plus_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the resulting day is invalid for the new month, it is
        clamped to the last valid day of that month.

        Examples:
            >>> Date(2024, 1, 31).plus_months(1)  # Clamps to Feb 29
            Date(2024, 2, 29)

            >>> Date(2023, 1, 31).plus_months(1)  # Clamps to Feb 28
            Date(2023, 2, 28)
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        month_count = year * 12 + (month - 1)
        calc_months = safe_add(month_count, months)
        new_year = floor_div(calc_months, 12)
        validate_year(new_year)
        return _resolve_previous_valid(new_year, floor_mod(calc_months, 12) + 1, day)

    def plus_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        Feb 29 becomes Feb 28 when the target year is not a leap year.

        Examples:
            >>> Date(2024, 2, 29).plus_years(1)
            Date(2025, 2, 28)
        """
        if years == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        new_year = safe_add(year, years)
        validate_year(new_year)
        return _resolve_previous_valid(new_year, month, day)

    @overload
    def plus(self, amount: Period) -> Date: ...

    @overload
    def plus(self, amount: int, unit: PeriodUnit) -> Date: ...

    def plus(self, amount: Period | int, unit: PeriodUnit | None = None) -> Date:
        """Add a Period, or an amount of a date-based unit.

        Args:
            amount: A Period, or an integer amount of unit.
            unit: The unit of amount; omitted when amount is a Period.

        Returns:
            The adjusted date.

        Raises:
            UnsupportedUnitError: If unit is time-based.
            ArithmeticOverflowError: If the arithmetic overflows.

        Examples:
            >>> Date(2010, 1, 31).plus(1, PeriodUnit.MONTHS)
            Date(2010, 2, 28)
        """
        if unit is None:
            return amount.apply_to(self)  # type: ignore[union-attr]
        if amount == 0:
            return self
        if unit is PeriodUnit.DAYS:
            return self.plus_days(amount)
        if unit is PeriodUnit.WEEKS:
            return self.plus_weeks(amount)
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
        if unit is PeriodUnit.ERAS:
            return self.with_field(Field.ERA, safe_add(self.get(Field.ERA), amount))
        raise UnsupportedUnitError(f"Unsupported unit for Date: {unit.value}")

    @overload
    def minus(self, amount: Period) -> Date: ...

    @overload
    def minus(self, amount: int, unit: PeriodUnit) -> Date: ...

    def minus(self, amount: Period | int, unit: PeriodUnit | None = None) -> Date:
        """Subtract a Period, or an amount of a date-based unit."""
        if unit is None:
            return amount.subtract_from(self)  # type: ignore[union-attr]
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def until(self, end: Date) -> Period:
        """Return the years, months and days from this date to end.

        Examples:
            >>> Date(2010, 1, 10).until(Date(2010, 2, 9))
            Period(years=0, months=0, days=30, nanos=0)
        """
        from chronoperiod.core.period import Period

        return Period.between_iso(self, end)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'

            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year, month, day = epoch_day_to_ymd(self._days)
        if year > 9999:
            return f"+{year}-{month:02d}-{day:02d}"
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"

    def __add__(self, other: object) -> Date:
        """Add a Period to this date.

        Examples:
            >>> from chronoperiod.core.period import Period
            >>> Date(2024, 1, 15) + Period.of_days(10)
            Date(2024, 1, 25)
        """
        from chronoperiod.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.apply_to(self)

    @overload
    def __sub__(self, other: Period) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> Period: ...

    def __sub__(self, other: object) -> Date | Period:
        """Subtract a Period, or another Date to get the Period between them."""
        from chronoperiod.core.period import Period

        if isinstance(other, Period):
            return other.subtract_from(self)
        if isinstance(other, Date):
            return Period.between_iso(other, self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


def _resolve_previous_valid(year: int, month: int, day: int) -> Date:
    return Date(year, month, min(day, days_in_month(year, month)))


__all__ = ["Date"]
