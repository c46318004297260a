"""Period class representing a human-scale span of calendar and clock time.

A Period holds years, months and days as separate 32-bit fields and the
whole time component as a single signed 64-bit nanosecond count. Hours,
minutes and seconds are derived from that count rather than stored, so
there is never any question of which sub-unit owns a nanosecond.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, TypeVar, overload

from chronoperiod._internal.constants import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    MONTHS_PER_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HALF_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronoperiod._internal.safe_math import (
    safe_add,
    safe_add_int,
    safe_multiply,
    safe_multiply_int,
    safe_subtract,
    safe_subtract_int,
    safe_to_int,
    truncate_div,
    truncate_mod,
)
from chronoperiod._internal.validation import check_not_none
from chronoperiod.errors import (
    HasCalendarUnitsError,
    NullInputError,
    UnsupportedUnitError,
    ValidationError,
)
from chronoperiod.units.period_unit import PeriodUnit

if TYPE_CHECKING:
    from chronoperiod.core.duration import Duration
    from chronoperiod.units.field import CalendarAccessor

_T = TypeVar("_T")

# Set once the canonical zero exists; every all-zero Period resolves to it
_ZERO: Period | None = None


class Period:
    """An immutable span of years, months, days and time.

    Unlike Duration (an exact number of nanoseconds), a Period keeps its
    calendar units apart: one month added to Jan 31 gives Feb 28 or 29,
    and 11 months plus one month is 12 months, never one year. Use the
    normalize_* methods to carry between units under an explicit
    assumption.

    Every Period whose four fields are zero is the single ``Period.ZERO``
    instance, so ``p is Period.ZERO`` is a valid zero test.

    Attributes:
        years: Number of years (32-bit signed).
        months: Number of months (32-bit signed).
        days: Number of days (32-bit signed).
        time_nanos: The time component in nanoseconds (64-bit signed).

    Examples:
        >>> p = Period.of_units(1, 2, 3, 4, 5, 6)
        >>> str(p)
        'P1Y2M3DT4H5M6S'
        >>> p.hours, p.minutes, p.seconds
        (4, 5, 6)

        >>> Period.of_months(11).plus(1, PeriodUnit.MONTHS)
        Period(years=0, months=12, days=0, nanos=0)

        >>> Period() is Period.ZERO
        True
    """

    __slots__ = ("_years", "_months", "_days", "_nanos")

    ZERO: ClassVar[Period]

    def __new__(cls, years: int = 0, months: int = 0, days: int = 0, nanos: int = 0) -> Period:
        """Create a Period from its four stored fields.

        Args:
            years: Number of years, within the 32-bit range.
            months: Number of months, within the 32-bit range.
            days: Number of days, within the 32-bit range.
            nanos: Time component in nanoseconds, within the 64-bit range.

        Raises:
            ValidationError: If a field is outside its range.

        Examples:
            >>> Period(months=-3)
            Period(years=0, months=-3, days=0, nanos=0)
        """
        if _ZERO is not None and years == 0 and months == 0 and days == 0 and nanos == 0:
            return _ZERO
        for name, value in (("years", years), ("months", months), ("days", days)):
            if value < INT_MIN or value > INT_MAX:
                raise ValidationError(f"{name} must be between {INT_MIN} and {INT_MAX}, got {value}")
        if nanos < LONG_MIN or nanos > LONG_MAX:
            raise ValidationError(f"nanos must be between {LONG_MIN} and {LONG_MAX}, got {nanos}")
        instance = object.__new__(cls)
        instance._years = years
        instance._months = months
        instance._days = days
        instance._nanos = nanos
        return instance

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def of_units(
        cls,
        years: int,
        months: int,
        days: int,
        hours: int,
        minutes: int,
        seconds: int,
        nanos: int = 0,
    ) -> Period:
        """Create a Period from date fields and clock units.

        The clock units are folded into a single nanosecond count with
        checked arithmetic.

        Raises:
            ArithmeticOverflowError: If the time component overflows 64 bits.

        Examples:
            >>> Period.of_units(0, 0, 0, 1, 30, 0).time_nanos
            5400000000000
            >>> Period.of_units(0, 0, 0, 0, 0, 0) is Period.ZERO
            True
        """
        total_seconds = safe_add(
            safe_add(safe_multiply(hours, SECONDS_PER_HOUR), safe_multiply(minutes, SECONDS_PER_MINUTE)),
            seconds,
        )
        total_nanos = safe_add(safe_multiply(total_seconds, NANOS_PER_SECOND), nanos)
        return cls(years, months, days, total_nanos)

    @classmethod
    def of_date_fields(cls, years: int, months: int, days: int) -> Period:
        """Create a Period of years, months and days.

        Examples:
            >>> Period.of_date_fields(1, 2, 3)
            Period(years=1, months=2, days=3, nanos=0)
        """
        return cls(years, months, days)

    @classmethod
    def of_time_fields(cls, hours: int, minutes: int, seconds: int, nanos: int = 0) -> Period:
        """Create a time-only Period from hours, minutes, seconds and nanos."""
        return cls.of_units(0, 0, 0, hours, minutes, seconds, nanos)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(months=months)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(days=days)

    @classmethod
    def of_hours(cls, hours: int) -> Period:
        return cls.ZERO.plus_hours(hours)

    @classmethod
    def of_minutes(cls, minutes: int) -> Period:
        return cls.ZERO.plus_minutes(minutes)

    @classmethod
    def of_seconds(cls, seconds: int) -> Period:
        return cls.ZERO.plus_seconds(seconds)

    @classmethod
    def of_nanos(cls, nanos: int) -> Period:
        return cls(nanos=nanos)

    @classmethod
    def of_single_unit(cls, amount: int, unit: PeriodUnit) -> Period:
        """Create a Period of an amount of a single unit.

        MICROS, MILLIS and HALF_DAYS are converted exactly to nanoseconds.

        Raises:
            UnsupportedUnitError: For WEEKS and other units with no fixed
                relationship to years, months, days or nanoseconds.
            ArithmeticOverflowError: If the amount does not fit its field.

        Examples:
            >>> Period.of_single_unit(3, PeriodUnit.HALF_DAYS)
            Period(years=0, months=0, days=0, nanos=129600000000000)
            >>> str(Period.of_single_unit(-5, PeriodUnit.MONTHS))
            'P-5M'
        """
        return cls.ZERO.plus(amount, unit)

    @classmethod
    def of_duration(cls, duration: Duration | int, nano_adjustment: int = 0) -> Period:
        """Create a time-only Period from an exact duration.

        Args:
            duration: A Duration, or a whole number of seconds.
            nano_adjustment: Nanoseconds added when duration is given in
                seconds; must be zero for a Duration.

        Raises:
            NullInputError: If duration is None.
            ValidationError: If nano_adjustment is given with a Duration.
            ArithmeticOverflowError: If the duration exceeds 64 bits of nanos.

        Examples:
            >>> from chronoperiod.core.duration import Duration
            >>> str(Period.of_duration(Duration.of_seconds(3, 500_000_000)))
            'PT3.5S'
            >>> Period.of_duration(0) is Period.ZERO
            True
        """
        from chronoperiod.core.duration import Duration

        check_not_none(duration, "duration")
        if not isinstance(duration, Duration):
            duration = Duration.of_seconds(duration, nano_adjustment)
        elif nano_adjustment != 0:
            raise ValidationError("nano_adjustment only applies to a duration in seconds")
        if duration.is_zero:
            return cls.ZERO
        return cls(nanos=duration.to_nanos())

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse the canonical text form, such as 'P1Y2M3DT4H5M6.7S'.

        Raises:
            NullInputError: If text is None.
            ParseError: If the text is malformed.

        Examples:
            >>> Period.parse("P2Y-3M")
            Period(years=2, months=-3, days=0, nanos=0)
            >>> Period.parse("pt1,5s").time_nanos
            1500000000
        """
        from chronoperiod.format.period_text import parse_period

        return parse_period(text)

    @classmethod
    def between(cls, start: CalendarAccessor, end: CalendarAccessor) -> Period:
        """Return the field-by-field Period between two values of one calendar.

        See ``chronoperiod.arithmetic.between.between``.
        """
        from chronoperiod.arithmetic.between import between

        return between(start, end)

    @classmethod
    def between_iso(cls, start: CalendarAccessor, end: CalendarAccessor) -> Period:
        """Return the ISO Period between two dates, two times or two date-times.

        See ``chronoperiod.arithmetic.between.between_iso``.
        """
        from chronoperiod.arithmetic.between import between_iso

        return between_iso(start, end)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        """Return the whole hours of the time component, truncated toward zero."""
        return truncate_div(self._nanos, NANOS_PER_HOUR)

    @property
    def minutes(self) -> int:
        """Return the minute-of-hour of the time component, signed like it."""
        return truncate_mod(truncate_div(self._nanos, NANOS_PER_MINUTE), 60)

    @property
    def seconds(self) -> int:
        """Return the second-of-minute of the time component, signed like it."""
        return truncate_mod(truncate_div(self._nanos, NANOS_PER_SECOND), 60)

    @property
    def nanos_within_second(self) -> int:
        """Return the nanosecond-of-second of the time component, signed like it.

        Examples:
            >>> Period.of_nanos(-1_500_000_000).nanos_within_second
            -500000000
        """
        return truncate_mod(self._nanos, NANOS_PER_SECOND)

    @property
    def time_nanos(self) -> int:
        """Return the whole time component in nanoseconds."""
        return self._nanos

    @property
    def total_months(self) -> int:
        """Return years * 12 + months.

        Examples:
            >>> Period.of_date_fields(-1, 3, 0).total_months
            -9
        """
        return self._years * MONTHS_PER_YEAR + self._months

    @property
    def is_zero(self) -> bool:
        return self is _ZERO or self == _ZERO

    @property
    def is_positive(self) -> bool:
        """Return True if no field is negative and at least one is positive.

        Examples:
            >>> Period.of_date_fields(1, -1, 0).is_positive
            False
        """
        fields = (self._years, self._months, self._days, self._nanos)
        return all(value >= 0 for value in fields) and any(value > 0 for value in fields)

    # =========================================================================
    # Field replacement
    # =========================================================================

    def with_years(self, years: int) -> Period:
        if years == self._years:
            return self
        return Period(years, self._months, self._days, self._nanos)

    def with_months(self, months: int) -> Period:
        if months == self._months:
            return self
        return Period(self._years, months, self._days, self._nanos)

    def with_days(self, days: int) -> Period:
        if days == self._days:
            return self
        return Period(self._years, self._months, days, self._nanos)

    def with_time_nanos(self, nanos: int) -> Period:
        if nanos == self._nanos:
            return self
        return Period(self._years, self._months, self._days, nanos)

    def _with_fields(self, years: int, months: int, days: int, nanos: int) -> Period:
        if (years, months, days, nanos) == (self._years, self._months, self._days, self._nanos):
            return self
        return Period(years, months, days, nanos)

    # =========================================================================
    # Addition and subtraction
    # =========================================================================

    @overload
    def plus(self, amount: Period) -> Period: ...

    @overload
    def plus(self, amount: int, unit: PeriodUnit) -> Period: ...

    def plus(self, amount: Period | int, unit: PeriodUnit | None = None) -> Period:
        """Add another Period field by field, or an amount of one unit.

        No value carries between fields.

        Raises:
            NullInputError: If amount is None, or unit is None and amount
                is not a Period.
            UnsupportedUnitError: For units other than NANOS to DAYS,
                MONTHS and YEARS.
            ArithmeticOverflowError: If a field overflows.

        Examples:
            >>> Period.of_days(1).plus(Period.of_units(0, 1, 1, 2, 0, 0))
            Period(years=0, months=1, days=2, nanos=7200000000000)
        """
        check_not_none(amount, "amount")
        if unit is None:
            other = _require_period(amount)
            return self._with_fields(
                safe_add_int(self._years, other._years),
                safe_add_int(self._months, other._months),
                safe_add_int(self._days, other._days),
                safe_add(self._nanos, other._nanos),
            )
        plus_unit = _PLUS_BY_UNIT.get(unit)
        if plus_unit is None:
            raise UnsupportedUnitError(f"Unsupported unit: {unit.value}")
        if amount == 0:
            return self
        return plus_unit(self, amount)

    @overload
    def minus(self, amount: Period) -> Period: ...

    @overload
    def minus(self, amount: int, unit: PeriodUnit) -> Period: ...

    def minus(self, amount: Period | int, unit: PeriodUnit | None = None) -> Period:
        """Subtract another Period field by field, or an amount of one unit."""
        check_not_none(amount, "amount")
        if unit is None:
            other = _require_period(amount)
            return self._with_fields(
                safe_subtract_int(self._years, other._years),
                safe_subtract_int(self._months, other._months),
                safe_subtract_int(self._days, other._days),
                safe_subtract(self._nanos, other._nanos),
            )
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def plus_years(self, years: int) -> Period:
        if years == 0:
            return self
        return Period(safe_to_int(safe_add(self._years, years)), self._months, self._days, self._nanos)

    def plus_months(self, months: int) -> Period:
        if months == 0:
            return self
        return Period(self._years, safe_to_int(safe_add(self._months, months)), self._days, self._nanos)

    def plus_days(self, days: int) -> Period:
        if days == 0:
            return self
        return Period(self._years, self._months, safe_to_int(safe_add(self._days, days)), self._nanos)

    def plus_hours(self, hours: int) -> Period:
        return self.plus_nanos(safe_multiply(hours, NANOS_PER_HOUR))

    def plus_minutes(self, minutes: int) -> Period:
        return self.plus_nanos(safe_multiply(minutes, NANOS_PER_MINUTE))

    def plus_seconds(self, seconds: int) -> Period:
        return self.plus_nanos(safe_multiply(seconds, NANOS_PER_SECOND))

    def plus_nanos(self, nanos: int) -> Period:
        if nanos == 0:
            return self
        return Period(self._years, self._months, self._days, safe_add(self._nanos, nanos))

    def minus_years(self, years: int) -> Period:
        if years == LONG_MIN:
            return self.plus_years(LONG_MAX).plus_years(1)
        return self.plus_years(-years)

    def minus_months(self, months: int) -> Period:
        if months == LONG_MIN:
            return self.plus_months(LONG_MAX).plus_months(1)
        return self.plus_months(-months)

    def minus_days(self, days: int) -> Period:
        if days == LONG_MIN:
            return self.plus_days(LONG_MAX).plus_days(1)
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> Period:
        if hours == LONG_MIN:
            return self.plus_hours(LONG_MAX).plus_hours(1)
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Period:
        if minutes == LONG_MIN:
            return self.plus_minutes(LONG_MAX).plus_minutes(1)
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Period:
        if seconds == LONG_MIN:
            return self.plus_seconds(LONG_MAX).plus_seconds(1)
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> Period:
        if nanos == LONG_MIN:
            return self.plus_nanos(LONG_MAX).plus_nanos(1)
        return self.plus_nanos(-nanos)

    # =========================================================================
    # Scaling and normalization
    # =========================================================================

    def multiplied_by(self, scalar: int) -> Period:
        """Multiply every field by scalar with overflow checks.

        Examples:
            >>> Period.of_units(1, 2, 3, 4, 5, 6).multiplied_by(2)
            Period(years=2, months=4, days=6, nanos=29412000000000)
        """
        if self is _ZERO or scalar == 1:
            return self
        return Period(
            safe_multiply_int(self._years, scalar),
            safe_multiply_int(self._months, scalar),
            safe_multiply_int(self._days, scalar),
            safe_multiply(self._nanos, scalar),
        )

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def normalize_hours_to_days(self) -> Period:
        """Move whole 24-hour blocks of the time component into days.

        Examples:
            >>> Period.of_time_fields(-49, 0, 0).normalize_hours_to_days()
            Period(years=0, months=0, days=-2, nanos=-3600000000000)
        """
        split_days = truncate_div(self._nanos, NANOS_PER_DAY)
        if split_days == 0:
            return self
        return Period(
            self._years,
            self._months,
            safe_add_int(self._days, split_days),
            truncate_mod(self._nanos, NANOS_PER_DAY),
        )

    def normalize_days_to_hours(self) -> Period:
        """Fold the days into the time component as 24-hour days."""
        if self._days == 0:
            return self
        return Period(
            self._years,
            self._months,
            0,
            safe_add(safe_multiply(self._days, NANOS_PER_DAY), self._nanos),
        )

    def normalize_months_iso(self) -> Period:
        """Move whole 12-month blocks of the months into years.

        Examples:
            >>> Period.of_date_fields(1, -25, 0).normalize_months_iso()
            Period(years=-1, months=-1, days=0, nanos=0)
        """
        split_years = truncate_div(self._months, MONTHS_PER_YEAR)
        if split_years == 0:
            return self
        return Period(
            safe_add_int(self._years, split_years),
            truncate_mod(self._months, MONTHS_PER_YEAR),
            self._days,
            self._nanos,
        )

    def to_date_only(self) -> Period:
        if self._nanos == 0:
            return self
        return Period(self._years, self._months, self._days)

    def to_time_only(self) -> Period:
        if self._years == 0 and self._months == 0 and self._days == 0:
            return self
        return Period(nanos=self._nanos)

    def to_duration(self) -> Duration:
        """Return the time component as an exact Duration.

        Raises:
            HasCalendarUnitsError: If years, months or days are non-zero.

        Examples:
            >>> Period.of_time_fields(1, 0, 0).to_duration()
            Duration(seconds=3600, nanos=0)
        """
        from chronoperiod.core.duration import Duration

        if self._years != 0 or self._months != 0 or self._days != 0:
            raise HasCalendarUnitsError(
                "Unable to convert period to duration as years/months/days are present: "
                f"{self}"
            )
        return Duration.of_nanos(self._nanos)

    # =========================================================================
    # Application to dates and times
    # =========================================================================

    def apply_to(self, value: _T) -> _T:
        """Add this Period to a date or time value, years first and nanos last."""
        from chronoperiod.arithmetic.period_ops import apply_period

        return apply_period(value, self)

    def subtract_from(self, value: _T) -> _T:
        """Subtract this Period from a date or time value, years first and nanos last."""
        from chronoperiod.arithmetic.period_ops import subtract_period

        return subtract_period(value, self)

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __mul__(self, other: object) -> Period:
        """Multiply by an integer scalar.

        Examples:
            >>> Period.of_months(3) * 2
            Period(years=0, months=6, days=0, nanos=0)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Period:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
            and self._nanos == other._nanos
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days, self._nanos))

    def __reduce__(self) -> tuple[type[Period], tuple[int, int, int, int]]:
        # Unpickling goes through __new__, so a zero Period resolves to ZERO
        return (Period, (self._years, self._months, self._days, self._nanos))

    def __repr__(self) -> str:
        return (
            f"Period(years={self._years}, months={self._months}, "
            f"days={self._days}, nanos={self._nanos})"
        )

    def __str__(self) -> str:
        """Return the canonical text form, 'PT0S' for zero."""
        from chronoperiod.format.period_text import format_period

        return format_period(self)

    def __bool__(self) -> bool:
        return not self.is_zero


def _require_period(amount: object) -> Period:
    if not isinstance(amount, Period):
        raise NullInputError(
            f"unit must not be None when adding or subtracting {type(amount).__name__}"
        )
    return amount


def _scaled(factor: int) -> Callable[[Period, int], Period]:
    def plus_scaled(period: Period, amount: int) -> Period:
        return period.plus_nanos(safe_multiply(amount, factor))

    return plus_scaled


_PLUS_BY_UNIT: dict[PeriodUnit, Callable[[Period, int], Period]] = {
    PeriodUnit.NANOS: Period.plus_nanos,
    PeriodUnit.MICROS: _scaled(NANOS_PER_MICROSECOND),
    PeriodUnit.MILLIS: _scaled(NANOS_PER_MILLISECOND),
    PeriodUnit.SECONDS: Period.plus_seconds,
    PeriodUnit.MINUTES: Period.plus_minutes,
    PeriodUnit.HOURS: Period.plus_hours,
    PeriodUnit.HALF_DAYS: _scaled(NANOS_PER_HALF_DAY),
    PeriodUnit.DAYS: Period.plus_days,
    PeriodUnit.MONTHS: Period.plus_months,
    PeriodUnit.YEARS: Period.plus_years,
}

_ZERO = object.__new__(Period)
_ZERO._years = 0
_ZERO._months = 0
_ZERO._days = 0
_ZERO._nanos = 0
Period.ZERO = _ZERO


__all__ = ["Period"]
