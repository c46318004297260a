"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with nanosecond precision.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, overload

from chronoperiod._internal.constants import (
    LONG_MAX,
    LONG_MIN,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from chronoperiod.errors import ParseError, UnsupportedUnitError, ValidationError
from chronoperiod.units.field import Field, unsupported_field
from chronoperiod.units.period_unit import PeriodUnit
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from chronoperiod.chrono.chronology import Chronology
    from chronoperiod.core.period import Period

# Nanoseconds per unit for the time-based units a Time can be moved by
_UNIT_NANOS: dict[PeriodUnit, int] = {
    PeriodUnit.NANOS: 1,
    PeriodUnit.MICROS: NANOS_PER_MICROSECOND,
    PeriodUnit.MILLIS: NANOS_PER_MILLISECOND,
    PeriodUnit.SECONDS: NANOS_PER_SECOND,
    PeriodUnit.MINUTES: NANOS_PER_MINUTE,
    PeriodUnit.HOURS: NANOS_PER_HOUR,
    PeriodUnit.HALF_DAYS: 12 * NANOS_PER_HOUR,
}


class Time:
    """A time of day with nanosecond precision.

    Time represents the time portion of a day, from midnight (00:00:00)
    to just before the next midnight (23:59:59.999999999). It does not
    include any date or timezone information.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour, t.minute, t.second
        (14, 30, 45)

        >>> Time(23, 0).plus(2, PeriodUnit.HOURS)  # Wraps past midnight
        Time(1, 0, 0, nanosecond=0)
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999). Added to nanosecond.
            microsecond: The microsecond (0-999999). Added to nanosecond.
            nanosecond: The nanosecond (0-999999999).

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Time(12, 0, 0, millisecond=500)
            Time(12, 0, 0, nanosecond=500000000)
        """
        if not (0 <= hour <= 23):
            raise ValidationError(f"hour must be between 0 and 23, got {hour}")
        if not (0 <= minute <= 59):
            raise ValidationError(f"minute must be between 0 and 59, got {minute}")
        if not (0 <= second <= 59):
            raise ValidationError(f"second must be between 0 and 59, got {second}")
        if not (0 <= millisecond <= 999):
            raise ValidationError(
                f"millisecond must be between 0 and 999, got {millisecond}"
            )
        if not (0 <= microsecond <= 999_999):
            raise ValidationError(
                f"microsecond must be between 0 and 999999, got {microsecond}"
            )
        if not (0 <= nanosecond <= 999_999_999):
            raise ValidationError(
                f"nanosecond must be between 0 and 999999999, got {nanosecond}"
            )

        total_nanos = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + millisecond * NANOS_PER_MILLISECOND
            + microsecond * NANOS_PER_MICROSECOND
            + nanosecond
        )

        if total_nanos >= NANOS_PER_DAY:
            raise ValidationError(
                f"time exceeds day bounds: total nanoseconds {total_nanos} >= {NANOS_PER_DAY}"
            )

        self._nanos: int = total_nanos

    @classmethod
    def _from_nanos(cls, nanos: int) -> Time:
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> Time:
        """Create a Time from nanoseconds since midnight.

        Raises:
            ValidationError: If the value is outside [0, NANOS_PER_DAY).

        Examples:
            >>> Time.of_nano_of_day(NANOS_PER_HOUR)
            Time(1, 0, 0, nanosecond=0)
        """
        Field.NANO_OF_DAY.check_valid_value(nano_of_day)
        return cls._from_nanos(nano_of_day)

    @classmethod
    def midnight(cls) -> Time:
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> Time:
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @classmethod
    def from_iso_format(cls, s: str) -> Time:
        """Parse a time from ISO 8601 format.

        Supports HH:MM, HH:MM:SS and HH:MM:SS.f with 1-9 fraction digits.

        Raises:
            ParseError: If the string is not valid ISO 8601 format.
            ValidationError: If the time components are invalid.

        Examples:
            >>> Time.from_iso_format("14:30:45.123456789")
            Time(14, 30, 45, nanosecond=123456789)

            >>> Time.from_iso_format("14:30")
            Time(14, 30, 0, nanosecond=0)
        """
        match = re.match(r"^(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?$", s)
        if not match:
            raise ParseError(f"invalid ISO 8601 time format: {s!r}", s, 0)
        hour_str, minute_str, second_str, frac_str = match.groups()
        return cls(
            hour=int(hour_str),
            minute=int(minute_str),
            second=int(second_str) if second_str else 0,
            nanosecond=int(frac_str.ljust(9, "0")) if frac_str else 0,
        )

    @property
    def chronology(self) -> Chronology:
        from chronoperiod.chrono.chronology import ISO

        return ISO

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos // NANOS_PER_MINUTE) % 60

    @property
    def second(self) -> int:
        return (self._nanos // NANOS_PER_SECOND) % 60

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    @property
    def nano_of_day(self) -> int:
        """Return the nanoseconds since midnight."""
        return self._nanos

    def get(self, field: Field) -> int:
        """Return the value of a time field.

        Raises:
            UnsupportedFieldError: For date fields.
        """
        if field is Field.NANO_OF_DAY:
            return self._nanos
        if field is Field.NANO_OF_SECOND:
            return self.nanosecond
        if field is Field.SECOND_OF_MINUTE:
            return self.second
        if field is Field.MINUTE_OF_HOUR:
            return self.minute
        if field is Field.HOUR_OF_DAY:
            return self.hour
        raise unsupported_field(field, self)

    def range(self, field: Field) -> ValueRange:
        if field.is_time_field:
            return field.range()
        raise unsupported_field(field, self)

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        *,
        nanosecond: int | None = None,
    ) -> Time:
        """Return a new Time with specified components replaced."""
        return Time(
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            nanosecond=nanosecond if nanosecond is not None else self.nanosecond,
        )

    @overload
    def plus(self, amount: Period) -> Time: ...

    @overload
    def plus(self, amount: int, unit: PeriodUnit) -> Time: ...

    def plus(self, amount: Period | int, unit: PeriodUnit | None = None) -> Time:
        """Add a Period, or an amount of a time-based unit, wrapping at midnight.

        Raises:
            UnsupportedUnitError: If unit is date-based.

        Examples:
            >>> Time(12, 30).plus(-45, PeriodUnit.MINUTES)
            Time(11, 45, 0, nanosecond=0)
        """
        if unit is None:
            return amount.apply_to(self)  # type: ignore[union-attr]
        unit_nanos = _UNIT_NANOS.get(unit)
        if unit_nanos is None:
            raise UnsupportedUnitError(f"Unsupported unit for Time: {unit.value}")
        if amount == 0:
            return self
        # Reduce first so the product stays small
        offset = (amount % (NANOS_PER_DAY // unit_nanos)) * unit_nanos
        return Time._from_nanos((self._nanos + offset) % NANOS_PER_DAY)

    @overload
    def minus(self, amount: Period) -> Time: ...

    @overload
    def minus(self, amount: int, unit: PeriodUnit) -> Time: ...

    def minus(self, amount: Period | int, unit: PeriodUnit | None = None) -> Time:
        if unit is None:
            return amount.subtract_from(self)  # type: ignore[union-attr]
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def until(self, end: Time) -> Period:
        """Return the time-only Period from this time to end."""
        from chronoperiod.core.period import Period

        return Period.between_iso(self, end)

    def to_iso_format(self) -> str:
        """Return the time as an ISO 8601 string.

        The fraction is omitted when zero and otherwise written with
        trailing zeros removed.

        Examples:
            >>> Time(14, 30, 45).to_iso_format()
            '14:30:45'

            >>> Time(14, 30, 45, nanosecond=123_000_000).to_iso_format()
            '14:30:45.123'
        """
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanosecond == 0:
            return base
        return f"{base}.{self.nanosecond:09d}".rstrip("0")

    def __add__(self, other: object) -> Time:
        from chronoperiod.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.apply_to(self)

    def __sub__(self, other: object) -> Time:
        from chronoperiod.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.subtract_from(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second}, nanosecond={self.nanosecond})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy, midnight included."""
        return True


__all__ = ["Time"]
