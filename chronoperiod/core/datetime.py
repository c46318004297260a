"""DateTime class combining an ISO date with a time of day.

DateTime carries no timezone; it is the local date-time that both the
generic and the ISO between-calculators understand as a full set of
YEAR, MONTH_OF_YEAR, DAY_OF_MONTH and NANO_OF_DAY fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from chronoperiod._internal.constants import LONG_MAX, LONG_MIN, NANOS_PER_DAY
from chronoperiod._internal.safe_math import floor_div, floor_mod
from chronoperiod.core.date import Date
from chronoperiod.core.time import _UNIT_NANOS, Time
from chronoperiod.errors import ParseError
from chronoperiod.units.field import Field
from chronoperiod.units.period_unit import PeriodUnit
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from chronoperiod.chrono.chronology import Chronology
    from chronoperiod.core.period import Period


class DateTime:
    """A date and time without timezone, with nanosecond precision.

    Examples:
        >>> dt = DateTime(2024, 1, 15, 14, 30)
        >>> dt.date(), dt.time()
        (Date(2024, 1, 15), Time(14, 30, 0, nanosecond=0))

        >>> DateTime(2024, 1, 31, 23, 0).plus(2, PeriodUnit.HOURS)
        DateTime(2024, 2, 1, 1, 0, 0, nanosecond=0)
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        self._date = Date(year, month, day)
        self._time = Time(hour, minute, second, nanosecond=nanosecond)

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Create a DateTime from a Date and a Time."""
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse 'YYYY-MM-DDTHH:MM[:SS[.f]]'.

        Examples:
            >>> DateTime.from_iso_format("2024-01-15T14:30:45.5")
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=500000000)
        """
        date_part, sep, time_part = s.upper().partition("T")
        if not sep:
            raise ParseError(f"Invalid ISO 8601 datetime format: {s!r}", s, 0)
        return cls.combine(Date.from_iso_format(date_part), Time.from_iso_format(time_part))

    @property
    def chronology(self) -> Chronology:
        return self._date.chronology

    def date(self) -> Date:
        return self._date

    def time(self) -> Time:
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def get(self, field: Field) -> int:
        """Return a date field from the date part, a time field from the time part."""
        if field.is_date_field:
            return self._date.get(field)
        return self._time.get(field)

    def range(self, field: Field) -> ValueRange:
        if field.is_date_field:
            return self._date.range(field)
        return self._time.range(field)

    @overload
    def plus(self, amount: Period) -> DateTime: ...

    @overload
    def plus(self, amount: int, unit: PeriodUnit) -> DateTime: ...

    def plus(self, amount: Period | int, unit: PeriodUnit | None = None) -> DateTime:
        """Add a Period, or an amount of any unit, carrying across midnight.

        Raises:
            UnsupportedUnitError: For FOREVER.
            ArithmeticOverflowError: If the arithmetic overflows.
        """
        if unit is None:
            return amount.apply_to(self)  # type: ignore[union-attr]
        if amount == 0:
            return self
        unit_nanos = _UNIT_NANOS.get(unit)
        if unit_nanos is None:
            return DateTime.combine(self._date.plus(amount, unit), self._time)
        total = self._time.nano_of_day + amount * unit_nanos
        new_date = self._date.plus_days(floor_div(total, NANOS_PER_DAY))
        return DateTime.combine(new_date, Time._from_nanos(floor_mod(total, NANOS_PER_DAY)))

    @overload
    def minus(self, amount: Period) -> DateTime: ...

    @overload
    def minus(self, amount: int, unit: PeriodUnit) -> DateTime: ...

    def minus(self, amount: Period | int, unit: PeriodUnit | None = None) -> DateTime:
        if unit is None:
            return amount.subtract_from(self)  # type: ignore[union-attr]
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def until(self, end: DateTime) -> Period:
        """Return the ISO period between this date-time and end."""
        from chronoperiod.core.period import Period

        return Period.between_iso(self, end)

    def to_iso_format(self) -> str:
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def __add__(self, other: object) -> DateTime:
        from chronoperiod.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.apply_to(self)

    def __sub__(self, other: object) -> DateTime:
        from chronoperiod.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.subtract_from(self)

    def _key(self) -> tuple[int, int]:
        return (self._date.epoch_day, self._time.nano_of_day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DateTime({self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, nanosecond={self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        return True


__all__ = ["DateTime"]
