"""Field enumeration and the calendar accessor protocol.

Every date and time value in chronoperiod answers ``get(field)`` and
``range(field)`` for the fields that make sense on it and raises
UnsupportedFieldError for the rest. The between-calculator relies on
nothing else, which is what lets it work across calendar systems.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

from chronoperiod._internal.calendar import ymd_to_epoch_day
from chronoperiod._internal.constants import (
    EPOCH_YEAR,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    NANOS_PER_DAY,
)
from chronoperiod.errors import UnsupportedFieldError
from chronoperiod.units.value_range import ValueRange

if TYPE_CHECKING:
    from chronoperiod.chrono.chronology import Chronology


class Field(Enum):
    """The closed set of calendar and clock fields.

    Examples:
        >>> Field.MONTH_OF_YEAR.range()
        ValueRange(1, 12, largest_minimum=1, smallest_maximum=12)
        >>> Field.DAY_OF_MONTH.range().is_fixed()
        False
        >>> Field.NANO_OF_DAY.is_time_field
        True
    """

    ERA = "Era"
    YEAR_OF_ERA = "YearOfEra"
    YEAR = "Year"
    MONTH_OF_YEAR = "MonthOfYear"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    EPOCH_MONTH = "EpochMonth"
    HOUR_OF_DAY = "HourOfDay"
    MINUTE_OF_HOUR = "MinuteOfHour"
    SECOND_OF_MINUTE = "SecondOfMinute"
    NANO_OF_SECOND = "NanoOfSecond"
    NANO_OF_DAY = "NanoOfDay"

    def range(self) -> ValueRange:
        """Return the ISO range of this field.

        Individual chronologies and values may narrow or shift it.
        """
        return _DEFAULT_RANGES[self]

    @property
    def is_date_field(self) -> bool:
        return self in _DATE_FIELDS

    @property
    def is_time_field(self) -> bool:
        return not self.is_date_field

    def check_valid_value(self, value: int) -> int:
        """Check value against the default range of this field.

        Raises:
            ValidationError: If the value is outside the range.
        """
        return self.range().check_valid_value(value, self)

    def get_from(self, accessor: CalendarAccessor) -> int:
        """Return the value of this field on accessor."""
        return accessor.get(self)

    def is_supported_by(self, accessor: CalendarAccessor) -> bool:
        """Return True if accessor can answer ``get(self)``.

        Examples:
            >>> from chronoperiod import Date, Time
            >>> Field.YEAR.is_supported_by(Date(2012, 6, 12))
            True
            >>> Field.YEAR.is_supported_by(Time(12, 30))
            False
        """
        try:
            accessor.get(self)
        except UnsupportedFieldError:
            return False
        return True


_DATE_FIELDS = frozenset(
    {
        Field.ERA,
        Field.YEAR_OF_ERA,
        Field.YEAR,
        Field.MONTH_OF_YEAR,
        Field.DAY_OF_MONTH,
        Field.DAY_OF_YEAR,
        Field.EPOCH_DAY,
        Field.EPOCH_MONTH,
    }
)

_DEFAULT_RANGES: dict[Field, ValueRange] = {
    Field.ERA: ValueRange(0, 1),
    Field.YEAR_OF_ERA: ValueRange(1, MAX_YEAR + 1, smallest_maximum=MAX_YEAR),
    Field.YEAR: ValueRange(MIN_YEAR, MAX_YEAR),
    Field.MONTH_OF_YEAR: ValueRange(1, 12),
    Field.DAY_OF_MONTH: ValueRange(1, 31, smallest_maximum=28),
    Field.DAY_OF_YEAR: ValueRange(1, 366, smallest_maximum=365),
    Field.EPOCH_DAY: ValueRange(
        ymd_to_epoch_day(MIN_YEAR, 1, 1), ymd_to_epoch_day(MAX_YEAR, 12, 31)
    ),
    Field.EPOCH_MONTH: ValueRange(
        (MIN_YEAR - EPOCH_YEAR) * MONTHS_PER_YEAR,
        (MAX_YEAR - EPOCH_YEAR) * MONTHS_PER_YEAR + 11,
    ),
    Field.HOUR_OF_DAY: ValueRange(0, 23),
    Field.MINUTE_OF_HOUR: ValueRange(0, 59),
    Field.SECOND_OF_MINUTE: ValueRange(0, 59),
    Field.NANO_OF_SECOND: ValueRange(0, 999_999_999),
    Field.NANO_OF_DAY: ValueRange(0, NANOS_PER_DAY - 1),
}


class CalendarAccessor(Protocol):
    """What the period engine needs from a date or time value."""

    @property
    def chronology(self) -> Chronology: ...

    def get(self, field: Field) -> int: ...

    def range(self, field: Field) -> ValueRange: ...


def unsupported_field(field: Field, value: object) -> UnsupportedFieldError:
    """Build the error raised when value has no meaning for field."""
    return UnsupportedFieldError(
        f"Unsupported field: {field.name} on {type(value).__name__}"
    )


__all__ = ["Field", "CalendarAccessor", "unsupported_field"]
