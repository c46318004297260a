"""PeriodUnit enumeration for period and date arithmetic.

This module provides the PeriodUnit enum, the units in which amounts
are added to periods, dates and times, from nanoseconds to eras.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from chronoperiod._internal.constants import LONG_MAX, SECONDS_PER_DAY, SECONDS_PER_HOUR

if TYPE_CHECKING:
    from chronoperiod.core.duration import Duration
    from chronoperiod.units.field import CalendarAccessor

# Average Gregorian year: 365.2425 days
_SECONDS_PER_YEAR = 31_556_952


class PeriodUnit(Enum):
    """Standard units for period arithmetic.

    Each unit knows its duration. From DAYS upward the duration is an
    estimate (a day is not always 24 hours once timezones are involved,
    a month is never a fixed length) and such units cannot be converted
    to an exact nanosecond count.

    Examples:
        >>> PeriodUnit.HOURS.is_duration_estimated
        False
        >>> PeriodUnit.MONTHS.is_duration_estimated
        True
        >>> PeriodUnit.MINUTES.duration_seconds
        (60, 0)
    """

    NANOS = "Nanos"
    MICROS = "Micros"
    MILLIS = "Millis"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    HALF_DAYS = "HalfDays"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    QUARTER_YEARS = "QuarterYears"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"
    FOREVER = "Forever"

    @property
    def duration_seconds(self) -> tuple[int, int]:
        """Return the duration of one unit as (seconds, nano_of_second)."""
        return _DURATIONS[self]

    @property
    def duration(self) -> Duration:
        """Return the (possibly estimated) duration of one unit."""
        from chronoperiod.core.duration import Duration

        seconds, nanos = _DURATIONS[self]
        return Duration.of_seconds(seconds, nanos)

    @property
    def is_duration_estimated(self) -> bool:
        return _ORDER[self] >= _ORDER[PeriodUnit.DAYS]

    @property
    def is_time_based(self) -> bool:
        return _ORDER[self] < _ORDER[PeriodUnit.DAYS]

    @property
    def is_date_based(self) -> bool:
        return _ORDER[PeriodUnit.DAYS] <= _ORDER[self] <= _ORDER[PeriodUnit.ERAS]

    def between(self, start: CalendarAccessor, end: CalendarAccessor) -> int:
        """Return the number of whole units between two ISO dates.

        Examples:
            >>> from chronoperiod import Date
            >>> PeriodUnit.MONTHS.between(Date(2012, 7, 2), Date(2012, 8, 2))
            1
            >>> PeriodUnit.MONTHS.between(Date(2012, 7, 2), Date(2012, 8, 1))
            0
        """
        from chronoperiod.arithmetic.between import units_between

        return units_between(start, end, self)


_ORDER: dict[PeriodUnit, int] = {unit: index for index, unit in enumerate(PeriodUnit)}

_DURATIONS: dict[PeriodUnit, tuple[int, int]] = {
    PeriodUnit.NANOS: (0, 1),
    PeriodUnit.MICROS: (0, 1_000),
    PeriodUnit.MILLIS: (0, 1_000_000),
    PeriodUnit.SECONDS: (1, 0),
    PeriodUnit.MINUTES: (60, 0),
    PeriodUnit.HOURS: (SECONDS_PER_HOUR, 0),
    PeriodUnit.HALF_DAYS: (12 * SECONDS_PER_HOUR, 0),
    PeriodUnit.DAYS: (SECONDS_PER_DAY, 0),
    PeriodUnit.WEEKS: (7 * SECONDS_PER_DAY, 0),
    PeriodUnit.MONTHS: (_SECONDS_PER_YEAR // 12, 0),
    PeriodUnit.QUARTER_YEARS: (_SECONDS_PER_YEAR // 4, 0),
    PeriodUnit.YEARS: (_SECONDS_PER_YEAR, 0),
    PeriodUnit.DECADES: (_SECONDS_PER_YEAR * 10, 0),
    PeriodUnit.CENTURIES: (_SECONDS_PER_YEAR * 100, 0),
    PeriodUnit.MILLENNIA: (_SECONDS_PER_YEAR * 1000, 0),
    PeriodUnit.ERAS: (_SECONDS_PER_YEAR * 1_000_000_000, 0),
    PeriodUnit.FOREVER: (LONG_MAX, 999_999_999),
}


__all__ = ["PeriodUnit"]
