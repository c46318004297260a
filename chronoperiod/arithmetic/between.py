"""Between-calculations: the Period or unit count separating two values.

Three algorithms live here:

- ``between`` compares the YEAR, MONTH_OF_YEAR, DAY_OF_MONTH and
  NANO_OF_DAY fields of two values of the same chronology, field by field.
- ``between_iso`` is the calendar-exact years/months/days difference of
  two ISO dates, or the nanosecond difference of two times.
- ``units_between`` counts whole units between two ISO dates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chronoperiod._internal.safe_math import (
    safe_add,
    safe_multiply,
    safe_subtract,
    safe_to_int,
    truncate_div,
    truncate_mod,
)
from chronoperiod._internal.validation import check_not_none
from chronoperiod.errors import (
    ChronologyMismatchError,
    NoValidFieldsError,
    UnsupportedUnitError,
    ValidationError,
)
from chronoperiod.units.field import Field
from chronoperiod.units.period_unit import PeriodUnit

if TYPE_CHECKING:
    from chronoperiod.core.period import Period
    from chronoperiod.units.field import CalendarAccessor

logger = logging.getLogger(__name__)

# Month divisor for each date unit counted from a packed month difference
_MONTHS_IN_UNIT: dict[PeriodUnit, int] = {
    PeriodUnit.MONTHS: 1,
    PeriodUnit.QUARTER_YEARS: 3,
    PeriodUnit.YEARS: 12,
    PeriodUnit.DECADES: 120,
    PeriodUnit.CENTURIES: 1_200,
    PeriodUnit.MILLENNIA: 12_000,
}


def between(start: CalendarAccessor, end: CalendarAccessor) -> Period:
    """Return the field-by-field Period between two values of one chronology.

    Each of YEAR, MONTH_OF_YEAR, DAY_OF_MONTH and NANO_OF_DAY that start
    supports contributes the difference ``end - start``. When the
    chronology's month-of-year range is fixed, years and months are
    re-split so they share the sign of the total month count. Nothing
    carries between days and months or between time and days.

    Args:
        start: The start value, inclusive.
        end: The end value, exclusive.

    Returns:
        The Period from start to end.

    Raises:
        NullInputError: If either value is None.
        ChronologyMismatchError: If the values belong to different chronologies.
        NoValidFieldsError: If start supports none of the four fields.
        ArithmeticOverflowError: If a difference does not fit its field.

    Examples:
        >>> from chronoperiod import Date, Month, Time
        >>> between(Date(2010, 6, 12), Date(2009, 9, 24))
        Period(years=0, months=-9, days=12, nanos=0)
        >>> between(Month.NOVEMBER, Month.MAY)
        Period(years=0, months=-6, days=0, nanos=0)
        >>> str(between(Time(12, 30, 40), Time(11, 30, 40)))
        'PT-1H'
    """
    from chronoperiod.core.period import Period

    check_not_none(start, "start")
    check_not_none(end, "end")
    start_chronology = start.chronology
    end_chronology = end.chronology
    if start_chronology is not end_chronology:
        raise ChronologyMismatchError(
            "Unable to calculate period as date-times have different chronologies: "
            f"{start_chronology} and {end_chronology}"
        )

    years = 0
    months = 0
    days = 0
    nanos = 0
    valid = False
    if Field.YEAR.is_supported_by(start):
        years = safe_to_int(safe_subtract(end.get(Field.YEAR), start.get(Field.YEAR)))
        valid = True
    if Field.MONTH_OF_YEAR.is_supported_by(start):
        months = safe_to_int(
            safe_subtract(end.get(Field.MONTH_OF_YEAR), start.get(Field.MONTH_OF_YEAR))
        )
        start_range = start_chronology.range(Field.MONTH_OF_YEAR)
        end_range = end_chronology.range(Field.MONTH_OF_YEAR)
        if start_range.is_fixed() and start_range.is_int_value() and start_range == end_range:
            month_count = start_range.maximum - start_range.minimum + 1
            total_months = safe_add(months, safe_multiply(years, month_count))
            months = truncate_mod(total_months, month_count)
            years = safe_to_int(truncate_div(total_months, month_count))
        valid = True
    if Field.DAY_OF_MONTH.is_supported_by(start):
        days = safe_to_int(
            safe_subtract(end.get(Field.DAY_OF_MONTH), start.get(Field.DAY_OF_MONTH))
        )
        valid = True
    if Field.NANO_OF_DAY.is_supported_by(start):
        nanos = safe_subtract(end.get(Field.NANO_OF_DAY), start.get(Field.NANO_OF_DAY))
        valid = True
    if not valid:
        raise NoValidFieldsError(
            "Unable to calculate period as date-times do not have any valid fields: "
            f"{type(start).__name__}"
        )
    logger.debug(
        "between %r and %r: years=%d months=%d days=%d nanos=%d",
        start, end, years, months, days, nanos,
    )
    return Period(years, months, days, nanos)


def between_iso(start: CalendarAccessor, end: CalendarAccessor) -> Period:
    """Return the ISO Period between two dates, two times or two date-times.

    For dates the result is the calendar-exact years, months and days:
    when the end day-of-month falls before the start day-of-month in a
    later month, one month is given back and the days counted exactly
    from ``start.plus_months(months)``, so Jan 31 to Mar 1 is one month
    and one day. In the other direction the end month's length is taken
    off the days instead. Years and months share the sign of the total.

    For times the result is the nanosecond difference. For date-times
    the date and time results are combined without any carry.

    Raises:
        NullInputError: If either value is None.
        ValidationError: If the values are not a matching ISO pair.

    Examples:
        >>> from chronoperiod import Date
        >>> between_iso(Date(2012, 2, 29), Date(2014, 2, 28))
        Period(years=1, months=11, days=30, nanos=0)
        >>> between_iso(Date(2010, 1, 15), Date(2009, 12, 14))
        Period(years=0, months=-1, days=-1, nanos=0)
    """
    from chronoperiod.core.date import Date
    from chronoperiod.core.datetime import DateTime
    from chronoperiod.core.period import Period
    from chronoperiod.core.time import Time

    check_not_none(start, "start")
    check_not_none(end, "end")
    if isinstance(start, Date) and isinstance(end, Date):
        return _between_dates(start, end)
    if isinstance(start, Time) and isinstance(end, Time):
        return Period(nanos=end.nano_of_day - start.nano_of_day)
    if isinstance(start, DateTime) and isinstance(end, DateTime):
        date_part = _between_dates(start.date(), end.date())
        return date_part.with_time_nanos(end.time().nano_of_day - start.time().nano_of_day)
    raise ValidationError(
        "between_iso requires two Date, two Time or two DateTime values, got "
        f"{type(start).__name__} and {type(end).__name__}"
    )


def _between_dates(start: CalendarAccessor, end: CalendarAccessor) -> Period:
    from chronoperiod.core.period import Period

    total_months = end.epoch_month - start.epoch_month  # type: ignore[attr-defined]
    days = end.day_of_month - start.day_of_month  # type: ignore[attr-defined]
    if total_months > 0 and days < 0:
        total_months -= 1
        calc_date = start.plus_months(total_months)  # type: ignore[attr-defined]
        days = end.epoch_day - calc_date.epoch_day  # type: ignore[attr-defined]
    elif total_months < 0 and days > 0:
        total_months += 1
        days -= end.length_of_month  # type: ignore[attr-defined]
    years = truncate_div(total_months, 12)
    months = truncate_mod(total_months, 12)
    return Period.of_date_fields(safe_to_int(years), months, days)


def units_between(start: CalendarAccessor, end: CalendarAccessor, unit: PeriodUnit) -> int:
    """Return the number of whole units from start to end, rounded toward zero.

    Days and weeks count from the epoch-day difference. Months and larger
    units compare a packed month-and-day value, so 2012-07-02 to
    2012-08-01 is zero months but 2012-07-02 to 2012-08-02 is one.

    Raises:
        NullInputError: If an argument is None.
        UnsupportedUnitError: For time-based units, ERAS and FOREVER.

    Examples:
        >>> from chronoperiod import Date
        >>> units_between(Date(1939, 9, 2), Date(1940, 9, 2), PeriodUnit.YEARS)
        1
        >>> units_between(Date(2012, 7, 8), Date(2012, 7, 1), PeriodUnit.WEEKS)
        -1
    """
    check_not_none(start, "start")
    check_not_none(end, "end")
    check_not_none(unit, "unit")
    if unit is PeriodUnit.DAYS:
        return safe_subtract(end.get(Field.EPOCH_DAY), start.get(Field.EPOCH_DAY))
    if unit is PeriodUnit.WEEKS:
        return truncate_div(units_between(start, end, PeriodUnit.DAYS), 7)
    months_in_unit = _MONTHS_IN_UNIT.get(unit)
    if months_in_unit is None:
        raise UnsupportedUnitError(f"Unsupported unit for units_between: {unit.value}")
    start_packed = _packed_month_day(start)
    end_packed = _packed_month_day(end)
    months = truncate_div(end_packed - start_packed, 32)
    return truncate_div(months, months_in_unit)


def _packed_month_day(value: CalendarAccessor) -> int:
    return value.get(Field.EPOCH_MONTH) * 32 + value.get(Field.DAY_OF_MONTH)


__all__ = ["between", "between_iso", "units_between"]
