"""Applying a Period to dates and times.

A Period is applied one field at a time in a fixed order: years, then
months, then days, then the time component. Each step goes through the
target value's own ``plus(amount, unit)``, so month arithmetic clamps the
day of month the way the target's calendar does it.

Examples:
    Date(2024, 1, 31) + Period.of_months(1)          -> Date(2024, 2, 29)
    Date(2023, 1, 31) + Period.of_date_fields(0, 1, 1) -> Date(2023, 3, 1)
    Date(2024, 2, 29) + Period.of_years(1)           -> Date(2025, 2, 28)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from chronoperiod._internal.validation import check_not_none
from chronoperiod.units.period_unit import PeriodUnit

if TYPE_CHECKING:
    from chronoperiod.core.period import Period

T = TypeVar("T")


def apply_period(value: T, period: Period) -> T:
    """Add a Period to a date or time value.

    Args:
        value: Any value with ``plus(amount, unit)``.
        period: The period to add.

    Returns:
        The adjusted value.

    Raises:
        NullInputError: If value is None.
        UnsupportedUnitError: If the value cannot take one of the
            period's non-zero units, such as days on a Time.

    Examples:
        >>> from chronoperiod import Date, Period
        >>> apply_period(Date(2023, 1, 31), Period.of_date_fields(0, 1, 1))
        Date(2023, 3, 1)
    """
    check_not_none(value, "value")
    result: Any = value
    if period.years != 0:
        result = result.plus(period.years, PeriodUnit.YEARS)
    if period.months != 0:
        result = result.plus(period.months, PeriodUnit.MONTHS)
    if period.days != 0:
        result = result.plus(period.days, PeriodUnit.DAYS)
    if period.time_nanos != 0:
        result = result.plus(period.time_nanos, PeriodUnit.NANOS)
    return result


def subtract_period(value: T, period: Period) -> T:
    """Subtract a Period from a date or time value.

    The fields are subtracted in the same order they are added, so this
    is not always the inverse of apply_period.

    Examples:
        >>> from chronoperiod import Date, Period
        >>> subtract_period(Date(2024, 3, 31), Period.of_months(1))
        Date(2024, 2, 29)
    """
    check_not_none(value, "value")
    result: Any = value
    if period.years != 0:
        result = result.minus(period.years, PeriodUnit.YEARS)
    if period.months != 0:
        result = result.minus(period.months, PeriodUnit.MONTHS)
    if period.days != 0:
        result = result.minus(period.days, PeriodUnit.DAYS)
    if period.time_nanos != 0:
        result = result.minus(period.time_nanos, PeriodUnit.NANOS)
    return result


__all__ = ["apply_period", "subtract_period"]
