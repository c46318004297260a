"""Calendar utilities for chronoperiod.

This module provides internal functions for ISO (proleptic Gregorian)
calendar calculations: leap years, month lengths and conversions between
(year, month, day) and the epoch-day count.

Epoch day 0 = 1970-01-01.

This module is not part of the public API.
"""

from __future__ import annotations

from chronoperiod._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
    EPOCH_YEAR,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to the count of days since 1970-01-01.

    Works for any proleptic year; Python's floor division gives the
    right leap-day counts for years before zero.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The epoch day.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2000, 3, 1)
        11017
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
    """
    # Shift the year start to March so the leap day is the last day
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    month_index = month - 3 if month > 2 else month + 9
    day_of_year = (153 * month_index + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_CYCLE + day_of_era - DAYS_0000_TO_1970


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert a count of days since 1970-01-01 to year, month, day.

    Args:
        epoch_day: The epoch day.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(-1)
        (1969, 12, 31)
    """
    z = epoch_day + DAYS_0000_TO_1970
    era = z // DAYS_PER_CYCLE
    day_of_era = z - era * DAYS_PER_CYCLE
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    month_index = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * month_index + 2) // 5 + 1
    month = month_index + 3 if month_index < 10 else month_index - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert day-of-year to month and day.

    Args:
        year: The year (for leap year calculation).
        doy: Day of year (1-366).

    Returns:
        Tuple of (month, day).
    """
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ym_to_epoch_month(year: int, month: int) -> int:
    """Return the count of months since January 1970."""
    return (year - EPOCH_YEAR) * MONTHS_PER_YEAR + (month - 1)


def epoch_month_to_ym(epoch_month: int) -> tuple[int, int]:
    """Convert a count of months since January 1970 to (year, month)."""
    year_offset, month_index = divmod(epoch_month, MONTHS_PER_YEAR)
    return (EPOCH_YEAR + year_offset, month_index + 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "doy_to_md",
    "ym_to_epoch_month",
    "epoch_month_to_ym",
]
