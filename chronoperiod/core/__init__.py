"""Core value types.

This module provides the fundamental types:
    - Period: Years, months, days and an exact time component
    - Duration: Exact time span with nanosecond precision
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with nanosecond precision
    - DateTime: Combined date and time without timezone
    - YearMonth: A month of a particular year
"""

from __future__ import annotations

from chronoperiod.core.date import Date
from chronoperiod.core.datetime import DateTime
from chronoperiod.core.duration import Duration
from chronoperiod.core.period import Period
from chronoperiod.core.time import Time
from chronoperiod.core.year_month import YearMonth

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "Period",
    "Time",
    "YearMonth",
]
