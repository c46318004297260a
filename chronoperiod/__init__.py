"""Chronoperiod: calendar periods, exact durations and regional calendars.

Chronoperiod models a Period as years, months and days plus an exact
nanosecond time component, computes Periods between two dates or times
under pluggable calendar rules, and round-trips Periods through their
canonical ISO 8601 text form. Every integer operation is overflow
checked.

Core Types:
    Period: Years, months, days and a nanosecond time component
    Duration: Exact time span with nanosecond precision
    Date: ISO calendar date (year, month, day)
    Time: Time of day (hour, minute, second, nanosecond)
    DateTime: Combined date and time without timezone
    YearMonth: A month of a particular year

Units:
    PeriodUnit: Units of period arithmetic (NANOS to FOREVER)
    Field: Calendar and clock fields (YEAR, MONTH_OF_YEAR, ...)
    ValueRange: Legal values of a field
    Month: January to December
    IsoEra: BCE/CE era designation

Calendars:
    Chronology: Calendar system registry and base class
    ChronoDate: A date in a regional calendar
    ISO, MINGUO, THAI_BUDDHIST, JAPANESE: Built-in calendars

Format Functions:
    parse_iso8601: Parse ISO 8601 text, periods included
    format_iso8601: Format a value as ISO 8601

Exceptions:
    ChronoPeriodError: Base exception
    ValidationError, ParseError, ArithmeticOverflowError,
    UnsupportedUnitError, UnsupportedFieldError, ChronologyMismatchError,
    NoValidFieldsError, HasCalendarUnitsError, NullInputError

Example:
    >>> from chronoperiod import Date, Period
    >>> Date(2012, 2, 29).until(Date(2014, 2, 28))
    Period(years=1, months=11, days=30, nanos=0)
    >>> str(Period.parse("P1Y2M3DT4H5M6.7S").plus(1, PeriodUnit.MONTHS))
    'P1Y3M3DT4H5M6.7S'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronoperiod.core.date import Date
from chronoperiod.core.datetime import DateTime
from chronoperiod.core.duration import Duration
from chronoperiod.core.period import Period
from chronoperiod.core.time import Time
from chronoperiod.core.year_month import YearMonth

# Units
from chronoperiod.units.era import IsoEra, MinguoEra, ThaiBuddhistEra
from chronoperiod.units.field import Field
from chronoperiod.units.month import Month
from chronoperiod.units.period_unit import PeriodUnit
from chronoperiod.units.value_range import ValueRange

# Calendars
from chronoperiod.chrono import (
    ISO,
    JAPANESE,
    MINGUO,
    THAI_BUDDHIST,
    ChronoDate,
    Chronology,
    JapaneseEra,
)

# Exceptions
from chronoperiod.errors import (
    ArithmeticOverflowError,
    ChronologyMismatchError,
    ChronoPeriodError,
    HasCalendarUnitsError,
    NoValidFieldsError,
    NullInputError,
    ParseError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValidationError,
)

# Format functions
from chronoperiod.format import format_iso8601, parse_iso8601

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "Period",
    "Time",
    "YearMonth",
    # Units
    "Field",
    "IsoEra",
    "MinguoEra",
    "Month",
    "PeriodUnit",
    "ThaiBuddhistEra",
    "ValueRange",
    # Calendars
    "Chronology",
    "ChronoDate",
    "JapaneseEra",
    "ISO",
    "MINGUO",
    "THAI_BUDDHIST",
    "JAPANESE",
    # Exceptions
    "ChronoPeriodError",
    "ValidationError",
    "ParseError",
    "ArithmeticOverflowError",
    "UnsupportedUnitError",
    "UnsupportedFieldError",
    "ChronologyMismatchError",
    "NoValidFieldsError",
    "HasCalendarUnitsError",
    "NullInputError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
