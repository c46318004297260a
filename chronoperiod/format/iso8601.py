"""ISO 8601 formatting and parsing.

This module provides functions for converting values to and from
ISO 8601 string representations.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a value.
    format_iso8601: Format a value as an ISO 8601 string.

Supported forms:

Periods:
    - PnYnMnDTnHnMn.nS (see chronoperiod.format.period_text)

Dates and year-months:
    - YYYY-MM-DD and YYYY-MM
    - -YYYY-MM-DD (negative years for BCE), +YYYYY-MM-DD (years past 9999)

Times:
    - HH:MM, HH:MM:SS, HH:MM:SS.f (fractional seconds, 1-9 digits)

DateTimes:
    - YYYY-MM-DDTHH:MM[:SS[.f]]

Examples:
    >>> from chronoperiod import Date
    >>> parse_iso8601("P1Y2M")
    Period(years=1, months=2, days=0, nanos=0)

    >>> format_iso8601(Date(2024, 1, 15))
    '2024-01-15'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from chronoperiod._internal.validation import check_not_none
from chronoperiod.errors import ParseError

if TYPE_CHECKING:
    from chronoperiod.core.date import Date
    from chronoperiod.core.datetime import DateTime
    from chronoperiod.core.period import Period
    from chronoperiod.core.time import Time
    from chronoperiod.core.year_month import YearMonth

# Type alias for values with an ISO 8601 form
IsoValue = Union["Date", "Time", "DateTime", "YearMonth", "Period"]

_YEAR_MONTH_RE = re.compile(r"^([+-]?\d{4,})-(\d{2})$")


def parse_iso8601(s: str) -> IsoValue:
    """Parse an ISO 8601 string into a value.

    Automatically detects what the string represents.

    Detection rules:
        - Starts with 'P' -> Period
        - Contains 'T' -> DateTime
        - Contains ':' but no '-' -> Time
        - YYYY-MM -> YearMonth
        - Otherwise -> Date

    Raises:
        NullInputError: If s is None.
        ParseError: If the string is not valid ISO 8601 format.
        ValidationError: If the parsed components are invalid.

    Examples:
        >>> parse_iso8601("2024-01-15")
        Date(2024, 1, 15)

        >>> parse_iso8601("14:30:45")
        Time(14, 30, 45, nanosecond=0)

        >>> parse_iso8601("2024-01-15T14:30:45")
        DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0)

        >>> parse_iso8601("2012-06")
        YearMonth(2012, 6)
    """
    # Import here to avoid circular imports
    from chronoperiod.core.date import Date
    from chronoperiod.core.datetime import DateTime
    from chronoperiod.core.time import Time
    from chronoperiod.core.year_month import YearMonth
    from chronoperiod.format.period_text import parse_period

    check_not_none(s, "s")
    s = s.strip()
    if not s:
        raise ParseError("empty string", s, 0)

    if s[0] in "Pp":
        return parse_period(s)

    if "T" in s or "t" in s:
        return DateTime.from_iso_format(s.replace("t", "T"))

    if ":" in s and "-" not in s:
        return Time.from_iso_format(s)

    match = _YEAR_MONTH_RE.match(s)
    if match:
        return YearMonth(int(match.group(1)), int(match.group(2)))

    if "-" in s:
        return Date.from_iso_format(s)

    raise ParseError(
        f"cannot determine ISO 8601 format for: {s!r}. "
        "Expected period (PnYnMnD), date (YYYY-MM-DD), time (HH:MM:SS) "
        "or datetime (YYYY-MM-DDTHH:MM:SS)",
        s,
        0,
    )


def format_iso8601(value: IsoValue) -> str:
    """Format a value as an ISO 8601 string.

    Raises:
        TypeError: If value has no ISO 8601 form.

    Examples:
        >>> from chronoperiod import DateTime, Period, Time
        >>> format_iso8601(Time(14, 30, 45))
        '14:30:45'

        >>> format_iso8601(DateTime(2024, 1, 15, 14, 30, 45))
        '2024-01-15T14:30:45'

        >>> format_iso8601(Period.of_time_fields(0, 0, 0, 100_000_000))
        'PT0.1S'
    """
    # Import here to avoid circular imports
    from chronoperiod.core.date import Date
    from chronoperiod.core.datetime import DateTime
    from chronoperiod.core.period import Period
    from chronoperiod.core.time import Time
    from chronoperiod.core.year_month import YearMonth
    from chronoperiod.format.period_text import format_period

    if isinstance(value, Period):
        return format_period(value)
    if isinstance(value, (Date, Time, DateTime, YearMonth)):
        return value.to_iso_format()
    raise TypeError(
        f"expected Date, Time, DateTime, YearMonth or Period, got {type(value).__name__}"
    )


__all__ = ["parse_iso8601", "format_iso8601"]
