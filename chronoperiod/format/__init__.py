"""Text formatting and parsing.

This module provides functions for converting values to and from
string representations:
    - The canonical Period text form (PnYnMnDTnHnMn.nS)
    - ISO 8601 for dates, times, date-times, year-months and periods

Functions:
    format_period: Format a Period in canonical form.
    parse_period: Parse canonical Period text.
    parse_iso8601: Parse any supported ISO 8601 string.
    format_iso8601: Format any supported value as ISO 8601.

Examples:
    >>> from chronoperiod.format import parse_period
    >>> str(parse_period("p1y2m3dt4h5m6,7s"))
    'P1Y2M3DT4H5M6.7S'
"""

from __future__ import annotations

from chronoperiod.format.iso8601 import format_iso8601, parse_iso8601
from chronoperiod.format.period_text import (
    PeriodParser,
    format_components,
    format_period,
    parse_period,
)

__all__: list[str] = [
    # Period text
    "format_period",
    "format_components",
    "parse_period",
    "PeriodParser",
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
]
