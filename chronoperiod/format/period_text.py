"""Canonical text form of a Period: ``PnYnMnDTnHnMn.nS``.

Functions:
    format_period: Render a Period in canonical form.
    format_components: Render raw years, months, days and nanos.
    parse_period: Parse canonical text back into a Period.

Every number carries its own optional leading '-'. The time section is
introduced by 'T' and the seconds may have a fraction of one to nine
digits, introduced by '.' or ','. Letters are accepted in either case.

Examples:
    >>> from chronoperiod import Period
    >>> format_period(Period.of_units(1, 2, 3, 4, 5, 6))
    'P1Y2M3DT4H5M6S'
    >>> parse_period("P1Y-2M")
    Period(years=1, months=-2, days=0, nanos=0)
"""

from __future__ import annotations

import logging
import string
from typing import TYPE_CHECKING, NoReturn

from chronoperiod._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from chronoperiod._internal.safe_math import (
    safe_add,
    safe_multiply,
    safe_to_int,
    truncate_div,
    truncate_mod,
)
from chronoperiod._internal.validation import check_not_none
from chronoperiod.errors import ArithmeticOverflowError, ParseError, ValidationError

if TYPE_CHECKING:
    from chronoperiod.core.period import Period

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_DATE_UNITS = "YMD"
_TIME_UNITS = "HMS"
_TIME_UNIT_NANOS = (NANOS_PER_HOUR, NANOS_PER_MINUTE, NANOS_PER_SECOND)


def format_components(years: int, months: int, days: int, nanos: int) -> str:
    """Render period components in canonical form.

    The sub-minute remainder of nanos is written as one signed seconds
    value, so a remainder of -0.1 seconds is '-0.1S' whatever the signs
    of the whole and fractional seconds on their own.

    Examples:
        >>> format_components(0, 0, 0, 0)
        'PT0S'
        >>> format_components(0, 0, 0, -100_000_000)
        'PT-0.1S'
        >>> format_components(0, 0, 0, 900_000_000 - NANOS_PER_SECOND)
        'PT-0.1S'
    """
    if years == 0 and months == 0 and days == 0 and nanos == 0:
        return "PT0S"
    parts = ["P"]
    if years != 0:
        parts.append(f"{years}Y")
    if months != 0:
        parts.append(f"{months}M")
    if days != 0:
        parts.append(f"{days}D")
    if nanos != 0:
        parts.append("T")
        hours = truncate_div(nanos, NANOS_PER_HOUR)
        minutes = truncate_mod(truncate_div(nanos, NANOS_PER_MINUTE), 60)
        second_nanos = truncate_mod(nanos, NANOS_PER_MINUTE)
        if hours != 0:
            parts.append(f"{hours}H")
        if minutes != 0:
            parts.append(f"{minutes}M")
        if second_nanos != 0:
            parts.append(_format_seconds(second_nanos))
    return "".join(parts)


def _format_seconds(second_nanos: int) -> str:
    second_part = truncate_div(second_nanos, NANOS_PER_SECOND)
    nano_part = truncate_mod(second_nanos, NANOS_PER_SECOND)
    if nano_part == 0:
        return f"{second_part}S"
    sign = ""
    if second_nanos < 0:
        sign = "-"
        second_part = -second_part
        nano_part = -nano_part
    fraction = f"{nano_part:09d}".rstrip("0")
    return f"{sign}{second_part}.{fraction}S"


def format_period(period: Period) -> str:
    """Render a Period in canonical form.

    Examples:
        >>> from chronoperiod import Period
        >>> format_period(Period.of_time_fields(0, 0, 6, 700_000_000))
        'PT6.7S'
    """
    return format_components(period.years, period.months, period.days, period.time_nanos)


class PeriodParser:
    """Single-use parser for the canonical Period text.

    The parser walks the text once, tracking the offset so that errors
    point at the first character that could not be accepted.

    Examples:
        >>> PeriodParser("PT-1,5S").parse().time_nanos
        -1500000000
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._upper = text.translate(_ASCII_UPPER)
        self._pos = 0

    def parse(self) -> Period:
        """Parse the whole text.

        Raises:
            ParseError: If the text is malformed or a value overflows.
        """
        from chronoperiod.core.period import Period

        text = self._upper
        if not text:
            self._fail("Text cannot be parsed to a Period: empty text", 0)
        if text[0] != "P":
            self._fail("Text cannot be parsed to a Period: must start with 'P'", 0)
        self._pos = 1

        date_values = [0, 0, 0]
        nanos = 0
        found = False

        last_unit = -1
        while self._pos < len(text) and text[self._pos] != "T":
            number_pos = self._pos
            whole, _, _ = self._number(allow_fraction=False)
            unit = self._unit(_DATE_UNITS, last_unit)
            date_values[unit] = self._to_int(whole, number_pos)
            last_unit = unit
            found = True

        if self._pos < len(text):
            self._pos += 1
            if self._pos == len(text):
                self._fail("Text cannot be parsed to a Period: no time component after 'T'", self._pos)
            last_unit = -1
            while self._pos < len(text):
                number_pos = self._pos
                whole, fraction, negative = self._number(allow_fraction=True)
                unit_pos = self._pos
                unit = self._unit(_TIME_UNITS, last_unit)
                if fraction is not None and _TIME_UNITS[unit] != "S":
                    self._fail("Text cannot be parsed to a Period: fraction only allowed on seconds", unit_pos)
                try:
                    amount = safe_multiply(whole, _TIME_UNIT_NANOS[unit])
                    if fraction is not None:
                        amount = safe_add(amount, -fraction if negative else fraction)
                    nanos = safe_add(nanos, amount)
                except ArithmeticOverflowError as exc:
                    self._fail(f"Text cannot be parsed to a Period: {exc}", number_pos, exc)
                last_unit = unit
                found = True

        if not found:
            self._fail("Text cannot be parsed to a Period: no components", self._pos)
        return Period(date_values[0], date_values[1], date_values[2], nanos)

    def _number(self, allow_fraction: bool) -> tuple[int, int | None, bool]:
        """Read an optionally signed integer with an optional fraction.

        Returns the signed whole value, the fraction in nanoseconds (always
        positive, None when absent) and whether a '-' was present.
        """
        text = self._upper
        sign_pos = self._pos
        negative = False
        if self._pos < len(text) and text[self._pos] == "-":
            negative = True
            self._pos += 1
            if self._pos < len(text) and text[self._pos] in "+-":
                self._fail("Text cannot be parsed to a Period: double sign", self._pos)
        digits_start = self._pos
        while self._pos < len(text) and text[self._pos] in _DIGITS:
            self._pos += 1
        if self._pos == digits_start:
            self._fail("Text cannot be parsed to a Period: expected a number", self._pos)
        whole = int(text[digits_start:self._pos])

        fraction = None
        if allow_fraction and self._pos < len(text) and text[self._pos] in ".,":
            self._pos += 1
            fraction_start = self._pos
            while self._pos < len(text) and text[self._pos] in _DIGITS:
                self._pos += 1
            fraction_digits = text[fraction_start:self._pos]
            if not fraction_digits:
                self._fail("Text cannot be parsed to a Period: expected fraction digits", self._pos)
            if len(fraction_digits) > 9:
                self._fail(
                    "Text cannot be parsed to a Period: more than 9 fraction digits",
                    fraction_start + 9,
                )
            fraction = int(fraction_digits.ljust(9, "0"))

        if negative and whole == 0 and not fraction:
            self._fail("Text cannot be parsed to a Period: negative zero", sign_pos)
        return (-whole if negative else whole), fraction, negative

    def _unit(self, units: str, last_unit: int) -> int:
        """Read a unit letter that must come after the previous one."""
        text = self._upper
        if self._pos >= len(text):
            self._fail("Text cannot be parsed to a Period: missing unit letter", self._pos)
        unit = units.find(text[self._pos])
        if unit <= last_unit:
            self._fail(
                f"Text cannot be parsed to a Period: unexpected {self._text[self._pos]!r}",
                self._pos,
            )
        self._pos += 1
        return unit

    def _to_int(self, value: int, offset: int) -> int:
        try:
            return safe_to_int(value)
        except ArithmeticOverflowError as exc:
            self._fail(f"Text cannot be parsed to a Period: {exc}", offset, exc)

    def _fail(self, message: str, offset: int, cause: Exception | None = None) -> NoReturn:
        logger.debug("Failed to parse period %r at offset %d: %s", self._text, offset, message)
        raise ParseError(message, self._text, offset) from cause


def parse_period(text: str) -> Period:
    """Parse the canonical text form of a Period.

    Args:
        text: Text such as 'P1Y2M3DT4H5M6.7S'.

    Returns:
        The parsed Period.

    Raises:
        NullInputError: If text is None.
        ValidationError: If text is not a string.
        ParseError: If the text is malformed; ``offset`` holds the index
            of the problem.

    Examples:
        >>> parse_period("P1Y2M3DT4H5M6.7S").seconds
        6
        >>> parse_period("PT0S")
        Period(years=0, months=0, days=0, nanos=0)
    """
    check_not_none(text, "text")
    if not isinstance(text, str):
        raise ValidationError(f"text must be a str, got {type(text).__name__}")
    return PeriodParser(text).parse()


__all__ = ["format_period", "format_components", "parse_period", "PeriodParser"]
