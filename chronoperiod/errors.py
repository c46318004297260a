"""Chronoperiod exception hierarchy.

All chronoperiod-specific exceptions inherit from ChronoPeriodError. Each
kind also derives from the closest builtin exception so that callers who
only know about ValueError or ArithmeticError still catch them.
"""

from __future__ import annotations


class ChronoPeriodError(Exception):
    """Base exception for all chronoperiod errors."""

    pass


class ValidationError(ChronoPeriodError, ValueError):
    """Invalid input values.

    Raised when a calendar component is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Japanese year-of-era that does not exist in the era
    """

    pass


class ParseError(ChronoPeriodError, ValueError):
    """Failed to parse string representation.

    Carries the text being parsed and the zero-based offset at which
    the problem was detected.

    Examples:
        - "P" with no components
        - "PT1.1234567890S" (more than nine fraction digits)
        - "P1D2Y" (components out of order)
    """

    def __init__(self, message: str, parsed_text: str = "", offset: int = 0) -> None:
        super().__init__(message)
        self.parsed_text = parsed_text
        self.offset = offset


class ArithmeticOverflowError(ChronoPeriodError, ArithmeticError):
    """Arithmetic operation exceeded representable range.

    Raised when a checked integer operation leaves the 32-bit or 64-bit
    signed range of its operands.

    Examples:
        - Adding one year to a period of 2**31 - 1 years
        - Negating the minimum 64-bit value
        - Converting 2**31 to a 32-bit field
    """

    pass


class UnsupportedUnitError(ChronoPeriodError, ValueError):
    """Unit has no exact conversion for the requested operation.

    Examples:
        - Period.of_single_unit(1, PeriodUnit.WEEKS)
        - Time.plus(1, PeriodUnit.DAYS)
    """

    pass


class UnsupportedFieldError(ChronoPeriodError, ValueError):
    """Field has no meaning for the queried value.

    Examples:
        - Date.get(Field.NANO_OF_DAY)
        - Month.get(Field.YEAR)
    """

    pass


class ChronologyMismatchError(ChronoPeriodError, ValueError):
    """Two values from different calendar systems were combined.

    Examples:
        - between() on an ISO date and a Minguo date
    """

    pass


class NoValidFieldsError(ChronoPeriodError, ValueError):
    """None of the fields needed for a calculation is supported.

    Examples:
        - between() on values supporting none of YEAR, MONTH_OF_YEAR,
          DAY_OF_MONTH or NANO_OF_DAY
    """

    pass


class HasCalendarUnitsError(ChronoPeriodError, ValueError):
    """Period with years, months or days cannot become an exact duration.

    Examples:
        - Period.of_months(1).to_duration()
    """

    pass


class NullInputError(ChronoPeriodError, TypeError):
    """Required argument was None.

    Examples:
        - Period.parse(None)
        - Period.of_duration(None)
    """

    pass


__all__ = [
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
]
