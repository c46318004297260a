"""Period arithmetic.

Between-calculations (from chronoperiod.arithmetic.between):
    - between: field-by-field Period between two values of one chronology
    - between_iso: calendar-exact Period between two ISO dates or times
    - units_between: whole units between two ISO dates

Period application (from chronoperiod.arithmetic.period_ops):
    - apply_period: add a Period to a date or time, years first
    - subtract_period: subtract a Period from a date or time
"""

from __future__ import annotations

from chronoperiod.arithmetic.between import between, between_iso, units_between
from chronoperiod.arithmetic.period_ops import apply_period, subtract_period

__all__ = [
    "between",
    "between_iso",
    "units_between",
    "apply_period",
    "subtract_period",
]
