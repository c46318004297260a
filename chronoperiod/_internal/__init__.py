"""Internal utilities for chronoperiod.

This module contains private implementation details:
    - Overflow-checked integer arithmetic
    - Argument validation helpers
    - Constants and magic numbers
    - ISO calendar conversions

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronoperiod._internal.safe_math import (
    floor_div,
    floor_mod,
    safe_add,
    safe_multiply,
    safe_subtract,
    safe_to_int,
)
from chronoperiod._internal.validation import (
    check_not_none,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "check_not_none",
    "floor_div",
    "floor_mod",
    "safe_add",
    "safe_multiply",
    "safe_subtract",
    "safe_to_int",
    "validate_day",
    "validate_month",
    "validate_year",
]
