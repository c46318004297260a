"""Internal constants for chronoperiod.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Signed integer limits emulated by the checked arithmetic
INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1
LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_HALF_DAY: int = 12 * NANOS_PER_HOUR
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MONTHS_PER_YEAR: int = 12

# Year limits of the ISO calendar
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days from 0000-03-01 to 1970-01-01
DAYS_0000_TO_1970: int = 719_468
DAYS_PER_CYCLE: int = 146_097  # 400 Gregorian years

EPOCH_YEAR: int = 1970

# Regional calendar year offsets from the ISO year
MINGUO_YEARS_DIFFERENCE: int = 1911
THAI_BUDDHIST_YEARS_DIFFERENCE: int = 543

# Japanese era start dates as (year, month, day), oldest first
JAPANESE_ERA_SINCE: tuple[tuple[int, int, int], ...] = (
    (1868, 1, 1),    # Meiji
    (1912, 7, 30),   # Taisho
    (1926, 12, 25),  # Showa
    (1989, 1, 8),    # Heisei
    (2019, 5, 1),    # Reiwa
)


__all__ = [
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_HALF_DAY",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MONTHS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_0000_TO_1970",
    "DAYS_PER_CYCLE",
    "EPOCH_YEAR",
    "MINGUO_YEARS_DIFFERENCE",
    "THAI_BUDDHIST_YEARS_DIFFERENCE",
    "JAPANESE_ERA_SINCE",
]
