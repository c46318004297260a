"""Calendar units, fields and enumerations.

This module provides:
    - Field: The closed set of calendar and clock fields
    - ValueRange: Legal values of a field
    - PeriodUnit: Units for period and date arithmetic
    - Month: The twelve ISO months
    - IsoEra, MinguoEra, ThaiBuddhistEra: Era designations
"""

from __future__ import annotations

from chronoperiod.units.era import IsoEra, MinguoEra, ThaiBuddhistEra
from chronoperiod.units.field import CalendarAccessor, Field
from chronoperiod.units.month import Month
from chronoperiod.units.period_unit import PeriodUnit
from chronoperiod.units.value_range import ValueRange

__all__: list[str] = [
    "CalendarAccessor",
    "Field",
    "IsoEra",
    "MinguoEra",
    "Month",
    "PeriodUnit",
    "ThaiBuddhistEra",
    "ValueRange",
]
