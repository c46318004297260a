"""Regional calendar systems.

This module provides the Chronology registry and the ISO, Minguo, Thai
Buddhist and Japanese calendars.
"""

from __future__ import annotations

from chronoperiod.chrono.chrono_date import ChronoDate
from chronoperiod.chrono.chronology import (
    ISO,
    MINGUO,
    THAI_BUDDHIST,
    Chronology,
    IsoChronology,
    OffsetChronology,
)
from chronoperiod.chrono.japanese import JAPANESE, JapaneseChronology, JapaneseEra

__all__ = [
    "Chronology",
    "IsoChronology",
    "OffsetChronology",
    "JapaneseChronology",
    "JapaneseEra",
    "ChronoDate",
    "ISO",
    "MINGUO",
    "THAI_BUDDHIST",
    "JAPANESE",
]
