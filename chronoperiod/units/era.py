"""Era enumerations for the ISO, Minguo and Thai Buddhist calendars.

Each calendar with two eras numbers them 0 (before) and 1 (current),
matching the value of Field.ERA. The Japanese eras live with the
Japanese chronology because they carry start dates.
"""

from __future__ import annotations

from enum import Enum

from chronoperiod.errors import ValidationError


class IsoEra(Enum):
    """Historical era designation for the ISO calendar.

    Year 0 exists (astronomical convention) and is considered BCE.

    Examples:
        >>> IsoEra.CE.is_before_common_era
        False
        >>> IsoEra.of(0)
        <IsoEra.BCE: 0>
    """

    BCE = 0  # Before Common Era
    CE = 1  # Common Era

    @classmethod
    def of(cls, value: int) -> IsoEra:
        """Return the era with the given Field.ERA value.

        Raises:
            ValidationError: If no era has that value.
        """
        return _lookup(cls, value)

    @property
    def is_before_common_era(self) -> bool:
        return self is IsoEra.BCE


class MinguoEra(Enum):
    """Eras of the Minguo (Republic of China) calendar.

    ROC year 1 is ISO year 1912.
    """

    BEFORE_ROC = 0
    ROC = 1

    @classmethod
    def of(cls, value: int) -> MinguoEra:
        return _lookup(cls, value)


class ThaiBuddhistEra(Enum):
    """Eras of the Thai Buddhist calendar.

    BE year 1 is ISO year -542.
    """

    BEFORE_BE = 0
    BE = 1

    @classmethod
    def of(cls, value: int) -> ThaiBuddhistEra:
        return _lookup(cls, value)


def _lookup(era_type: type[Enum], value: int):
    try:
        return era_type(value)
    except ValueError:
        raise ValidationError(f"Invalid era for {era_type.__name__}: {value}") from None


__all__ = ["IsoEra", "MinguoEra", "ThaiBuddhistEra"]
