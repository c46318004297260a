"""Duration class representing an exact span of time.

This module provides the Duration class, an exact amount of time held as
whole seconds plus a nanosecond-of-second adjustment. Unlike Period it
has no calendar units.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoperiod._internal.constants import (
    LONG_MAX,
    LONG_MIN,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from chronoperiod._internal.safe_math import safe_add, safe_multiply
from chronoperiod.errors import ArithmeticOverflowError, UnsupportedUnitError

if TYPE_CHECKING:
    from chronoperiod.units.period_unit import PeriodUnit


class Duration:
    """An exact span of time with nanosecond precision.

    Duration can be positive, negative, or zero. It is stored as a whole
    number of seconds (rounded toward negative infinity) and a
    nanosecond-of-second in the range [0, 1_000_000_000), so -0.5 seconds
    is held as seconds=-1, nano=500_000_000.

    Attributes:
        seconds: Whole seconds, within the 64-bit range.
        nano: Nanoseconds within the second [0, 1e9).

    Examples:
        >>> d = Duration(seconds=90)
        >>> d.seconds
        90

        >>> d = Duration.of_seconds(3, -1)
        >>> d.seconds, d.nano
        (2, 999999999)

        >>> from chronoperiod.units.period_unit import PeriodUnit
        >>> str(Duration.of(25, PeriodUnit.HOURS))
        'PT25H'
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(
        self,
        days: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero. The resulting
        duration is normalized to canonical form.

        Args:
            days: Number of 24-hour days.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            microseconds: Number of microseconds.
            nanoseconds: Number of nanoseconds.

        Raises:
            ArithmeticOverflowError: If the total seconds exceed 64 bits.

        Examples:
            >>> Duration(days=1)
            Duration(seconds=86400, nanos=0)

            >>> Duration(milliseconds=1500)  # 1.5 seconds
            Duration(seconds=1, nanos=500000000)
        """
        total_nanos = (
            nanoseconds
            + microseconds * NANOS_PER_MICROSECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + (seconds + days * SECONDS_PER_DAY) * NANOS_PER_SECOND
        )
        whole_seconds, nanos = divmod(total_nanos, NANOS_PER_SECOND)
        if whole_seconds < LONG_MIN or whole_seconds > LONG_MAX:
            raise ArithmeticOverflowError(f"Duration exceeds a long of seconds: {whole_seconds}")
        self._seconds = whole_seconds
        self._nanos = nanos

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return _ZERO

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration from seconds and a nanosecond adjustment.

        The adjustment may be any value, positive or negative; it is
        folded into the seconds.

        Args:
            seconds: Number of seconds.
            nano_adjustment: Nanoseconds to add to the seconds.

        Returns:
            The duration.

        Raises:
            ArithmeticOverflowError: If the result exceeds the supported range.

        Examples:
            >>> Duration.of_seconds(3, 1_000_000_001)
            Duration(seconds=4, nanos=1)
        """
        return cls(seconds=seconds, nanoseconds=nano_adjustment)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls(nanoseconds=nanos)

    @classmethod
    def of(cls, amount: int, unit: PeriodUnit) -> Duration:
        """Create a Duration of an amount of a unit.

        Units with an estimated duration are rejected, except DAYS which
        counts as exactly 24 hours here.

        Raises:
            UnsupportedUnitError: For MONTHS, YEARS and other estimated units.

        Examples:
            >>> from chronoperiod.units.period_unit import PeriodUnit
            >>> Duration.of(90, PeriodUnit.MINUTES)
            Duration(seconds=5400, nanos=0)
        """
        from chronoperiod.units.period_unit import PeriodUnit

        if unit.is_duration_estimated and unit is not PeriodUnit.DAYS:
            raise UnsupportedUnitError(f"Unit must not have an estimated duration: {unit.value}")
        unit_seconds, unit_nanos = unit.duration_seconds
        if unit_nanos == 0:
            return cls.of_seconds(safe_multiply(amount, unit_seconds))
        return cls.of_nanos(
            safe_multiply(amount, unit_seconds * NANOS_PER_SECOND + unit_nanos)
        )

    @property
    def seconds(self) -> int:
        """Return the whole seconds, rounded toward negative infinity."""
        return self._seconds

    @property
    def nano(self) -> int:
        """Return the nanoseconds within the second [0, 1e9)."""
        return self._nanos

    @property
    def total_nanoseconds(self) -> int:
        """Return the total duration in nanoseconds (exact, unbounded).

        Examples:
            >>> Duration(seconds=1, nanoseconds=500).total_nanoseconds
            1000000500
        """
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def to_nanos(self) -> int:
        """Return the total duration in nanoseconds as a 64-bit value.

        Raises:
            ArithmeticOverflowError: If the total does not fit in 64 bits.
        """
        return safe_add(safe_multiply(self._seconds, NANOS_PER_SECOND), self._nanos)

    @property
    def is_negative(self) -> bool:
        return self._seconds < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration.

        Examples:
            >>> Duration.zero().is_zero
            True
            >>> Duration(nanoseconds=1).is_zero
            False
        """
        return self._seconds == 0 and self._nanos == 0

    def plus(self, other: Duration) -> Duration:
        return Duration.of_seconds(safe_add(self._seconds, other._seconds), self._nanos + other._nanos)

    def __add__(self, other: object) -> Duration:
        """Add two durations.

        Examples:
            >>> Duration(seconds=30) + Duration(seconds=45)
            Duration(seconds=75, nanos=0)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Duration:
        """Subtract one duration from another."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(-other)

    def __mul__(self, other: object) -> Duration:
        """Multiply by an integer scalar."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration.of_nanos(self.total_nanoseconds * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return Duration.of_nanos(-self.total_nanoseconds)

    def __abs__(self) -> Duration:
        return -self if self.is_negative else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds < other.total_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds <= other.total_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds > other.total_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds >= other.total_nanoseconds

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"

    def __str__(self) -> str:
        """Return the ISO 8601 form, e.g. 'PT8H6M12.345S'."""
        from chronoperiod.format.period_text import format_components

        return format_components(0, 0, 0, self.total_nanoseconds)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero


_ZERO = Duration()


__all__ = ["Duration"]
