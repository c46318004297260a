"""ValueRange describing the legal values of a calendar field.

A range has four points: the absolute minimum, the largest minimum,
the smallest maximum and the absolute maximum. Day-of-month in ISO, for
example, is 1 - 28/31: it always starts at 1 but ends anywhere between
28 and 31 depending on the month. A range whose two minimums and two
maximums coincide is fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoperiod._internal.constants import INT_MAX, INT_MIN
from chronoperiod.errors import ValidationError

if TYPE_CHECKING:
    from chronoperiod.units.field import Field


class ValueRange:
    """The range of valid values for a field.

    Attributes:
        minimum: The smallest value any instance can hold.
        largest_minimum: The largest of the per-instance minimums.
        smallest_maximum: The smallest of the per-instance maximums.
        maximum: The largest value any instance can hold.

    Examples:
        >>> ValueRange(1, 12).is_fixed()
        True
        >>> ValueRange(1, 31, smallest_maximum=28)
        ValueRange(1, 31, largest_minimum=1, smallest_maximum=28)
        >>> str(ValueRange(1, 31, smallest_maximum=28))
        '1 - 28/31'
    """

    __slots__ = ("_minimum", "_largest_minimum", "_smallest_maximum", "_maximum")

    def __init__(
        self,
        minimum: int,
        maximum: int,
        *,
        largest_minimum: int | None = None,
        smallest_maximum: int | None = None,
    ) -> None:
        """Create a range.

        Args:
            minimum: The absolute minimum.
            maximum: The absolute maximum.
            largest_minimum: The largest minimum, defaulting to minimum.
            smallest_maximum: The smallest maximum, defaulting to maximum.

        Raises:
            ValidationError: If the four points are not in order.
        """
        if largest_minimum is None:
            largest_minimum = minimum
        if smallest_maximum is None:
            smallest_maximum = maximum
        if minimum > largest_minimum:
            raise ValidationError("smallest minimum value must be less than largest minimum value")
        if smallest_maximum > maximum:
            raise ValidationError("smallest maximum value must be less than largest maximum value")
        if largest_minimum > maximum:
            raise ValidationError("minimum value must be less than maximum value")
        self._minimum = minimum
        self._largest_minimum = largest_minimum
        self._smallest_maximum = smallest_maximum
        self._maximum = maximum

    @property
    def minimum(self) -> int:
        return self._minimum

    @property
    def largest_minimum(self) -> int:
        return self._largest_minimum

    @property
    def smallest_maximum(self) -> int:
        return self._smallest_maximum

    @property
    def maximum(self) -> int:
        return self._maximum

    def is_fixed(self) -> bool:
        """Return True if every instance shares the same minimum and maximum."""
        return (
            self._minimum == self._largest_minimum
            and self._smallest_maximum == self._maximum
        )

    def is_int_value(self) -> bool:
        """Return True if every value in the range fits in 32 bits."""
        return self._minimum >= INT_MIN and self._maximum <= INT_MAX

    def is_valid_value(self, value: int) -> bool:
        """Return True if value lies within the absolute minimum and maximum."""
        return self._minimum <= value <= self._maximum

    def check_valid_value(self, value: int, field: Field | str) -> int:
        """Return value unchanged, raising if it is outside the range.

        Args:
            value: The value to check.
            field: The field the value belongs to, used in the message.

        Returns:
            The value.

        Raises:
            ValidationError: If the value is outside the range.
        """
        if not self.is_valid_value(value):
            name = getattr(field, "name", field)
            raise ValidationError(f"Invalid value for {name}: {value} (valid values {self})")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return (
            self._minimum == other._minimum
            and self._largest_minimum == other._largest_minimum
            and self._smallest_maximum == other._smallest_maximum
            and self._maximum == other._maximum
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(
            (self._minimum, self._largest_minimum, self._smallest_maximum, self._maximum)
        )

    def __repr__(self) -> str:
        return (
            f"ValueRange({self._minimum}, {self._maximum}, "
            f"largest_minimum={self._largest_minimum}, "
            f"smallest_maximum={self._smallest_maximum})"
        )

    def __str__(self) -> str:
        text = str(self._minimum)
        if self._minimum != self._largest_minimum:
            text += f"/{self._largest_minimum}"
        text += f" - {self._smallest_maximum}"
        if self._smallest_maximum != self._maximum:
            text += f"/{self._maximum}"
        return text


__all__ = ["ValueRange"]
