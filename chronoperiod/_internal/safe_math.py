"""Overflow-checked integer arithmetic.

Python integers never overflow, so the 32-bit ("int") and 64-bit
("long") fields used by periods and dates are emulated here: each
operation computes the exact result and raises ArithmeticOverflowError
if it leaves the signed range of the operand width. Nothing wraps.

Division helpers come in two flavors. floor_div/floor_mod round toward
negative infinity (Python's native // and %); truncate_div/truncate_mod
round toward zero so the remainder keeps the sign of the dividend.

This module is not part of the public API.
"""

from __future__ import annotations

from chronoperiod._internal.constants import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN
from chronoperiod.errors import ArithmeticOverflowError


def _check_long(result: int, description: str) -> int:
    if result < LONG_MIN or result > LONG_MAX:
        raise ArithmeticOverflowError(f"{description} overflows a long")
    return result


def _check_int(result: int, description: str) -> int:
    if result < INT_MIN or result > INT_MAX:
        raise ArithmeticOverflowError(f"{description} overflows an int")
    return result


def safe_add(a: int, b: int) -> int:
    """Add two 64-bit values, raising on overflow.

    Args:
        a: The first value.
        b: The second value.

    Returns:
        The sum.

    Raises:
        ArithmeticOverflowError: If the sum does not fit in 64 bits.

    Examples:
        >>> safe_add(2, 3)
        5
        >>> safe_add(2**63 - 1, 1)
        Traceback (most recent call last):
        ...
        chronoperiod.errors.ArithmeticOverflowError: Addition 9223372036854775807 + 1 overflows a long
    """
    return _check_long(a + b, f"Addition {a} + {b}")


def safe_add_int(a: int, b: int) -> int:
    """Add two 32-bit values, raising on overflow."""
    return _check_int(a + b, f"Addition {a} + {b}")


def safe_subtract(a: int, b: int) -> int:
    """Subtract two 64-bit values, raising on overflow.

    Examples:
        >>> safe_subtract(-(2**63), 1)
        Traceback (most recent call last):
        ...
        chronoperiod.errors.ArithmeticOverflowError: Subtraction -9223372036854775808 - 1 overflows a long
    """
    return _check_long(a - b, f"Subtraction {a} - {b}")


def safe_subtract_int(a: int, b: int) -> int:
    """Subtract two 32-bit values, raising on overflow."""
    return _check_int(a - b, f"Subtraction {a} - {b}")


def safe_multiply(a: int, b: int) -> int:
    """Multiply two 64-bit values, raising on overflow.

    The minimum value multiplied by -1 overflows, as does any product
    whose magnitude exceeds the 64-bit range.

    Examples:
        >>> safe_multiply(3_000_000_000, 1_000_000_000)
        3000000000000000000
        >>> safe_multiply(-(2**63), -1)
        Traceback (most recent call last):
        ...
        chronoperiod.errors.ArithmeticOverflowError: Multiplication -9223372036854775808 * -1 overflows a long
    """
    return _check_long(a * b, f"Multiplication {a} * {b}")


def safe_multiply_int(a: int, b: int) -> int:
    """Multiply two 32-bit values, raising on overflow."""
    return _check_int(a * b, f"Multiplication {a} * {b}")


def safe_negate(a: int) -> int:
    """Negate a 64-bit value; the minimum value cannot be negated."""
    if a == LONG_MIN:
        raise ArithmeticOverflowError(f"Negation of {a} overflows a long")
    return -a


def safe_negate_int(a: int) -> int:
    """Negate a 32-bit value; the minimum value cannot be negated."""
    if a == INT_MIN:
        raise ArithmeticOverflowError(f"Negation of {a} overflows an int")
    return -a


def safe_increment(a: int) -> int:
    """Add one to a 64-bit value, raising on overflow."""
    return safe_add(a, 1)


def safe_decrement(a: int) -> int:
    """Subtract one from a 64-bit value, raising on overflow."""
    return safe_subtract(a, 1)


def safe_to_int(value: int) -> int:
    """Narrow a 64-bit value to 32 bits.

    Raises:
        ArithmeticOverflowError: If the value is outside the 32-bit range.

    Examples:
        >>> safe_to_int(2**31 - 1)
        2147483647
        >>> safe_to_int(2**31)
        Traceback (most recent call last):
        ...
        chronoperiod.errors.ArithmeticOverflowError: Calculation overflows an int: 2147483648
    """
    if value < INT_MIN or value > INT_MAX:
        raise ArithmeticOverflowError(f"Calculation overflows an int: {value}")
    return value


def safe_compare(a: int, b: int) -> int:
    """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
    return (a > b) - (a < b)


def floor_div(a: int, b: int) -> int:
    """Divide rounding toward negative infinity.

    Examples:
        >>> floor_div(-1, 4)
        -1
        >>> floor_div(-4, 4)
        -1
        >>> floor_div(-5, 4)
        -2
    """
    return a // b


def floor_mod(a: int, b: int) -> int:
    """Remainder of floor_div, always with the sign of the divisor.

    Examples:
        >>> floor_mod(-1, 4)
        3
        >>> floor_mod(5, 4)
        1
    """
    return a % b


def truncate_div(a: int, b: int) -> int:
    """Divide rounding toward zero.

    Examples:
        >>> truncate_div(-7, 2)
        -3
        >>> truncate_div(7, 2)
        3
    """
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def truncate_mod(a: int, b: int) -> int:
    """Remainder of truncate_div, always with the sign of the dividend.

    Examples:
        >>> truncate_mod(-7, 2)
        -1
        >>> truncate_mod(7, -2)
        1
    """
    return a - b * truncate_div(a, b)


__all__ = [
    "safe_add",
    "safe_add_int",
    "safe_subtract",
    "safe_subtract_int",
    "safe_multiply",
    "safe_multiply_int",
    "safe_negate",
    "safe_negate_int",
    "safe_increment",
    "safe_decrement",
    "safe_to_int",
    "safe_compare",
    "floor_div",
    "floor_mod",
    "truncate_div",
    "truncate_mod",
]
