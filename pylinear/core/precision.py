"""
Element-level numeric helpers.

Containers never know their element type up front, so every decision that
depends on it (is this integral? what is its zero?) is made here, from the
values themselves. The only assumptions on an element type are the ones the
containers document: + - * /, comparison to zero, and construction from an
integer literal.
"""

from __future__ import annotations

import math
import numbers
import operator
from typing import Any, Sequence

from pylinear.core.tolerances import DEFAULT_TOLERANCE, ToleranceTier


def is_integral(value: Any) -> bool:
    """
    Check if value belongs to an integral type.

    Python ints and numpy integer scalars both register as
    numbers.Integral. bool does too, and is treated as an integer.
    """
    return isinstance(value, numbers.Integral)


def is_zero(value: Any) -> bool:
    """Check if value compares equal to the literal zero."""
    return value == 0


def zero_like(sample: Any) -> Any:
    """
    Additive identity of sample's type.

    Args:
        sample: Any element of the target type

    Returns:
        type(sample)(0)
    """
    return type(sample)(0)


def one_like(sample: Any) -> Any:
    """Multiplicative identity of sample's type."""
    return type(sample)(1)


def zero_for(values: Sequence[Any]) -> Any:
    """
    Padding value for a sequence of elements.

    Uses the type of the first element so a float sequence is padded with
    0.0 and a Fraction sequence with Fraction(0). Empty sequences fall back
    to the integer 0.
    """
    if len(values) == 0:
        return 0
    return zero_like(values[0])


def integral_gcd(a: Any, b: Any) -> int:
    """
    Greatest common divisor of two integral values.

    Always non-negative. Works for numpy integer scalars through __index__.
    """
    return math.gcd(int(a), int(b))


def exact_divide(value: Any, divisor: Any) -> Any:
    """
    Divide, keeping integers integral whenever the division is exact.

    Integral operands that divide evenly return the integer quotient.
    Everything else uses the element type's own true division, so a zero
    divisor raises whatever that type raises.

    Args:
        value: Dividend
        divisor: Divisor

    Returns:
        value / divisor, as an integer when both are integral and the
        remainder is zero
    """
    if is_integral(value) and is_integral(divisor):
        quotient, remainder = divmod(value, divisor)
        if remainder == 0:
            return quotient
    return value / divisor


def widen_integral(value: Any) -> Any:
    """
    Convert a fixed-width integer (e.g. numpy.int64) to a Python int.

    Fraction-free elimination lets intermediate entries grow far beyond
    64 bits, which fixed-width integers would silently wrap. Python ints
    and non-integral values are returned as they are.
    """
    if is_integral(value) and type(value) is not int:
        return operator.index(value)
    return value


def divides_exactly(value: Any, divisor: Any) -> bool:
    """Check if integral value is an exact multiple of integral divisor."""
    return value % divisor == 0


def normalize_zero(value: Any) -> Any:
    """
    Replace a signed zero by the positive zero of the same type.

    Floating and complex types can produce -0.0 parts during elimination.
    Nonzero values pass through unchanged.
    """
    if value == 0:
        return type(value)(0)
    return value


def is_close(a: Any, b: Any, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
    """
    Check if two elements are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|. A zero tier (EXACT)
    compares with == instead, so exact types such as Decimal never meet a
    float tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance tier to apply

    Returns:
        True if the values are within tolerance
    """
    if tolerance.rtol == 0 and tolerance.atol == 0:
        return a == b
    return abs(a - b) <= tolerance.atol + tolerance.rtol * abs(b)
