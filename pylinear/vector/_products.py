"""
Vector products.

dot() zero-extends the shorter operand, following the resize policy of the
rest of the container arithmetic. cross() is only defined in three
dimensions and refuses anything else.
"""

from __future__ import annotations

from typing import Any

from pylinear.core.exceptions import DimensionError
from pylinear.vector.vector import Vector


def dot(first: Vector, second: Vector) -> Any:
    """
    Dot product of two vectors.

    Missing trailing elements of the shorter vector count as zero, so only
    the overlapping prefix contributes. Two empty vectors give 0.

    Args:
        first: Left operand
        second: Right operand

    Returns:
        Sum of element-wise products, in the element type
    """
    total = 0
    for a, b in zip(first, second):
        total = total + a * b
    return total


def cross(lhs: Vector, rhs: Vector) -> Vector:
    """
    Cross product of two 3-dimensional vectors.

    Raises:
        DimensionError: If either operand does not have exactly 3 elements
    """
    if len(lhs) != 3 or len(rhs) != 3:
        raise DimensionError(
            f"Cross product is only defined for 3-dimensional vectors, "
            f"got lengths {len(lhs)} and {len(rhs)}",
            expected=3,
            actual=(len(lhs), len(rhs)),
        )

    return Vector([
        lhs[1] * rhs[2] - lhs[2] * rhs[1],
        lhs[2] * rhs[0] - lhs[0] * rhs[2],
        lhs[0] * rhs[1] - lhs[1] * rhs[0],
    ])
