"""
Generic element-wise arithmetic for every NumericContainer.

The primitives here are plain functions generic over a TypeVar bound to the
NumericContainer protocol. Each one copies (or mutates) its container
operand and works through the container's flat storage, so the result is
always the operand's own concrete type: adding two matrices yields a
Matrix, scaling a polynomial yields a Polynomial.

Resize policy:
    add/subtract/assign grow the target to at least the length of the
    other operand before combining. Resize never shrinks, so a longer
    target keeps its tail untouched. Containers that cannot grow freely
    (Matrix) refuse incompatible operands in check_compatible() first.
"""

from __future__ import annotations

from typing import Any

from pylinear.core.protocols import C, is_container


# === Element-wise primitives ===

def add(lhs: C, rhs: C) -> C:
    """
    Element-wise sum.

    Args:
        lhs: Left operand; its copy becomes the result
        rhs: Right operand

    Returns:
        New container of lhs's type, at least as long as rhs

    Raises:
        DimensionError: If lhs refuses rhs as an operand
    """
    return add_into(lhs.copy(), rhs)


def subtract(lhs: C, rhs: C) -> C:
    """Element-wise difference, with the same resize policy as add()."""
    return subtract_into(lhs.copy(), rhs)


def multiply(lhs: Any, rhs: Any) -> Any:
    """
    Scale every element of a container by a non-container operand.

    Exactly one operand must be a container. The scalar keeps its side:
    multiply(v, s) computes element * s, multiply(s, v) computes s * element,
    which matters for element types whose product does not commute.

    Returns:
        New container of the container operand's type

    Raises:
        TypeError: If both or neither operand is a container
    """
    if is_container(lhs) and not is_container(rhs):
        return multiply_into(lhs.copy(), rhs)

    if is_container(rhs) and not is_container(lhs):
        result = rhs.copy()
        values = result.storage
        for i in range(len(values)):
            values[i] = lhs * values[i]
        return result

    raise TypeError(
        f"multiply() needs exactly one container operand, got "
        f"{type(lhs).__name__} and {type(rhs).__name__}"
    )


def divide(container: C, scalar: Any) -> C:
    """
    Divide every element by a non-container operand.

    Division by a zero scalar raises whatever the element type raises.
    """
    return divide_into(container.copy(), scalar)


# === In-place variants (back the compound operators) ===

def add_into(target: C, other: C) -> C:
    """Add other into target in place and return target."""
    target.check_compatible(other)
    values = target.storage
    operand = other.storage
    values.resize(len(operand))
    for i in range(len(operand)):
        values[i] = values[i] + operand[i]
    return target


def subtract_into(target: C, other: C) -> C:
    """Subtract other from target in place and return target."""
    target.check_compatible(other)
    values = target.storage
    operand = other.storage
    values.resize(len(operand))
    for i in range(len(operand)):
        values[i] = values[i] - operand[i]
    return target


def multiply_into(target: C, scalar: Any) -> C:
    """Scale target in place and return it."""
    values = target.storage
    for i in range(len(values)):
        values[i] = values[i] * scalar
    return target


def divide_into(target: C, scalar: Any) -> C:
    """Divide target in place and return it."""
    values = target.storage
    for i in range(len(values)):
        values[i] = values[i] / scalar
    return target


def assign(target: C, source: C) -> C:
    """
    Copy source's elements over target's, in place.

    target grows to source's length if needed but never shrinks; elements
    past the end of source are left as they were.
    """
    target.check_compatible(source)
    values = target.storage
    operand = source.storage
    values.resize(len(operand))
    for i in range(len(operand)):
        values[i] = operand[i]
    return target


class ArithmeticOperators:
    """
    Operator wiring for NumericContainer types.

    Mix into a container class to route + - * / and their in-place forms to
    the generic primitives above. The mixin holds no state; the container
    keeps owning its storage.

    + and - accept only another container of the same concrete type.
    * and / accept only non-container scalars. Every other combination
    returns NotImplemented so Python raises TypeError (or tries the other
    operand's reflected method).
    """

    # Keep numpy scalars from broadcasting over containers: with this set,
    # numpy defers to our reflected operators.
    __array_ufunc__ = None

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        if is_container(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        if is_container(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        if is_container(other):
            return NotImplemented
        return divide(self, other)

    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return add_into(self, other)

    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return subtract_into(self, other)

    def __imul__(self, other):
        if is_container(other):
            return NotImplemented
        return multiply_into(self, other)

    def __itruediv__(self, other):
        if is_container(other):
            return NotImplemented
        return divide_into(self, other)
