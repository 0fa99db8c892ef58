"""
Core protocols for PyLinear.

These define structural interfaces that every container must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so the
generic arithmetic in pylinear.core.arithmetic can accept any type that
provides the capability, while still returning the caller's concrete type.

Design Principles:
    - Minimal contracts: prescribe only what the arithmetic needs
    - Composition: containers expose their backing storage, not a base class
    - Type-safe: use a bounded TypeVar to preserve the concrete type
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pylinear.vector.vector import Vector


@runtime_checkable
class NumericContainer(Protocol):
    """
    Minimal protocol for any container that takes part in element-wise arithmetic.

    Vector, Matrix and Polynomial implement this protocol. The generic
    primitives (add, subtract, multiply, divide) only ever touch a container
    through these three members, which is what lets a Matrix or Polynomial
    inherit arithmetic without re-implementing it.
    """

    @property
    def storage(self) -> Vector:
        """
        Flat backing storage of the container.

        A Vector returns itself. Composite containers return the Vector they
        own; mutating it mutates the container.
        """
        ...

    def copy(self) -> Any:
        """Return an independent copy of the same concrete type."""
        ...

    def check_compatible(self, other: Any) -> None:
        """
        Verify that other can be combined element-wise with this container.

        Args:
            other: The second operand of an element-wise operation

        Raises:
            DimensionError: If the operands cannot be combined. Containers
                with a permissive (resizing) policy never raise.
        """
        ...


C = TypeVar('C', bound=NumericContainer)


def is_container(obj: object) -> bool:
    """Check whether obj satisfies the NumericContainer protocol."""
    return isinstance(obj, NumericContainer)
