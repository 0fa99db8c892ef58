"""
Vector: the one-dimensional numeric container.

Vector owns a plain list of elements and is the storage every other
container composes. It satisfies the NumericContainer protocol by being its
own storage, and picks up + - * / from ArithmeticOperators.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.arithmetic import ArithmeticOperators, assign
from pylinear.core.precision import is_close, is_zero, zero_for
from pylinear.core.tolerances import ToleranceTier, select_tolerance
from pylinear.core.validation import check_1d, check_array, check_non_negative_int


class Vector(ArithmeticOperators):
    """
    Ordered, resizable sequence of numeric elements.

    Element order is the coordinate order. The length only ever grows:
    resize() ignores requests to shrink, and element-wise arithmetic with a
    longer operand pads with zeros first.

    Construction:
        Vector([1, 2, 3])            # from any iterable
        Vector.zeros(3)              # [0, 0, 0]
        Vector.zeros(3, float)       # [0.0, 0.0, 0.0]
        Vector.from_array(ndarray)   # from a 1D numeric numpy array
        v.copy()

    Indexing is unchecked beyond what a Python list does: an index past the
    end raises IndexError, negative indices count from the end.
    """

    def __init__(self, values: Iterable[Any] = ()):
        self._values: list[Any] = list(values)

    @classmethod
    def zeros(cls, length: int, element_type: type = int) -> Vector:
        """Zero-filled vector of the given length."""
        length = check_non_negative_int(length, 'length')
        return cls(element_type(0) for _ in range(length))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        """
        Build a Vector from a 1D numeric array.

        Elements are converted to Python scalars (int stays int, float
        stays float), so integer input keeps exact arithmetic.

        Raises:
            ValidationError: If array is not numeric
            DimensionError: If array is not 1D
        """
        arr = check_array(array, 'array')
        check_1d(arr, 'array')
        return cls(arr.tolist())

    # === NumericContainer protocol ===

    @property
    def storage(self) -> Vector:
        return self

    def copy(self) -> Vector:
        return Vector(self._values)

    def check_compatible(self, other: Any) -> None:
        # Any length combines; the shorter side is zero-extended.
        return None

    # === Size ===

    def length(self) -> int:
        """Number of elements."""
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def resize(self, new_length: int) -> None:
        """
        Grow to new_length by appending zeros.

        Does nothing if new_length <= length(). Shrinking is never
        performed; callers that need a shorter vector must build one.
        """
        padding = zero_for(self._values)
        while new_length > len(self._values):
            self._values.append(padding)

    # === Element access ===

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._values[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def tolist(self) -> list[Any]:
        """Elements as a new list."""
        return list(self._values)

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """Elements as a 1D numpy array."""
        return np.asarray(self._values, dtype=dtype)

    # === Comparison ===

    def __bool__(self) -> bool:
        """False iff every element equals zero."""
        return not all(is_zero(value) for value in self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # mutable

    def allclose(self, other: Vector, tolerance: ToleranceTier | None = None) -> bool:
        """
        Element-wise comparison within a tolerance tier.

        Vectors of different length are never close. With no tolerance
        given, the tier is picked from the element type.
        """
        if len(self) != len(other):
            return False
        if tolerance is None:
            if len(self) == 0:
                return True
            tolerance = select_tolerance(type(self._values[0]))
        return all(is_close(a, b, tolerance) for a, b in zip(self._values, other._values))

    # === In-place assignment ===

    def assign(self, other: Vector) -> Vector:
        """
        Copy other's elements over this vector's and return self.

        The vector grows to other's length if needed, but never shrinks.
        """
        return assign(self, other)

    # === Rendering ===

    def __str__(self) -> str:
        return '< ' + ', '.join(str(value) for value in self._values) + ' >'

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"
