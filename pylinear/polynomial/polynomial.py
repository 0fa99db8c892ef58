"""
Polynomial: a coefficient sequence over a Vector.

Element i of the storage is the coefficient of x^i. Trailing zero
coefficients are allowed; they make the reported degree larger but are
otherwise harmless.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from numpy.typing import ArrayLike

from pylinear.core.arithmetic import ArithmeticOperators, assign
from pylinear.core.precision import one_like, zero_like
from pylinear.core.tolerances import ToleranceTier
from pylinear.core.validation import check_1d, check_array, check_non_negative_int
from pylinear.polynomial._format import format_polynomial
from pylinear.vector import Vector


class Polynomial(ArithmeticOperators):
    """
    Univariate polynomial with coefficients from low to high degree.

    Construction:
        Polynomial([1, 2, 3])         # 1 + 2x + 3x^2
        Polynomial(vector)            # from a Vector
        Polynomial.from_array(arr)    # from a 1D numeric numpy array

    Operators:
        p + q, p - q     coefficient-wise (shorter side zero-extended)
        p * q, p *= q    convolution
        p * s, s * p     scale, p / s divide
        p ** n           repeated multiplication
        p(x)             evaluation
    """

    def __init__(self, coefficients: Iterable[Any] = ()):
        self._coefficients = Vector(coefficients)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Polynomial:
        """Build a Polynomial from a 1D numeric array of coefficients."""
        arr = check_array(array, 'array')
        check_1d(arr, 'array')
        return cls(arr.tolist())

    # === NumericContainer protocol ===

    @property
    def storage(self) -> Vector:
        return self._coefficients

    def copy(self) -> Polynomial:
        return Polynomial(self._coefficients)

    def check_compatible(self, other: Any) -> None:
        # Coefficient sequences of any length combine.
        return None

    # === Coefficients ===

    @property
    def coefficients(self) -> list[Any]:
        """Coefficients from low to high degree, as a new list."""
        return self._coefficients.tolist()

    def degree(self) -> int:
        """
        Highest stored power: len() - 1.

        The empty polynomial reports -1. Trailing zeros are counted.
        """
        return len(self._coefficients) - 1

    def length(self) -> int:
        return len(self._coefficients)

    def __len__(self) -> int:
        return len(self._coefficients)

    def resize(self, new_length: int) -> None:
        """Grow the coefficient sequence with zeros; never shrinks."""
        self._coefficients.resize(new_length)

    def __getitem__(self, index: int) -> Any:
        return self._coefficients[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._coefficients[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._coefficients)

    # === Algebra ===

    def __call__(self, point: Any) -> Any:
        """
        Evaluate at point.

        Accumulates coefficient[i] * point**i, building the power one
        multiplication at a time. The accumulator starts in point's type, so
        evaluating integer coefficients at a float gives a float.
        """
        total = zero_like(point)
        power_of_point = one_like(point)
        for coefficient in self._coefficients:
            total = total + power_of_point * coefficient
            power_of_point = power_of_point * point
        return total

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return convolve(self, other)
        return super().__mul__(other)

    def __imul__(self, other):
        if isinstance(other, Polynomial):
            self._coefficients = convolve(self, other)._coefficients
            return self
        return super().__imul__(other)

    def __pow__(self, exponent: int) -> Polynomial:
        return power(self, exponent)

    def derivative(self, order: int = 1) -> Polynomial:
        """Derivative of the given order; see pylinear.polynomial.derivative."""
        return derivative(self, order)

    # === In-place assignment ===

    def assign(self, other: Polynomial) -> Polynomial:
        """
        Copy other's coefficients over this polynomial's and return self.

        Follows the container resize policy: grows if needed, never shrinks.
        """
        return assign(self, other)

    # === Comparison ===

    def __bool__(self) -> bool:
        """False iff every coefficient equals zero."""
        return bool(self._coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    __hash__ = None  # mutable

    def allclose(self, other: Polynomial, tolerance: ToleranceTier | None = None) -> bool:
        """Coefficient-wise comparison within a tolerance tier."""
        return self._coefficients.allclose(other._coefficients, tolerance)

    # === Rendering ===

    def __str__(self) -> str:
        return format_polynomial(self._coefficients.tolist())

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients.tolist()!r})"


def convolve(lhs: Polynomial, rhs: Polynomial) -> Polynomial:
    """
    Polynomial product by convolution of the coefficient sequences.

    The result has lhs.degree() + rhs.degree() + 1 coefficients (none when
    that is negative), with result[i + j] += lhs[i] * rhs[j].
    """
    product = Polynomial()
    product.resize(lhs.degree() + rhs.degree() + 1)

    for i, a in enumerate(lhs):
        for j, b in enumerate(rhs):
            product[i + j] = product[i + j] + a * b

    return product


def power(polynomial: Polynomial, exponent: int) -> Polynomial:
    """
    Raise a polynomial to a non-negative integer power.

    Multiplies exponent times, starting from the constant polynomial [1].

    Raises:
        ValidationError: If exponent is not a non-negative integer
    """
    exponent = check_non_negative_int(exponent, 'exponent')

    result = Polynomial([1])
    for _ in range(exponent):
        result *= polynomial
    return result


def derivative(polynomial: Polynomial, order: int = 1) -> Polynomial:
    """
    Differentiate a polynomial order times.

    The zero (or empty) polynomial is returned unchanged. Otherwise each
    step produces len - 1 coefficients with result[i] = c[i + 1] * (i + 1),
    so a constant differentiates to the empty polynomial.

    Args:
        polynomial: Polynomial to differentiate (not modified)
        order: Number of times to differentiate; 0 returns a copy

    Returns:
        New Polynomial

    Raises:
        ValidationError: If order is not a non-negative integer
    """
    order = check_non_negative_int(order, 'order')
    if order == 0 or not polynomial:
        return polynomial.copy()

    result = Polynomial(
        polynomial[i + 1] * (i + 1) for i in range(len(polynomial) - 1)
    )
    if order == 1:
        return result
    return derivative(result, order - 1)
