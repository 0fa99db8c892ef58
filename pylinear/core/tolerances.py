"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the element types containers usually
hold:
- Exact types (int, Fraction, Decimal): no tolerance at all
- float64: close to machine precision
- float32: relaxed for single-precision arithmetic

Used by the allclose() methods on every container and by the test suite.
"""

import numbers
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact element types: equality only
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic: values must be equal',
)

# Double precision elements (float, numpy.float64)
FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision: agreement to roughly ten digits',
)

# Single precision elements (numpy.float32)
FLOAT32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='float32',
    description='Single precision: agreement to roughly four digits',
)

DEFAULT_TOLERANCE = FLOAT64


def select_tolerance(element_type: type) -> ToleranceTier:
    """Select appropriate tolerance tier for an element type."""
    if issubclass(element_type, (numbers.Integral, Fraction, Decimal)):
        return EXACT
    if getattr(element_type, '__name__', '') in ('float32', 'float16'):
        return FLOAT32
    return FLOAT64
