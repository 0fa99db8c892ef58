"""
Polynomial module.

Public API:
    Polynomial              - coefficient sequence, low to high degree
    convolve(p, q)          - product (also p * q)
    power(p, n)             - p raised to n (also p ** n)
    derivative(p, order)    - repeated differentiation
    format_polynomial(c)    - descending-degree text rendering
"""

from pylinear.polynomial.polynomial import Polynomial, convolve, derivative, power
from pylinear.polynomial._format import format_polynomial

__all__ = [
    "Polynomial",
    "convolve",
    "power",
    "derivative",
    "format_polynomial",
]
