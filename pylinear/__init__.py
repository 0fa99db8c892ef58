"""
PyLinear: generic linear algebra over any number-like element type.

Containers hold plain Python (or numpy) scalars, so integers stay exact,
Fractions stay rational and floats behave as floats. Integer matrices are
row-reduced without ever leaving the integers.

Submodules:
    vector: one-dimensional container, dot and cross products
    matrix: dense matrices, products, reduced row echelon form
    polynomial: coefficient-sequence polynomials
"""

__version__ = "0.1.0"

from pylinear import vector
from pylinear import matrix
from pylinear import polynomial
from pylinear.vector import Vector
from pylinear.matrix import Matrix
from pylinear.polynomial import Polynomial

__all__ = [
    "__version__",
    "vector",
    "matrix",
    "polynomial",
    "Vector",
    "Matrix",
    "Polynomial",
]
