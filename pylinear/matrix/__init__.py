"""
Matrix module.

Dense matrices over any number-like element type, with exact
(fraction-free) row reduction for integer matrices.

Public API:
    Matrix             - two-dimensional numeric container
    matmul(A, B)       - matrix product (also A * B, A @ B)
    append(A, B)       - horizontal concatenation [A | B]
    row_reduce(A)      - RREF with pivot columns and rank (RREFResult)
    rref(A)            - reduce A to RREF in place
"""

from pylinear.matrix.matrix import FIELD_WIDTH, Matrix, append, matmul, rref
from pylinear.matrix._rref import RREFResult, row_reduce

__all__ = [
    "FIELD_WIDTH",
    "Matrix",
    "matmul",
    "append",
    "rref",
    "row_reduce",
    "RREFResult",
]
