"""
Vector module.

Public API:
    Vector        - one-dimensional numeric container
    dot(a, b)     - dot product (shorter operand zero-extended)
    cross(a, b)   - 3D cross product
"""

from pylinear.vector.vector import Vector
from pylinear.vector._products import dot, cross

__all__ = [
    "Vector",
    "dot",
    "cross",
]
