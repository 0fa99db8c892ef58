"""
Core infrastructure for PyLinear.

This module provides the shared abstractions every container builds on.

Key components:
    protocols: NumericContainer protocol
    arithmetic: Generic element-wise primitives and operator wiring
    exceptions: Exception hierarchy
    precision: Element-level helpers (integral checks, exact division)
    tolerances: Tolerance tiers for approximate comparison
    validation: Input validators for the construction boundary
"""

from pylinear.core.protocols import NumericContainer, is_container
from pylinear.core.arithmetic import (
    ArithmeticOperators,
    add,
    subtract,
    multiply,
    divide,
    assign,
)
from pylinear.core.exceptions import (
    PyLinearError,
    ValidationError,
    DimensionError,
    PrecisionWarning,
)
from pylinear.core.tolerances import ToleranceTier, EXACT, FLOAT32, FLOAT64, DEFAULT_TOLERANCE

__all__ = [
    # Protocols
    "NumericContainer",
    "is_container",
    # Arithmetic
    "ArithmeticOperators",
    "add",
    "subtract",
    "multiply",
    "divide",
    "assign",
    # Exceptions
    "PyLinearError",
    "ValidationError",
    "DimensionError",
    "PrecisionWarning",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FLOAT32",
    "FLOAT64",
    "DEFAULT_TOLERANCE",
]
