"""
Exception hierarchy for PyLinear.

All exceptions inherit from PyLinearError to allow catching any
library-specific error. Failures of the element type itself (for example
ZeroDivisionError from dividing by a zero scalar) are never wrapped; they
propagate exactly as the element type raised them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinearError(Exception):
    """Base exception for all PyLinear errors."""
    pass


class ValidationError(PyLinearError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Container dimensions are incorrect or inconsistent.

    Raised when two operands cannot be combined because of their sizes:
    matrix products with mismatched inner dimensions, cross products of
    vectors that are not 3-dimensional, element-wise matrix arithmetic on
    different shapes, or ragged nested rows.

    Attributes:
        expected: The size or shape the operation required, if known
        actual: The size or shape that was supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: object | None = None,
        actual: object | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class PrecisionWarning(UserWarning):
    """
    Exact integer arithmetic could not be preserved.

    Issued when reducing an integral matrix needs a division that does not
    come out even, so the affected entries fall back to true division.
    """
    pass
