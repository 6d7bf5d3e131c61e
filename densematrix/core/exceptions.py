"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Argument problems additionally inherit from
ValueError, so callers unaware of this library still catch them as the
usual invalid-argument error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when shapes don't match the dimensions an operation requires,
    or when a flat value sequence has the wrong length.
    """
    pass


class SingularMatrixError(ValidationError):
    """
    Matrix has a zero determinant.

    Raised when inversion is requested for a matrix whose determinant is
    exactly zero. This is an argument error: the caller asked to invert a
    matrix that has no inverse.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
