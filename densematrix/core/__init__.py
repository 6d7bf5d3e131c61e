"""
Core infrastructure for densematrix.

This module provides shared abstractions and utilities used by the
matrix package.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage dtype, machine epsilon, closeness checks
    tolerances: Named tolerance tiers
"""

from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    SingularMatrixError,
)
from densematrix.core.tolerances import ToleranceTier, FP32, FP64, select_tolerance

__all__ = [
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "SingularMatrixError",
    # Tolerances
    "ToleranceTier",
    "FP32",
    "FP64",
    "select_tolerance",
]
