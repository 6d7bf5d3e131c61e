"""
densematrix: a dense 2-D matrix value type.

Single-precision storage, elementwise addition and subtraction, pre- and
post-multiplication, determinants by cofactor expansion and inversion by
Gauss-Jordan elimination.

Submodules:
    core: Exceptions, validation, precision and tolerance constants
    matrix: The Matrix type and its kernels
"""

__version__ = "0.1.0"

from densematrix.matrix import Matrix
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "Matrix",
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "SingularMatrixError",
]
