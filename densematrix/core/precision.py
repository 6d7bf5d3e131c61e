"""
Numerical precision constants and utilities.

Provides the storage dtype for matrix entries, machine epsilon, and
closeness checks shared by the matrix kernels.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Matrix entries are stored in single precision
STORAGE_DTYPE = np.float32

# Determinants are accumulated in double precision to limit round-off
ACCUMULATOR_DTYPE = np.float64

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def machine_epsilon(dtype: np.dtype | type = STORAGE_DTYPE) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float,
    atol: float
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Differences are taken in float64 so that comparing two float32 grids
    does not itself round.

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    a64 = np.asarray(a, dtype=ACCUMULATOR_DTYPE)
    b64 = np.asarray(b, dtype=ACCUMULATOR_DTYPE)
    return np.abs(a64 - b64) <= atol + rtol * np.abs(b64)
