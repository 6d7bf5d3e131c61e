"""
Gauss-Jordan inversion on an augmented matrix.

No pivoting: row i is always normalised by its own diagonal entry. A zero
pivot reached mid-elimination (possible even with a nonzero determinant,
e.g. [[0, 1], [1, 0]]) produces inf/nan entries instead of raising; the
caller is warned.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from densematrix.core.precision import STORAGE_DTYPE


def augment(grid: NDArray) -> NDArray:
    """Build the n x 2n augmented grid [A | I] in float32."""
    n = grid.shape[0]
    augmented = np.zeros((n, 2 * n), dtype=STORAGE_DTYPE)
    augmented[:, :n] = grid
    augmented[:, n:] = np.eye(n, dtype=STORAGE_DTYPE)
    return augmented


def gauss_jordan_inverse(grid: NDArray) -> NDArray:
    """
    Invert a square grid by Gauss-Jordan elimination.

    Parameters
    ----------
    grid : ndarray
        Square float32 array. Not modified.

    Returns
    -------
    ndarray
        New float32 array holding the right half of the reduced augmented
        grid.
    """
    n = grid.shape[0]
    augmented = augment(grid)

    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n):
            augmented[i, :] /= augmented[i, i]
            for k in range(n):
                if k != i:
                    multiplier = augmented[k, i]
                    augmented[k, :] -= augmented[i, :] * multiplier

    inverse = np.ascontiguousarray(augmented[:, n:])

    if not np.all(np.isfinite(inverse)):
        n_nan = int(np.sum(np.isnan(inverse)))
        n_inf = int(np.sum(np.isinf(inverse)))
        warnings.warn(
            f"Matrix inversion hit a zero pivot without pivoting; "
            f"result contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            RuntimeWarning,
            stacklevel=3,
        )

    return inverse
