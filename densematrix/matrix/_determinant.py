"""
Determinant by cofactor expansion along the first column.

Standalone kernel over a square float32 grid; Matrix.calculate_determinant
validates shape and delegates here.

The default expansion sums values[i, 0] * det(minor(i, 0)) WITHOUT the
alternating (-1)^i factor. This reproduces the established behaviour of
the library for every existing caller. It agrees with the textbook
determinant for 1x1 and 2x2 grids and whenever the odd-row terms vanish
(e.g. triangular or diagonal grids), and differs otherwise.
signed=True selects the textbook Laplace expansion.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from densematrix.core.precision import ACCUMULATOR_DTYPE


def minor(grid: NDArray, excluded_row: int, excluded_column: int) -> NDArray:
    """Copy of grid with one row and one column removed, order preserved."""
    keep_rows = [i for i in range(grid.shape[0]) if i != excluded_row]
    keep_cols = [j for j in range(grid.shape[1]) if j != excluded_column]
    return grid[np.ix_(keep_rows, keep_cols)]


def cofactor_determinant(grid: NDArray, signed: bool = False) -> float:
    """
    Determinant of a square grid, accumulated in float64.

    Parameters
    ----------
    grid : ndarray
        Square 2-D array, at least 1x1. Not modified.
    signed : bool
        Apply the (-1)^i cofactor sign. Default False.

    Returns
    -------
    float
    """
    n = grid.shape[0]
    if n == 1:
        return float(grid[0, 0])

    g = grid.astype(ACCUMULATOR_DTYPE, copy=False)
    if n == 2:
        return float(g[0, 0] * g[1, 1] - g[0, 1] * g[1, 0])

    determinant = 0.0
    for i in range(n):
        term = float(g[i, 0]) * cofactor_determinant(minor(grid, i, 0), signed=signed)
        if signed and i % 2 == 1:
            term = -term
        determinant += term
    return determinant
