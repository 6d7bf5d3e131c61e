"""String rendering of matrix grids: {[a, b],[c, d]}."""

from __future__ import annotations

from numpy.typing import NDArray

from densematrix.core.precision import STORAGE_DTYPE


def format_entry(value) -> str:
    # Shortest repr that round-trips the float32 value: 0.1 not 0.10000000149
    return str(STORAGE_DTYPE(value))


def format_grid(grid: NDArray) -> str:
    rows = ("[" + ", ".join(format_entry(v) for v in row) + "]" for row in grid)
    return "{" + ",".join(rows) + "}"
