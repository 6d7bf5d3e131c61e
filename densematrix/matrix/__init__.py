"""
Dense matrix value type.

Public API:
    Matrix(rows, columns)           - Identity pattern
    Matrix(rows, columns, values)   - Flat row-major values
    Matrix.from_grid(grid)          - Nested rows, shape inferred

Operations return new matrices: plus, minus, pre_multiply, post_multiply,
times, get_sub_matrix, invert. calculate_determinant returns a float.
"""

from densematrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
