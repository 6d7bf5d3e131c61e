"""
Matrix: dense 2-D value type over single-precision floats.

Every arithmetic operation validates its operands, builds a new Matrix and
leaves the operands untouched. The only in-place mutators are
set_matrix_value() and reset(). The backing grid is owned exclusively: it
is copied on the way in and on the way out, so no two Matrix instances
(and no caller) ever alias it.

Construction:
    Matrix(rows, columns)             identity pattern
    Matrix(rows, columns, values)     flat row-major values
    Matrix.from_grid(grid)            nested rows, shape inferred

Shape errors raise DimensionError and a zero-determinant inversion raises
SingularMatrixError. Both are ValidationError, which is a ValueError.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from densematrix.core.precision import STORAGE_DTYPE, is_close
from densematrix.core.tolerances import FP32
from densematrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_rectangular,
    check_same_shape,
    check_size,
    check_square,
)
from densematrix.matrix._determinant import cofactor_determinant, minor
from densematrix.matrix._format import format_grid
from densematrix.matrix._inverse import gauss_jordan_inverse


class Matrix:
    """
    Dense rows x columns matrix of float32 values.

    Parameters
    ----------
    rows : int
        Number of rows, at least 1.
    columns : int
        Number of columns, at least 1.
    values : array-like, optional
        Flat sequence of rows * columns numbers in row-major order. When
        omitted the matrix holds the identity pattern: 1.0 on the main
        diagonal where it exists, 0.0 elsewhere.

    Examples
    --------
    >>> m = Matrix(2, 2, [1, 2, 3, 4])
    >>> m.calculate_determinant()
    -2.0
    >>> print(m.invert())
    {[-2.0, 1.0],[1.5, -0.5]}
    """

    __hash__ = None  # mutable through set_matrix_value() and reset()

    def __init__(self, rows: int, columns: int, values: ArrayLike | None = None):
        self._rows = check_dimension(rows, "rows")
        self._columns = check_dimension(columns, "columns")
        self._identity = np.eye(self._rows, self._columns, dtype=STORAGE_DTYPE)
        self._values = self._identity.copy()

        if values is not None:
            flat = check_array(values, "values")
            check_1d(flat, "values")
            check_size(flat, self._rows * self._columns, "values")
            self._values = flat.reshape(self._rows, self._columns)

    @classmethod
    def from_grid(cls, grid: ArrayLike) -> Matrix:
        """
        Build a Matrix from a rectangular 2-D grid.

        rows is the number of rows in grid and columns the length of its
        first row. Every other row must have the same length.

        Parameters
        ----------
        grid : sequence of sequences, or 2-D ndarray
            Numeric entries, at least 1x1.

        Raises
        ------
        DimensionError
            If grid is empty, jagged or not 2-D.
        ValidationError
            If grid holds non-numeric data.
        """
        return cls._from_owned(_check_grid(grid, "grid"))

    @classmethod
    def _from_owned(cls, array: NDArray[np.float32]) -> Matrix:
        """Wrap a freshly computed float32 grid without copying it."""
        matrix = cls(array.shape[0], array.shape[1])
        matrix._values = array
        return matrix

    # ─── state ──────────────────────────────────────────────────────────

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def values(self) -> NDArray[np.float32]:
        """Copy of the backing grid. Writing to it does not affect the matrix."""
        return self._values.copy()

    def to_list(self) -> list[list[float]]:
        """Entries as nested Python lists of floats."""
        return [[float(v) for v in row] for row in self._values]

    def __getitem__(self, key: tuple[int, int]) -> float:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix index must be a (row, column) pair, got {key!r}"
            )
        i = check_index(key[0], self._rows, "row")
        j = check_index(key[1], self._columns, "column")
        return float(self._values[i, j])

    def set_matrix_value(self, grid: ArrayLike) -> None:
        """
        Replace every entry of the matrix.

        The grid is copied; later changes to it are not observed.

        Raises
        ------
        DimensionError
            If grid is not rows x columns.
        """
        array = _check_grid(grid, "grid")
        if array.shape != self.shape:
            raise DimensionError(
                f"setMatrixValue failed, Matrix size not match: "
                f"expected {self._rows}x{self._columns}, "
                f"got {array.shape[0]}x{array.shape[1]}"
            )
        self._values = array

    def reset(self) -> None:
        """Restore the identity pattern captured at construction."""
        self._values = self._identity.copy()

    # ─── arithmetic ─────────────────────────────────────────────────────

    def plus(self, other: Matrix) -> Matrix:
        """Elementwise sum. Shapes must match."""
        _require_matrix(other, "plus")
        check_same_shape(self.shape, other.shape, "addition is not possible")
        return Matrix._from_owned(self._values + other._values)

    def minus(self, other: Matrix) -> Matrix:
        """Elementwise difference. Shapes must match."""
        _require_matrix(other, "minus")
        check_same_shape(self.shape, other.shape, "subtraction is not possible")
        return Matrix._from_owned(self._values - other._values)

    def pre_multiply(self, other: Matrix) -> Matrix:
        """
        Product with this matrix on the left: self x other.

        Requires self.columns == other.rows; the result is
        self.rows x other.columns. Accumulation is in float32.
        """
        _require_matrix(other, "pre_multiply")
        if self._columns != other._rows:
            raise DimensionError(
                f"Column of current matrix ({self._columns}) is not equal to "
                f"row of matrix ({other._rows}), multiplication is not possible"
            )
        return Matrix._from_owned(self._values @ other._values)

    def post_multiply(self, other: Matrix) -> Matrix:
        """
        Product with this matrix on the right: other x self.

        Requires self.rows == other.columns.
        """
        _require_matrix(other, "post_multiply")
        if self._rows != other._columns:
            raise DimensionError(
                f"Column of matrix ({other._columns}) is not equal to "
                f"row of current matrix ({self._rows}), multiplication is not possible"
            )
        return other.pre_multiply(self)

    def times(self, other: Matrix) -> Matrix:
        """Same as pre_multiply: self x other."""
        return self.pre_multiply(other)

    add = plus
    subtract = minus
    multiply = times

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.minus(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.times(other)

    # ─── structure ──────────────────────────────────────────────────────

    def get_sub_matrix(self, excluded_row: int, excluded_column: int) -> Matrix:
        """
        Matrix with one row and one column removed, order preserved.

        Raises
        ------
        DimensionError
            If the matrix has a single row or a single column.
        ValidationError
            If either index is out of range.
        """
        if self._rows < 2 or self._columns < 2:
            raise DimensionError(
                f"Sub-matrix of a {self._rows}x{self._columns} matrix would be empty"
            )
        i = check_index(excluded_row, self._rows, "excluded_row")
        j = check_index(excluded_column, self._columns, "excluded_column")
        return Matrix._from_owned(minor(self._values, i, j))

    def calculate_determinant(self, signed: bool = False) -> float:
        """
        Determinant by cofactor expansion along the first column.

        The expansion is accumulated in float64 and returned as a float.
        With the default signed=False the (-1)^i cofactor sign is not
        applied, which matches the textbook value for 1x1 and 2x2
        matrices and for triangular matrices. signed=True gives the
        textbook Laplace expansion for every size.

        Raises
        ------
        DimensionError
            If the matrix is not square.
        """
        check_square(self._rows, self._columns, "Matrix determinant is not possible")
        return cofactor_determinant(self._values, signed=signed)

    def invert(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination on [A | I], without pivoting.

        A zero pivot met during elimination yields non-finite entries and
        a RuntimeWarning rather than an error.

        Raises
        ------
        DimensionError
            If the matrix is not square.
        SingularMatrixError
            If calculate_determinant() is exactly zero.
        """
        check_square(self._rows, self._columns, "Matrix inversion is not possible")
        determinant = self.calculate_determinant()
        if determinant == 0.0:
            raise SingularMatrixError(
                "Determinant is zero, Matrix inversion is not possible",
                matrix_name=f"{self._rows}x{self._columns} matrix",
                determinant=determinant,
            )
        return Matrix._from_owned(gauss_jordan_inverse(self._values))

    # ─── comparison & display ───────────────────────────────────────────

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        True when shapes match and every entry is within tolerance.

        Tolerances default to the FP32 tier.
        """
        _require_matrix(other, "allclose")
        if self.shape != other.shape:
            return False
        rtol = FP32.rtol if rtol is None else rtol
        atol = FP32.atol if atol is None else atol
        return bool(np.all(is_close(self._values, other._values, rtol=rtol, atol=atol)))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    def __str__(self) -> str:
        return format_grid(self._values)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, values={self})"


def _check_grid(grid: ArrayLike, name: str) -> NDArray[np.float32]:
    check_rectangular(grid, name)
    array = check_array(grid, name)
    check_2d(array, name)
    return array


def _require_matrix(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix, got {type(other).__name__}"
        )
