"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import ValidationError, DimensionError
from densematrix.core.precision import STORAGE_DTYPE


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float32]:
    """
    Validate and convert input to a float32 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged data)
    or a non-numeric dtype. The result never aliases the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        New numpy.ndarray with dtype float32

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bools, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return np.array(result, dtype=STORAGE_DTYPE, order='C', copy=True)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_rectangular(grid: Any, name: str) -> None:
    """
    Verify a nested sequence has at least one row, at least one column,
    and that every row has as many entries as the first.

    numpy arrays are already rectangular and only checked for emptiness;
    their dimensionality is left to check_2d.

    Args:
        grid: Nested sequence (or ndarray) of rows
        name: Parameter name for error messages

    Raises:
        DimensionError: If the grid is empty or jagged
        ValidationError: If the grid or a row is not a sequence
    """
    if isinstance(grid, np.ndarray):
        if grid.size == 0:
            raise DimensionError(f"{name}: empty array with shape {grid.shape}")
        return

    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(grid).__name__}"
        )
    if len(grid) == 0:
        raise DimensionError(f"{name}: must have at least 1 row, got 0")

    lengths = []
    for i, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise ValidationError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence of numbers"
            )
        lengths.append(len(row))

    if lengths[0] == 0:
        raise DimensionError(f"{name}: must have at least 1 column, got 0")

    jagged = [i for i, length in enumerate(lengths) if length != lengths[0]]
    if jagged:
        details = ", ".join(f"row {i}={lengths[i]}" for i in jagged)
        raise DimensionError(
            f"{name}: jagged rows, expected {lengths[0]} columns (from row 0), got {details}"
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is a positive integer.

    Args:
        value: Count to check
        name: Parameter name for error messages

    Returns:
        The count as a Python int

    Raises:
        ValidationError: If value is not an int or is not positive
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be at least 1, got {value}")
    return int(value)


def check_size(array: NDArray[Any], expected: int, name: str) -> None:
    """
    Verify a flat array holds exactly the expected number of values.

    Raises:
        DimensionError: If the number of values differs from expected
    """
    if array.size != expected:
        raise DimensionError(
            f"{name}: values not match size(row * column), "
            f"expected {expected} values, got {array.size}"
        )


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify an index lies in [0, size).

    Negative indices are rejected rather than wrapped.

    Raises:
        ValidationError: If index is not an int or is out of range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(index).__name__} {index!r}"
        )
    if not 0 <= index < size:
        raise ValidationError(f"{name}: index {index} out of range [0, {size})")
    return int(index)


def check_same_shape(
    shape_a: tuple[int, int],
    shape_b: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if shape_a != shape_b:
        raise DimensionError(
            f"{operation}: matrix size is not same, "
            f"left is {shape_a[0]}x{shape_a[1]}, right is {shape_b[0]}x{shape_b[1]}"
        )


def check_square(rows: int, columns: int, operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != columns
    """
    if rows != columns:
        raise DimensionError(
            f"{operation}: row is not equal to column, got {rows}x{columns}"
        )
