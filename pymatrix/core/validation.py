"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Shape and index validators raise PreconditionError subclasses: a bad
dimension or coordinate is a bug at the call site. Operand compatibility
checks raise DimensionError, which callers are expected to handle.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
"""

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidShapeError,
    MatrixIndexError,
    PreconditionError,
    ValidationError,
)


def _is_integer(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def check_dimension(value: object, name: str) -> int:
    """
    Verify a matrix dimension is a positive integer.

    Args:
        value: Requested dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        InvalidShapeError: If value is not an integer or is < 1
    """
    if not _is_integer(value):
        raise InvalidShapeError(
            f"{name}: matrix dimension must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise InvalidShapeError(f"{name}: invalid matrix dimension {value}, expected >= 1")
    return int(value)


def check_shape(rows: object, cols: object) -> tuple[int, int]:
    """
    Verify a (rows, cols) pair describes a non-empty matrix.

    Raises:
        InvalidShapeError: If either dimension is not a positive integer
    """
    if not (_is_integer(rows) and _is_integer(cols)) or rows < 1 or cols < 1:
        raise InvalidShapeError(
            f"Invalid matrix dimension: {rows!r} x {cols!r}",
            shape=(rows, cols),
        )
    return int(rows), int(cols)


def check_coordinates(i: object, j: object, shape: tuple[int, int]) -> int:
    """
    Verify 1-based coordinates fall inside a matrix and map them to an offset.

    Args:
        i: 1-based row index
        j: 1-based column index
        shape: (rows, cols) of the matrix being accessed

    Returns:
        Row-major offset (i - 1) * cols + (j - 1)

    Raises:
        MatrixIndexError: If either index is not an integer or out of range
    """
    rows, cols = shape
    if not (_is_integer(i) and _is_integer(j)) or not (1 <= i <= rows and 1 <= j <= cols):
        raise MatrixIndexError(
            f"Invalid matrix index: ({i!r}, {j!r}) for {rows} x {cols} matrix",
            index=(i, j),
            shape=shape,
        )
    return (int(i) - 1) * cols + (int(j) - 1)


def check_axis_index(index: object, size: int, axis: str, shape: tuple[int, int]) -> int:
    """
    Verify a 1-based row or column index and return it 0-based.

    Args:
        index: 1-based index
        size: Number of rows or columns along the axis
        axis: 'row' or 'col', used in the message
        shape: Shape of the matrix being accessed

    Raises:
        MatrixIndexError: If index is not an integer in 1..size
    """
    if not _is_integer(index) or not 1 <= index <= size:
        raise MatrixIndexError(
            f"Invalid {axis} index {index!r}, expected 1..{size}",
            index=(index, None) if axis == 'row' else (None, index),
            shape=shape,
        )
    return int(index) - 1


def check_scalar(value: object, name: str) -> float:
    """
    Verify a value is a real number and return it as float.

    Raises:
        PreconditionError: If value is not a real number
    """
    if isinstance(value, (str, bytes, complex, np.complexfloating)):
        raise PreconditionError(f"{name}: expected a real number, got {type(value).__name__}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise PreconditionError(f"{name}: expected a real number, got {value!r}") from e


def check_numeric_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Convert input to a float64 numpy array, rejecting non-numeric data.

    Raises:
        PreconditionError: If input cannot be converted or is not numeric
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise PreconditionError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise PreconditionError(
            f"{name}: converted to object dtype, indicating ragged or non-numeric data"
        )
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise PreconditionError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )
    return result.astype(np.float64)


def check_literal_rows(rows: Iterable[Iterable[float]]) -> NDArray[np.float64]:
    """
    Validate nested literal rows and return them as a 2D float64 array.

    The column count is taken from the first row; every other row must
    match it.

    Raises:
        InvalidShapeError: If there are no rows, the first row is empty,
            or a row length differs from the first
        PreconditionError: If a value is not a real number
    """
    try:
        materialized = [list(row) for row in rows]
    except TypeError as e:
        raise InvalidShapeError(
            f"Invalid literal rows: expected a sequence of sequences: {e}"
        ) from e
    if not materialized:
        raise InvalidShapeError("Invalid literal rows: no rows given", shape=(0, None))

    cols = len(materialized[0])
    if cols == 0:
        raise InvalidShapeError(
            "Invalid literal rows: first row is empty",
            shape=(len(materialized), 0),
        )

    for number, row in enumerate(materialized, start=1):
        if len(row) != cols:
            raise InvalidShapeError(
                f"Invalid row length {len(row)} in row {number}, expected {cols}",
                shape=(len(materialized), cols),
            )

    return check_numeric_array(materialized, "rows")


def check_option(value: Any, allowed: frozenset[str], name: str) -> str:
    """
    Verify a keyword option is one of the recognised strings.

    Raises:
        ValidationError: If value is not in allowed
    """
    if value not in allowed:
        raise ValidationError(
            f"{name}: unknown option {value!r}, expected one of {sorted(allowed)}"
        )
    return value


def check_same_shape(
    operation: str,
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If rows or cols differ
    """
    if left_shape != right_shape:
        raise DimensionError(
            f"{operation}: matrix dimensions do not match: "
            f"{left_shape[0]} x {left_shape[1]} vs {right_shape[0]} x {right_shape[1]}",
            operation=operation,
            left_shape=left_shape,
            right_shape=right_shape,
        )


def check_conformable(left_shape: tuple[int, int], right_shape: tuple[int, int]) -> None:
    """
    Verify the left operand's columns match the right operand's rows.

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if left_shape[1] != right_shape[0]:
        raise DimensionError(
            f"multiply: matrix dimensions do not match: left has {left_shape[1]} "
            f"columns, right has {right_shape[0]} rows",
            operation="multiply",
            left_shape=left_shape,
            right_shape=right_shape,
        )
