"""
Free constructors for DenseMatrix.

    zeros(rows, cols)   all-zero matrix
    from_rows(rows)     matrix from nested literal rows
    identity(n)         n x n identity

Invalid shapes are caller bugs and raise InvalidShapeError.
"""

from __future__ import annotations

from collections.abc import Iterable

from pymatrix.core.validation import check_dimension, check_literal_rows
from pymatrix.dense.matrix import DenseMatrix


def zeros(rows: int, cols: int) -> DenseMatrix:
    """
    Zero matrix of the given shape.

    Raises:
        InvalidShapeError: If rows or cols is not a positive integer
    """
    return DenseMatrix(rows, cols)


def from_rows(rows: Iterable[Iterable[float]]) -> DenseMatrix:
    """
    Matrix from nested rows of numbers.

    The row count is the number of inner sequences and the column count is
    the length of the first one. Values are copied row by row.

    Example:
        >>> m = from_rows([[1, 3, 2], [4, 0, 1]])
        >>> m.shape
        (2, 3)
        >>> m.get(2, 1)
        4.0

    Raises:
        InvalidShapeError: If there are no rows, the first row is empty, or
            any row has a different length from the first
        PreconditionError: If a value is not a real number
    """
    values = check_literal_rows(rows)
    n_rows, n_cols = values.shape
    return DenseMatrix._wrap(values.ravel(), n_rows, n_cols)


def identity(n: int) -> DenseMatrix:
    """
    n x n identity matrix.

    Raises:
        InvalidShapeError: If n is not a positive integer
    """
    m = DenseMatrix(check_dimension(n, "n"), n)
    for i in range(1, n + 1):
        m.set(i, i, 1.0)
    return m
