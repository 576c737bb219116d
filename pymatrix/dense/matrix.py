"""
DenseMatrix: fixed-size 2D float64 container with row-major storage.

Elements live in one contiguous 1D numpy buffer of length n_rows * n_cols.
The element at 1-based coordinates (i, j) is stored at offset
(i - 1) * n_cols + (j - 1). Each matrix owns its buffer exclusively:
constructors copy their input and accessors hand out copies.

Arithmetic never mutates an operand. Shape mismatches between two
operands raise DimensionError (recoverable); bad coordinates and bad
shapes raise PreconditionError subclasses (caller bugs).
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import PreconditionError
from pymatrix.core.options import (
    ALL_EXTREMA,
    ALL_SHAPE_CHECKS,
    EXTREMA_LEGACY,
    SHAPE_CHECK_LEGACY,
    ExtremaMode,
    ShapeCheck,
)
from pymatrix.core.protocols import MatrixOperand
from pymatrix.core.tolerances import DEFAULT_TOLERANCE, ToleranceTier
from pymatrix.core.validation import (
    check_axis_index,
    check_conformable,
    check_coordinates,
    check_numeric_array,
    check_option,
    check_same_shape,
    check_scalar,
    check_shape,
)
from pymatrix.dense._format import render

_LEGACY_MAX_SEED = 0.0
_LEGACY_MIN_SEED = float(np.finfo(np.float64).max)


class DenseMatrix:
    """
    Dense matrix of double-precision values.

    ``DenseMatrix(rows, cols)`` builds a zero matrix; see also the free
    constructors ``zeros``, ``from_rows`` and ``identity`` and the
    ``from_array`` classmethod.

    Coordinates passed to get/set/row/col are 1-based.
    """

    __slots__ = ('_rows', '_cols', '_data')

    # Mutable through set(), so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, n_rows: int, n_cols: int):
        rows, cols = check_shape(n_rows, n_cols)
        self._rows = rows
        self._cols = cols
        self._data = np.zeros(rows * cols, dtype=np.float64)

    @staticmethod
    def _wrap(data: NDArray[np.float64], rows: int, cols: int) -> DenseMatrix:
        """Take ownership of a flat row-major buffer without copying."""
        m = DenseMatrix.__new__(DenseMatrix)
        m._rows = rows
        m._cols = cols
        m._data = data
        return m

    @classmethod
    def from_array(cls, array: ArrayLike) -> DenseMatrix:
        """
        Build a DenseMatrix from a 2D array-like.

        1D input becomes a single column. The values are copied.

        Raises:
            PreconditionError: If the input is not real numeric data or
                has more than two dimensions
            InvalidShapeError: If the input is empty
        """
        values = check_numeric_array(array, "array")
        if values.ndim == 1:
            values = values.reshape(-1, 1)
        if values.ndim != 2:
            raise PreconditionError(
                f"array: expected 1D or 2D array, got {values.ndim}D with shape {values.shape}"
            )
        rows, cols = check_shape(values.shape[0], values.shape[1])
        return DenseMatrix._wrap(np.ascontiguousarray(values).ravel().copy(), rows, cols)

    # === Shape ===

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def n_cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(n_rows, n_cols)."""
        return (self._rows, self._cols)

    @property
    def _grid(self) -> NDArray[np.float64]:
        # 2D view over the flat buffer, shares memory
        return self._data.reshape(self._rows, self._cols)

    # === Element access ===

    def get(self, i: int, j: int) -> float:
        """Element at 1-based (i, j)."""
        return float(self._data[check_coordinates(i, j, self.shape)])

    def set(self, i: int, j: int, value: float) -> None:
        """Overwrite the element at 1-based (i, j) in place."""
        offset = check_coordinates(i, j, self.shape)
        self._data[offset] = check_scalar(value, "value")

    def row(self, i: int) -> NDArray[np.float64]:
        """Copy of 1-based row i as a 1D array of length n_cols."""
        start = check_axis_index(i, self._rows, 'row', self.shape) * self._cols
        return self._data[start:start + self._cols].copy()

    def col(self, j: int) -> NDArray[np.float64]:
        """Copy of 1-based column j as a 1D array of length n_rows."""
        offset = check_axis_index(j, self._cols, 'col', self.shape)
        return self._data[offset::self._cols].copy()

    def max(self, *, extrema: ExtremaMode = 'data') -> float:
        """
        Largest element.

        Parameters
        ----------
        extrema : str
            'data' (default) returns the largest element present; NaN
            propagates.
            'legacy' scans from a seed of 0.0 and skips NaN, so a matrix
            with no positive element reports 0.0; a UserWarning is issued
            when that seed masks the real maximum.
        """
        check_option(extrema, ALL_EXTREMA, "extrema")
        if extrema != EXTREMA_LEGACY:
            return float(self._data.max())
        present = self._data[~np.isnan(self._data)]
        found = float(np.max(present, initial=_LEGACY_MAX_SEED))
        if found == _LEGACY_MAX_SEED and not np.any(present == _LEGACY_MAX_SEED):
            warnings.warn(
                f"Legacy max() seed {_LEGACY_MAX_SEED} reported instead of "
                f"a value present in the matrix",
                UserWarning,
                stacklevel=2,
            )
        return found

    def min(self, *, extrema: ExtremaMode = 'data') -> float:
        """
        Smallest element.

        Parameters
        ----------
        extrema : str
            'data' (default) returns the smallest element present; NaN
            propagates.
            'legacy' scans from a seed of the largest finite float64 and
            skips NaN; the seed is reported (with a UserWarning) when no
            element is below it, i.e. every element is +inf or NaN.
        """
        check_option(extrema, ALL_EXTREMA, "extrema")
        if extrema != EXTREMA_LEGACY:
            return float(self._data.min())
        present = self._data[~np.isnan(self._data)]
        found = float(np.min(present, initial=_LEGACY_MIN_SEED))
        if found == _LEGACY_MIN_SEED and not np.any(present == _LEGACY_MIN_SEED):
            warnings.warn(
                f"Legacy min() seed {_LEGACY_MIN_SEED} reported instead of "
                f"a value present in the matrix",
                UserWarning,
                stacklevel=2,
            )
        return found

    # === Arithmetic ===

    def add(self, other: MatrixOperand) -> DenseMatrix:
        """
        Element-wise sum.

        Raises:
            DimensionError: If the shapes differ
        """
        other = as_dense(other)
        check_same_shape("add", self.shape, other.shape)
        return DenseMatrix._wrap(self._data + other._data, self._rows, self._cols)

    def sub(self, other: MatrixOperand, *, shape_check: ShapeCheck = 'strict') -> DenseMatrix:
        """
        Element-wise difference.

        Parameters
        ----------
        other : MatrixOperand
            Right operand.
        shape_check : str
            'strict' (default) requires equal shapes.
            'legacy' only rejects operands whose row counts and column
            counts both differ. A pair differing on one axis is let through
            with a RuntimeWarning and subtracted over this matrix's shape,
            so reading past the end of ``other`` raises MatrixIndexError.

        Raises:
            DimensionError: If the shapes are rejected by ``shape_check``
        """
        check_option(shape_check, ALL_SHAPE_CHECKS, "shape_check")
        other = as_dense(other)
        if shape_check != SHAPE_CHECK_LEGACY or self.shape == other.shape:
            check_same_shape("sub", self.shape, other.shape)
            return DenseMatrix._wrap(self._data - other._data, self._rows, self._cols)

        if self._rows != other._rows and self._cols != other._cols:
            check_same_shape("sub", self.shape, other.shape)

        warnings.warn(
            f"Legacy shape check admitted a {other._rows} x {other._cols} operand "
            f"for a {self._rows} x {self._cols} matrix",
            RuntimeWarning,
            stacklevel=2,
        )
        data = self._data.copy()
        for i in range(1, self._rows + 1):
            for j in range(1, self._cols + 1):
                data[(i - 1) * self._cols + (j - 1)] -= other.get(i, j)
        return DenseMatrix._wrap(data, self._rows, self._cols)

    def scalar(self, x: float) -> DenseMatrix:
        """Every element multiplied by x."""
        factor = check_scalar(x, "x")
        return DenseMatrix._wrap(self._data * factor, self._rows, self._cols)

    def multiply(self, other: MatrixOperand) -> DenseMatrix:
        """
        Matrix product self @ other.

        R[i, j] is accumulated over the inner index k in ascending order,
        starting from 0.0.

        Raises:
            DimensionError: If self.n_cols != other.n_rows
        """
        other = as_dense(other)
        check_conformable(self.shape, other.shape)
        left = self._grid
        right = other._grid
        out = np.zeros((self._rows, other._cols), dtype=np.float64)
        for k in range(self._cols):
            out += np.outer(left[:, k], right[k, :])
        return DenseMatrix._wrap(out.ravel(), self._rows, other._cols)

    def transpose(self) -> DenseMatrix:
        """New n_cols x n_rows matrix with R[j, i] = self[i, j]."""
        data = np.ascontiguousarray(self._grid.T).ravel()
        return DenseMatrix._wrap(data, self._cols, self._rows)

    @property
    def T(self) -> DenseMatrix:
        """Alias for transpose()."""
        return self.transpose()

    # === Comparison and conversion ===

    def allclose(self, other: MatrixOperand, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
        """
        True if shapes match and every element pair is within tolerance.

        Uses |a - b| <= atol + rtol * |b| element-wise.
        """
        other = as_dense(other)
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def copy(self) -> DenseMatrix:
        """Independent copy with its own buffer."""
        return DenseMatrix._wrap(self._data.copy(), self._rows, self._cols)

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the elements as a 2D array of shape (n_rows, n_cols)."""
        return self._grid.copy()

    def to_rows(self) -> list[list[float]]:
        """Elements as nested lists, one list per row."""
        return self._grid.tolist()

    # === Operators ===

    def __add__(self, other: Any) -> DenseMatrix:
        if not isinstance(other, MatrixOperand):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> DenseMatrix:
        if not isinstance(other, MatrixOperand):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: Any) -> DenseMatrix:
        if not isinstance(other, MatrixOperand):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: Any) -> DenseMatrix:
        if isinstance(other, (bool, np.bool_)) or not isinstance(other, (int, float, np.integer, np.floating)):
            return NotImplemented
        return self.scalar(other)

    __rmul__ = __mul__

    def __neg__(self) -> DenseMatrix:
        return self.scalar(-1.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __str__(self) -> str:
        return render(self._grid)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_rows={self._rows}, n_cols={self._cols})"


def as_dense(matrix: MatrixOperand) -> DenseMatrix:
    """
    Return ``matrix`` as a DenseMatrix.

    DenseMatrix instances are returned as-is. Any other object satisfying
    the MatrixOperand protocol is copied element by element through get().

    Raises:
        PreconditionError: If ``matrix`` does not satisfy the MatrixOperand protocol
    """
    if isinstance(matrix, DenseMatrix):
        return matrix
    if not isinstance(matrix, MatrixOperand):
        raise PreconditionError(
            f"expected a matrix operand, got {type(matrix).__name__}"
        )
    rows, cols = check_shape(matrix.n_rows, matrix.n_cols)
    data = np.empty(rows * cols, dtype=np.float64)
    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            data[(i - 1) * cols + (j - 1)] = matrix.get(i, j)
    return DenseMatrix._wrap(data, rows, cols)
