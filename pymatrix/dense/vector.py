"""
Vector: a single-column DenseMatrix with 1-based positional access.
"""

from __future__ import annotations

from collections.abc import Iterable

from numpy.typing import ArrayLike

from pymatrix.core.exceptions import PreconditionError
from pymatrix.core.validation import (
    check_axis_index,
    check_dimension,
    check_numeric_array,
    check_scalar,
    check_shape,
)
from pymatrix.dense.matrix import DenseMatrix


class Vector(DenseMatrix):
    """
    Column vector of length n, stored as an n x 1 DenseMatrix.

    at(i) and set_at(i, x) address elements by 1-based position. All
    DenseMatrix operations still apply and return plain DenseMatrix results.
    """

    __slots__ = ()

    def __init__(self, size: int):
        super().__init__(check_dimension(size, "size"), 1)

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Vector:
        """Build a Vector holding a copy of ``values``."""
        data = check_numeric_array(list(values), "values")
        if data.ndim != 1:
            raise PreconditionError(
                f"values: expected a flat sequence, got {data.ndim}D data with shape {data.shape}"
            )
        size, _ = check_shape(data.shape[0], 1)
        v = cls(size)
        v._data[:] = data
        return v

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        """
        Build a Vector from a 1D array-like or an (n, 1) column.

        Raises:
            PreconditionError: If the input is not real numeric data or is
                not a flat sequence or single column
            InvalidShapeError: If the input is empty
        """
        data = check_numeric_array(array, "array")
        if data.ndim == 2 and data.shape[1] == 1:
            data = data[:, 0]
        if data.ndim != 1:
            raise PreconditionError(
                f"array: expected 1D array or single column, got shape {data.shape}"
            )
        return cls.from_values(data)

    def __len__(self) -> int:
        return self._rows

    def at(self, i: int) -> float:
        """Element at 1-based position i."""
        return float(self._data[check_axis_index(i, self._rows, 'row', self.shape)])

    def set_at(self, i: int, x: float) -> None:
        """Overwrite the element at 1-based position i."""
        offset = check_axis_index(i, self._rows, 'row', self.shape)
        self._data[offset] = check_scalar(x, "x")

    def copy(self) -> Vector:
        """Independent copy with its own buffer."""
        return Vector.from_values(self._data)

    def to_list(self) -> list[float]:
        """Elements as a flat list."""
        return self._data.tolist()
