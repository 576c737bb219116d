"""
Core protocols for pymatrix.

Two structural interfaces, both Protocols (structural typing) rather than
ABCs so that foreign matrix types need not inherit from anything:

    MatrixOperand
        The minimum an object must offer to be used as an operand: its
        shape and element reads. Foreign operands are copied through get().

    Matrix
        The full capability interface: shape queries, element access,
        extrema and arithmetic. DenseMatrix is currently the only
        implementer.

Coordinates are 1-based throughout: get(1, 1) is the top-left element.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class MatrixOperand(Protocol):
    """Shape and element reads; enough to take part in arithmetic."""

    @property
    def n_rows(self) -> int:
        """Number of rows, fixed at creation."""
        ...

    @property
    def n_cols(self) -> int:
        """Number of columns, fixed at creation."""
        ...

    def get(self, i: int, j: int) -> float:
        """Element at 1-based row i, column j."""
        ...


@runtime_checkable
class Matrix(MatrixOperand, Protocol):
    """
    Capability interface of a fixed-size 2D numeric container.

    Arithmetic methods return new matrices and never mutate either
    operand. add/sub/multiply raise DimensionError on incompatible shapes.
    """

    def set(self, i: int, j: int, value: float) -> None:
        """Overwrite the element at 1-based row i, column j."""
        ...

    def row(self, i: int) -> NDArray[np.floating[Any]]:
        """Copy of 1-based row i."""
        ...

    def col(self, j: int) -> NDArray[np.floating[Any]]:
        """Copy of 1-based column j."""
        ...

    def max(self) -> float:
        """Largest element."""
        ...

    def min(self) -> float:
        """Smallest element."""
        ...

    def add(self, other: MatrixOperand) -> Matrix:
        """Element-wise sum."""
        ...

    def sub(self, other: MatrixOperand) -> Matrix:
        """Element-wise difference."""
        ...

    def scalar(self, x: float) -> Matrix:
        """Every element multiplied by x."""
        ...

    def multiply(self, other: MatrixOperand) -> Matrix:
        """Matrix product."""
        ...

    def transpose(self) -> Matrix:
        """Rows and columns swapped."""
        ...
