"""
Free-function forms of the matrix operations.

Each function takes its operands explicitly and returns a new DenseMatrix;
neither operand is modified. Operands may be any object satisfying the
MatrixOperand protocol.

Usage:
    from pymatrix.dense.operations import add, multiply

    try:
        r = multiply(a, b)
    except DimensionError as e:
        ...  # e.left_shape, e.right_shape
"""

from __future__ import annotations

from pymatrix.core.options import ShapeCheck
from pymatrix.core.protocols import MatrixOperand
from pymatrix.dense.matrix import DenseMatrix, as_dense


def add(a: MatrixOperand, b: MatrixOperand) -> DenseMatrix:
    """
    Element-wise a + b.

    Raises:
        DimensionError: If the shapes differ
    """
    return as_dense(a).add(b)


def sub(a: MatrixOperand, b: MatrixOperand, *, shape_check: ShapeCheck = 'strict') -> DenseMatrix:
    """
    Element-wise a - b.

    Parameters
    ----------
    a, b : MatrixOperand
        Operands.
    shape_check : str
        'strict' (default) or 'legacy'; see DenseMatrix.sub.

    Raises:
        DimensionError: If the shapes are rejected by ``shape_check``
    """
    return as_dense(a).sub(b, shape_check=shape_check)


def scalar(a: MatrixOperand, x: float) -> DenseMatrix:
    """Every element of a multiplied by x."""
    return as_dense(a).scalar(x)


def multiply(a: MatrixOperand, b: MatrixOperand) -> DenseMatrix:
    """
    Matrix product a @ b.

    Raises:
        DimensionError: If a.n_cols != b.n_rows
    """
    return as_dense(a).multiply(b)


def transpose(a: MatrixOperand) -> DenseMatrix:
    """Transpose of a."""
    return as_dense(a).transpose()
