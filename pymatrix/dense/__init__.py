"""
Dense row-major matrices.

Usage:
    from pymatrix.dense import from_rows, identity

    a = from_rows([[1, 3, 2], [4, 0, 1]])
    b = from_rows([[1, 3], [0, 1], [5, 2]])
    print(a @ b)
    # [  11.00  10.00  ]
    # [   9.00  14.00  ]
"""

from pymatrix.dense.matrix import DenseMatrix, as_dense
from pymatrix.dense.vector import Vector
from pymatrix.dense.constructors import zeros, from_rows, identity
from pymatrix.dense.operations import add, sub, scalar, multiply, transpose

__all__ = [
    "DenseMatrix",
    "Vector",
    "as_dense",
    "zeros",
    "from_rows",
    "identity",
    "add",
    "sub",
    "scalar",
    "multiply",
    "transpose",
]
