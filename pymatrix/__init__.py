"""
pymatrix: small dense-matrix arithmetic for Python.

Fixed-size matrices of double-precision values stored row-major, with
1-based element access and the basic linear-algebra operations: addition,
subtraction, scalar multiplication, matrix multiplication and transpose.

Submodules:
    dense: DenseMatrix, Vector, constructors and operations
    core: protocols, exceptions, validation, options, tolerances
"""

__version__ = "0.1.0"

from pymatrix.core import (
    Matrix,
    MatrixOperand,
    PyMatrixError,
    PreconditionError,
    InvalidShapeError,
    MatrixIndexError,
    ValidationError,
    DimensionError,
)
from pymatrix.dense import (
    DenseMatrix,
    Vector,
    zeros,
    from_rows,
    identity,
    add,
    sub,
    scalar,
    multiply,
    transpose,
)

__all__ = [
    "__version__",
    "Matrix",
    "MatrixOperand",
    "DenseMatrix",
    "Vector",
    "zeros",
    "from_rows",
    "identity",
    "add",
    "sub",
    "scalar",
    "multiply",
    "transpose",
    "PyMatrixError",
    "PreconditionError",
    "InvalidShapeError",
    "MatrixIndexError",
    "ValidationError",
    "DimensionError",
]
