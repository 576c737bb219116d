"""
Core infrastructure for pymatrix.

Shared abstractions used by the matrix implementations.

Key components:
    protocols: Matrix capability protocol and MatrixOperand
    exceptions: Exception hierarchy (fatal precondition vs recoverable)
    validation: Input validators
    options: Option string constants for compatibility modes
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.protocols import Matrix, MatrixOperand
from pymatrix.core.exceptions import (
    PyMatrixError,
    PreconditionError,
    InvalidShapeError,
    MatrixIndexError,
    ValidationError,
    DimensionError,
)
from pymatrix.core.tolerances import ToleranceTier, DEFAULT_TOLERANCE

__all__ = [
    # Protocols
    "Matrix",
    "MatrixOperand",
    # Exceptions
    "PyMatrixError",
    "PreconditionError",
    "InvalidShapeError",
    "MatrixIndexError",
    "ValidationError",
    "DimensionError",
    # Tolerances
    "ToleranceTier",
    "DEFAULT_TOLERANCE",
]
