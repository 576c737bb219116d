"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Two disjoint families sit below it:

    PreconditionError
        Programmer error at the call site: non-positive dimensions,
        out-of-range coordinates, malformed literal rows. A correct caller
        never triggers these, and they are not meant to be handled.

    ValidationError / DimensionError
        Data-dependent, recoverable failures. DimensionError is raised when
        two already-built matrices have incompatible shapes for the
        requested operation; callers are expected to catch and branch on it.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class PreconditionError(PyMatrixError):
    """
    A call violated a structural precondition.

    Raised for caller misuse detectable without looking at matrix data,
    e.g. non-numeric element values.
    """
    pass


class InvalidShapeError(PreconditionError, ValueError):
    """
    Requested or supplied matrix shape is invalid.

    Raised for non-positive or non-integer dimensions, empty literal input,
    and literal rows of inconsistent length.

    Attributes:
        shape: The offending (rows, cols) pair, if known
    """

    def __init__(
        self,
        message: str,
        shape: tuple[object, object] | None = None,
    ):
        super().__init__(message)
        self.shape = shape


class MatrixIndexError(PreconditionError, IndexError):
    """
    Element coordinates are outside the matrix.

    Attributes:
        index: The offending 1-based (i, j) coordinates
        shape: Shape of the matrix that was accessed
    """

    def __init__(
        self,
        message: str,
        index: tuple[object, object] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when option values passed to an operation are not recognised.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    The operands are left unmodified and no result is produced.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
