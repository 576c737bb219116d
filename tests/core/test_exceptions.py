"""
Tests for the pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Fatal and recoverable families are disjoint
    - Builtin bases (ValueError, IndexError) for precondition subclasses
    - Diagnostic attributes and their defaults
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidShapeError,
    MatrixIndexError,
    PreconditionError,
    PyMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    @pytest.mark.parametrize("exc_type", [
        PreconditionError,
        InvalidShapeError,
        MatrixIndexError,
        ValidationError,
        DimensionError,
    ])
    def test_is_pymatrix_error(self, exc_type):
        with pytest.raises(PyMatrixError):
            raise exc_type("boom")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_invalid_shape_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidShapeError("0 x 3")

    def test_matrix_index_is_index_error(self):
        with pytest.raises(IndexError):
            raise MatrixIndexError("(0, 1)")

    def test_dimension_error_is_not_precondition_error(self):
        err = DimensionError("mismatch")
        assert not isinstance(err, PreconditionError)

    def test_precondition_errors_are_not_dimension_errors(self):
        for err in (InvalidShapeError("x"), MatrixIndexError("x"), PreconditionError("x")):
            assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_dimension_error_attributes(self):
        err = DimensionError(
            "add: matrix dimensions do not match",
            operation="add",
            left_shape=(3, 2),
            right_shape=(2, 2),
        )
        assert str(err) == "add: matrix dimensions do not match"
        assert err.operation == "add"
        assert err.left_shape == (3, 2)
        assert err.right_shape == (2, 2)

    def test_dimension_error_defaults_are_none(self):
        err = DimensionError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None

    def test_matrix_index_error_attributes(self):
        err = MatrixIndexError("bad index", index=(0, 4), shape=(2, 3))
        assert err.index == (0, 4)
        assert err.shape == (2, 3)

    def test_invalid_shape_error_defaults(self):
        err = InvalidShapeError("bad shape")
        assert err.shape is None

    def test_catchable_with_attributes(self):
        with pytest.raises(DimensionError) as exc_info:
            raise DimensionError("mismatch", operation="multiply",
                                 left_shape=(2, 4), right_shape=(3, 2))
        assert exc_info.value.operation == "multiply"
        assert exc_info.value.left_shape == (2, 4)
