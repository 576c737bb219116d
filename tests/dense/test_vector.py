"""
Tests for the single-column Vector type.
"""

import numpy as np
import pytest

from pymatrix import (
    DenseMatrix,
    InvalidShapeError,
    MatrixIndexError,
    PreconditionError,
    Vector,
    from_rows,
    identity,
)


class TestVectorConstruction:

    def test_zero_vector(self):
        v = Vector(3)
        assert v.shape == (3, 1)
        assert len(v) == 3
        assert v.to_list() == [0.0, 0.0, 0.0]

    @pytest.mark.parametrize("size", [0, -2])
    def test_rejects_non_positive(self, size):
        with pytest.raises(InvalidShapeError):
            Vector(size)

    def test_from_values(self):
        v = Vector.from_values([1, 2.5, -3])
        assert isinstance(v, Vector)
        assert v.to_list() == [1.0, 2.5, -3.0]

    def test_from_values_rejects_empty(self):
        with pytest.raises(InvalidShapeError):
            Vector.from_values([])

    def test_from_values_rejects_nested(self):
        with pytest.raises(PreconditionError):
            Vector.from_values([[1, 2], [3, 4]])

    def test_from_array_flat(self):
        v = Vector.from_array([1, 2, 3])
        assert isinstance(v, Vector)
        assert v.to_list() == [1.0, 2.0, 3.0]

    def test_from_array_column(self):
        v = Vector.from_array(np.array([[1.0], [2.0]]))
        assert isinstance(v, Vector)
        assert len(v) == 2
        assert v.at(2) == 2.0

    def test_from_array_rejects_square(self):
        with pytest.raises(PreconditionError):
            Vector.from_array(np.ones((2, 2)))

    def test_from_array_rejects_empty(self):
        with pytest.raises(InvalidShapeError):
            Vector.from_array([])


class TestVectorAccess:

    def test_at_and_set_at(self):
        v = Vector(2)
        v.set_at(2, 7.5)
        assert v.at(2) == 7.5
        assert v.get(2, 1) == 7.5

    @pytest.mark.parametrize("i", [0, 4])
    def test_at_out_of_range(self, i):
        with pytest.raises(MatrixIndexError):
            Vector(3).at(i)

    def test_set_at_out_of_range(self):
        with pytest.raises(MatrixIndexError):
            Vector(3).set_at(4, 1.0)

    def test_copy_is_vector(self):
        v = Vector.from_values([1, 2])
        c = v.copy()
        assert isinstance(c, Vector)
        c.set_at(1, 9.0)
        assert v.at(1) == 1.0


class TestVectorArithmetic:

    def test_matrix_times_vector(self):
        m = from_rows([[1, 2], [3, 4]])
        r = m @ Vector.from_values([1, 1])
        assert r.shape == (2, 1)
        assert r.to_rows() == [[3], [7]]

    def test_results_are_plain_dense(self):
        v = Vector.from_values([1, 2])
        assert type(v + v) is DenseMatrix
        assert type(v.transpose()) is DenseMatrix

    def test_identity_product(self):
        v = Vector.from_values([4, 5, 6])
        assert identity(3) @ v == v
