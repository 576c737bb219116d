"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import from_rows


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for random dense matrices of a given shape."""
    def make(rows, cols):
        return from_rows(rng.standard_normal((rows, cols)).tolist())
    return make


@pytest.fixture
def wide_matrix():
    """2 x 3 matrix used by the multiply scenario."""
    return from_rows([
        [1, 3, 2],
        [4, 0, 1],
    ])


@pytest.fixture
def tall_matrix():
    """3 x 2 matrix used by the multiply scenario."""
    return from_rows([
        [1, 3],
        [0, 1],
        [5, 2],
    ])
