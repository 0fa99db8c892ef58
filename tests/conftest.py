"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinear.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_int_matrix(rng):
    """Factory for small random integer matrices (exact arithmetic)."""
    def make(rows, columns, low=-5, high=6):
        return Matrix.from_array(rng.integers(low, high, size=(rows, columns)))
    return make


@pytest.fixture
def singular_matrix():
    """Rank-1 matrix: second row is twice the first."""
    return Matrix([[1, 2], [2, 4]])
