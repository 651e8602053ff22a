"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square3():
    """3x3 integer matrix with determinant 17."""
    return Matrix([
        [1, 3, 2],
        [4, 1, 3],
        [2, 5, 2],
    ])


@pytest.fixture
def rect2x3():
    """2 rows, 3 columns."""
    return Matrix([
        [4, -2, 8],
        [1, 9, -2],
    ])


@pytest.fixture
def unimodular():
    """Determinant 1, so the inverse has integral values."""
    return Matrix([
        [1, 3, 3],
        [1, 4, 3],
        [1, 3, 4],
    ])


@pytest.fixture
def singular():
    """Third row is the sum of the first two."""
    return Matrix([
        [1, 2, 3],
        [4, 5, 6],
        [5, 7, 9],
    ])


@pytest.fixture
def random_square(rng):
    """Factory for seeded random integer square matrices."""
    def make(size):
        return Matrix.random(size, rng=rng)
    return make
