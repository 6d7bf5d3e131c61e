"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m22():
    """The 2x2 matrix [[1, 2], [3, 4]] (determinant -2)."""
    return Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])


@pytest.fixture
def well_conditioned(rng):
    """Random 4x4 matrix made diagonally dominant, so no pivot is near zero."""
    a = rng.uniform(-1.0, 1.0, size=(4, 4))
    a += np.eye(4) * 6.0
    return Matrix.from_grid(a)
