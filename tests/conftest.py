"""
Shared fixtures.
"""
import numpy as np
import pytest

from regression_lab.utils.dataset import Dataset


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line():
    """Noiseless points on y = 2.5x + 10."""
    return Dataset.from_points([(0, 10), (1, 12.5), (2, 15), (3, 17.5)])
