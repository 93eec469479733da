"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pyvecmat import Vector, vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_pair(rng):
    """Two random 5D vectors of equal dimension."""
    a = Vector.from_array(rng.standard_normal(5))
    b = Vector.from_array(rng.standard_normal(5))
    return a, b


@pytest.fixture
def unit_axes():
    """The standard basis of R^3."""
    return vector(1, 0, 0), vector(0, 1, 0), vector(0, 0, 1)
