"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def universe():
    """An empty 3x3 universe."""
    from lifesim.core import Universe
    return Universe(3, 3)


@pytest.fixture
def large_universe():
    """An empty 20x20 universe."""
    from lifesim.core import Universe
    return Universe(20, 20)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
