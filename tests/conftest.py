"""
Pytest fixtures for vectordist tests.
"""

import pytest
import numpy as np

from vectordist.utils.logging import setup_logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the package logger after tests that change its level."""
    yield
    setup_logger("vectordist", level="INFO")


@pytest.fixture
def dimension() -> int:
    """Default dimension for random test vectors."""
    return 16


@pytest.fixture
def vec_a() -> list:
    return [1.0, 2.0, 3.0, 4.0]


@pytest.fixture
def vec_b() -> list:
    return [3.0, 1.0, 4.0, 2.0]


@pytest.fixture
def weights() -> list:
    return [0.2, 0.4, 0.6, 0.8]


@pytest.fixture
def random_pair(dimension: int):
    """Generate two random vectors of the same length."""
    rng = np.random.default_rng(42)
    return rng.standard_normal(dimension), rng.standard_normal(dimension)


@pytest.fixture
def random_weights(dimension: int) -> np.ndarray:
    """Generate random non-negative weights."""
    rng = np.random.default_rng(7)
    return rng.random(dimension)
