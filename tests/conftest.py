"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def dominant_system(rng):
    """Well-conditioned 40x40 system with a known solution."""
    n = 40
    A = rng.uniform(-1.0, 1.0, size=(n, n))
    A[np.diag_indices(n)] = np.abs(A).sum(axis=1) + 1.0
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def general_system(rng):
    """Random dense 60x60 system that needs pivoting (no dominance)."""
    n = 60
    A = rng.standard_normal((n, n))
    b = rng.standard_normal(n)
    return A, b
