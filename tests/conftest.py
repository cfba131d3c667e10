"""Pytest configuration for infogeom tests."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Provide a seeded random number generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def random_simplex(rng):
    """Return a sampler drawing points on Δ^{n-1} by normalizing uniform weights."""
    def sample(n: int) -> np.ndarray:
        x = rng.uniform(0.0, 10.0, size=n)
        return x / np.sum(x)
    return sample


@pytest.fixture
def simplex_pairs(random_simplex):
    """Random (p, q) pairs of several lengths."""
    pairs = []
    for n in (1, 2, 3, 8, 10, 64):
        for _ in range(20):
            pairs.append((random_simplex(n), random_simplex(n)))
    return pairs
