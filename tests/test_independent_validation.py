"""Independent validation tests.

These tests check the distances against formulas that do not go through
the Bhattacharyya coefficient, providing stronger evidence of correctness
than self-consistency checks alone.
"""

import numpy as np
import pytest

from infogeom.distances import rao_distance_categorical, hellinger


class TestSphereEmbedding:
    """Validate against the chord length of the embedding p ↦ √p.

    For unit vectors a = √p, b = √q at angle θ:
        ||a - b|| = 2 sin(θ/2)
    so that
        d_FR = 2θ = 4 arcsin(||√p - √q|| / 2)
        H    = ||√p - √q|| / √2
    """

    def test_rao_vs_chord(self, simplex_pairs):
        for p, q in simplex_pairs:
            chord = np.linalg.norm(np.sqrt(p) - np.sqrt(q))
            expected = 4.0 * np.arcsin(min(chord / 2.0, 1.0))

            d = rao_distance_categorical(p, q, 1e-12)

            np.testing.assert_allclose(
                d, expected, rtol=1e-7, atol=1e-10,
                err_msg=f"Mismatch at p={p}, q={q}"
            )

    def test_hellinger_vs_chord(self, simplex_pairs):
        for p, q in simplex_pairs:
            expected = np.linalg.norm(np.sqrt(p) - np.sqrt(q)) / np.sqrt(2.0)

            h = hellinger(p, q, 1e-12)

            np.testing.assert_allclose(
                h, expected, rtol=1e-7, atol=1e-10,
                err_msg=f"Mismatch at p={p}, q={q}"
            )


class TestBinaryClosedForm:
    """On Δ¹, √p = (cos φ, sin φ) with φ = arccos(√a), so d_FR = 2|φ_a - φ_b|."""

    @pytest.mark.parametrize("a, b", [
        (0.5, 0.5),
        (0.1, 0.9),
        (0.25, 0.75),
        (0.01, 0.02),
        (0.0, 1.0),
        (0.3, 0.0),
    ])
    def test_binary(self, a, b):
        p = [a, 1.0 - a]
        q = [b, 1.0 - b]
        expected = 2.0 * abs(np.arccos(np.sqrt(a)) - np.arccos(np.sqrt(b)))

        d = rao_distance_categorical(p, q, 1e-12)

        np.testing.assert_allclose(d, expected, rtol=1e-7, atol=1e-10)


class TestKnownValues:
    """Distances with known closed-form values."""

    @pytest.mark.parametrize("K", [2, 3, 4, 7, 10])
    def test_uniform_to_vertex(self, K):
        """From the barycenter to a vertex: 2 arccos(1/√K)."""
        uniform = np.full(K, 1.0 / K)
        vertex = np.zeros(K)
        vertex[0] = 1.0

        d = rao_distance_categorical(uniform, vertex, 1e-12)
        h = hellinger(uniform, vertex, 1e-12)

        np.testing.assert_allclose(d, 2.0 * np.arccos(np.sqrt(1.0 / K)), rtol=1e-12)
        np.testing.assert_allclose(h, np.sqrt(1.0 - np.sqrt(1.0 / K)), rtol=1e-12)

    def test_disjoint_supports(self):
        """Distributions with disjoint supports are maximally separated."""
        p = [0.5, 0.5, 0.0, 0.0]
        q = [0.0, 0.0, 0.25, 0.75]

        np.testing.assert_allclose(rao_distance_categorical(p, q, 1e-12), np.pi, rtol=1e-15)
        assert hellinger(p, q, 1e-12) == 1.0


class TestFisherMetric:
    """Locally, d_FR² ≈ Σ dp_i² / p_i (the Fisher information metric)."""

    def test_small_displacement(self):
        p = np.array([0.2, 0.3, 0.5])
        for direction in ([1.0, -2.0, 1.0], [1.0, 0.0, -1.0], [-3.0, 1.0, 2.0]):
            dp = 1e-4 * np.array(direction)
            expected = np.sqrt(np.sum(dp * dp / p))

            d = rao_distance_categorical(p, p + dp, 1e-12)

            np.testing.assert_allclose(d, expected, rtol=1e-3)
