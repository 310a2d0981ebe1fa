"""
Tests for the symmetric eigensolver and power iteration.
"""

import warnings

import numpy as np
import pytest

from isokit import (
    ConfigurationError,
    NumericInstabilityWarning,
    dominant_eigenpair,
    power_iteration,
    symmetric_eigh,
)


@pytest.fixture
def spd_matrix():
    """Symmetric 6x6 with a well separated spectrum (top ratio 0.5)."""
    rng = np.random.RandomState(3)
    Q, _ = np.linalg.qr(rng.randn(6, 6))
    return Q @ np.diag([10.0, 5.0, 3.0, 2.0, 1.0, 0.5]) @ Q.T


class TestSymmetricEigh:

    def test_descending_and_reconstructs(self, spd_matrix):
        spectrum = symmetric_eigh(spd_matrix)
        assert len(spectrum) == 6
        assert (np.diff(spectrum.values) <= 0).all()
        V = spectrum.vectors
        np.testing.assert_allclose(V @ np.diag(spectrum.values) @ V.T, spd_matrix, atol=1e-10)
        np.testing.assert_allclose(V.T @ V, np.eye(6), atol=1e-10)

    def test_sign_convention(self, spd_matrix):
        V = symmetric_eigh(spd_matrix).vectors
        idx = np.argmax(np.abs(V), axis=0)
        assert (V[idx, np.arange(6)] > 0).all()

    def test_top_slice(self, spd_matrix):
        spectrum = symmetric_eigh(spd_matrix)
        top = spectrum.top(2)
        assert top.vectors.shape == (6, 2)
        np.testing.assert_array_equal(top.values, spectrum.values[:2])

    def test_rejects_non_square(self):
        with pytest.raises(ConfigurationError):
            symmetric_eigh(np.ones((2, 3)))


class TestPowerIteration:

    def test_diagonal(self):
        M = np.diag([5.0, 2.0, 1.0])
        pair = power_iteration(M, random_state=0)
        assert pair.converged
        assert pair.value == pytest.approx(5.0, abs=1e-8)
        assert abs(pair.vector[0]) == pytest.approx(1.0, abs=1e-6)
        assert np.linalg.norm(pair.vector) == pytest.approx(1.0)

    def test_seeded_runs_are_identical(self, spd_matrix):
        a = power_iteration(spd_matrix, random_state=42)
        b = power_iteration(spd_matrix, random_state=np.random.RandomState(42))
        assert a.value == b.value
        np.testing.assert_array_equal(a.vector, b.vector)

    def test_matches_eigh(self, spd_matrix):
        exact = symmetric_eigh(spd_matrix).pair(0)
        approx = power_iteration(spd_matrix, max_iter=5000, random_state=1)
        assert approx.value == pytest.approx(exact.value, rel=1e-8)
        assert abs(approx.vector @ exact.vector) == pytest.approx(1.0, abs=1e-4)

    def test_warns_when_iterations_run_out(self):
        M = np.diag([5.0, 2.0, 1.0])
        with pytest.warns(NumericInstabilityWarning):
            pair = power_iteration(M, max_iter=1, random_state=0)
        assert not pair.converged
        assert pair.n_iter == 1
        assert np.isfinite(pair.value)

    def test_warning_points_at_caller_through_dominant_eigenpair(self):
        with pytest.warns(NumericInstabilityWarning) as record:
            dominant_eigenpair(np.diag([5.0, 2.0, 1.0]), method="power", max_iter=1, random_state=0)
        hits = [w for w in record if issubclass(w.category, NumericInstabilityWarning)]
        assert hits[0].filename == __file__

    def test_no_warning_on_convergence(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", NumericInstabilityWarning)
            power_iteration(np.diag([3.0, 1.0]), random_state=0)

    def test_zero_matrix(self):
        pair = power_iteration(np.zeros((3, 3)), random_state=0)
        assert pair.value == 0.0
        assert pair.converged

    def test_negative_dominant_not_clamped(self):
        pair = power_iteration(np.diag([-4.0, 1.0]), random_state=0)
        assert pair.value == pytest.approx(-4.0, abs=1e-8)

    def test_invalid_max_iter(self):
        with pytest.raises(ConfigurationError):
            power_iteration(np.eye(2), max_iter=0)


class TestDominantEigenpair:

    def test_methods_agree(self, spd_matrix):
        a = dominant_eigenpair(spd_matrix, method="eigh")
        b = dominant_eigenpair(spd_matrix, method="power", max_iter=5000, random_state=0)
        assert a.value == pytest.approx(b.value, rel=1e-8)

    def test_unknown_method(self, spd_matrix):
        with pytest.raises(ConfigurationError):
            dominant_eigenpair(spd_matrix, method="lanczos")
