# src/isokit/spectral/eigen.py

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np
from scipy import linalg
from sklearn.utils import check_random_state

from ..errors import ConfigurationError, NumericInstabilityWarning
from ..utils import as_square_matrix


@dataclass
class Eigenpair:
    value: float
    vector: np.ndarray      # [n], unit norm
    converged: bool = True
    n_iter: int = 0


@dataclass
class Spectrum:
    """Eigenvalues in descending order; column j of ``vectors`` pairs with ``values[j]``."""
    values: np.ndarray      # [m]
    vectors: np.ndarray     # [n, m]

    def __len__(self) -> int:
        return int(self.values.shape[0])

    def top(self, k: int) -> "Spectrum":
        return Spectrum(values=self.values[:k].copy(), vectors=self.vectors[:, :k].copy())

    def pair(self, j: int = 0) -> Eigenpair:
        return Eigenpair(value=float(self.values[j]), vector=self.vectors[:, j].copy())


def _symmetrize(M: np.ndarray) -> np.ndarray:
    return 0.5 * (M + M.T)


def symmetric_eigh(matrix) -> Spectrum:
    """
    Full eigendecomposition of a symmetric matrix, sorted by descending eigenvalue.

    Uses LAPACK (``scipy.linalg.eigh``), O(d^3). The input is symmetrized first
    so round-off asymmetry from upstream products does not leak in.
    Each eigenvector's sign is fixed so its largest-magnitude entry is positive.
    """
    M = _symmetrize(as_square_matrix(matrix, caller="symmetric_eigh"))
    values, vectors = linalg.eigh(M)
    order = np.argsort(-values, kind="stable")
    values = values[order]
    vectors = vectors[:, order]

    idx = np.argmax(np.abs(vectors), axis=0)
    signs = np.sign(vectors[idx, np.arange(vectors.shape[1])])
    signs[signs == 0] = 1.0
    return Spectrum(values=values, vectors=vectors * signs)


def power_iteration(
    matrix,
    max_iter: int = 1000,
    tol: float = 1e-10,
    random_state=None,
    stacklevel: int = 2,
) -> Eigenpair:
    """
    Approximate the dominant eigenpair by repeated multiplication.

    Starts from a random unit vector in [-1, 1]^n drawn from ``random_state``.
    Each step multiplies, renormalizes and re-estimates the eigenvalue as a
    Rayleigh quotient; it stops once the estimate moves by less than ``tol``.

    The result is best effort. Nearly equal top eigenvalues converge slowly,
    and a negative dominant eigenvalue is returned as is. If ``max_iter`` runs
    out, a NumericInstabilityWarning is emitted and the last estimate is
    returned with ``converged=False``. ``stacklevel`` is handed to
    ``warnings.warn``; wrappers pass their own level + 1.
    """
    M = as_square_matrix(matrix, caller="power_iteration")
    if int(max_iter) < 1:
        raise ConfigurationError(f"[power_iteration] max_iter must be >= 1, got {max_iter}")
    n = M.shape[0]
    if n == 0:
        raise ConfigurationError("[power_iteration] empty matrix")

    rng = check_random_state(random_state)
    b = rng.uniform(-1.0, 1.0, size=n)
    b_norm = np.linalg.norm(b)
    b = b / (b_norm if b_norm > 0 else 1.0)

    lam = 0.0
    converged = False
    n_iter = 0
    for n_iter in range(1, int(max_iter) + 1):
        b_new = M @ b
        b_new_norm = np.linalg.norm(b_new)
        if b_new_norm == 0:
            # b lies in the null space; eigenvalue 0 is exact
            lam = 0.0
            converged = True
            break
        b = b_new / b_new_norm
        lam_new = float(b @ (M @ b))
        if abs(lam_new - lam) < tol:
            lam = lam_new
            converged = True
            break
        lam = lam_new

    if not converged:
        warnings.warn(
            f"[power_iteration] no convergence after {n_iter} iterations "
            f"(tol={tol}); returning best estimate {lam:.6g}",
            NumericInstabilityWarning,
            stacklevel=stacklevel,
        )
    return Eigenpair(value=lam, vector=b, converged=converged, n_iter=n_iter)


def dominant_eigenpair(
    matrix,
    method: str = "eigh",
    max_iter: int = 1000,
    tol: float = 1e-10,
    random_state=None,
    stacklevel: int = 2,
) -> Eigenpair:
    """
    Largest-eigenvalue pair of a symmetric matrix.

    method="eigh" slices the full spectrum from ``symmetric_eigh``;
    method="power" runs ``power_iteration`` with the given controls.
    """
    if method == "eigh":
        return symmetric_eigh(matrix).pair(0)
    if method == "power":
        return power_iteration(
            matrix,
            max_iter=max_iter,
            tol=tol,
            random_state=random_state,
            stacklevel=stacklevel + 1,
        )
    raise ConfigurationError(f"[dominant_eigenpair] Unknown method: {method!r}")
