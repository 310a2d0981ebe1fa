# src/isokit/spectral/projection.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..errors import ConfigurationError
from ..graph.builders import pairwise_distances
from ..utils import as_point_set, as_square_matrix
from .eigen import dominant_eigenpair, symmetric_eigh


@dataclass
class PCAResult:
    projected: np.ndarray            # [n, k]
    components: np.ndarray           # [d, k], columns are the basis
    values: np.ndarray               # [d], full descending spectrum
    explained_variance: np.ndarray   # [k]
    mean: np.ndarray                 # [d]


@dataclass
class MDSResult:
    """
    Rank-1 classical MDS output.

    ``coordinates`` are display-aligned: x spans the source data's x-extent
    and y is the source's mean y. ``raw`` holds the unscaled 1-D MDS values.
    """
    coordinates: np.ndarray          # [n, 2]
    eigenvectors: np.ndarray         # [1, n]
    eigenvalue: float                # clamped to >= 0
    raw: np.ndarray                  # [n]
    converged: bool = True


def pca(points, n_components: Optional[int] = None) -> PCAResult:
    """
    Principal component analysis via the covariance eigendecomposition.

    Parameters
    ----------
    points
        (n, d) point set, n >= 2.
    n_components
        Number of components to keep, 1 <= n_components <= d. Defaults to d.

    Returns
    -------
    PCAResult
        ``explained_variance[j] = values[j] / values.sum()`` over the *full*
        spectrum, so it sums to 1 when every component is kept. A point set
        with zero total variance reports all-zero ratios.
    """
    X = as_point_set(points, caller="pca")
    n, d = X.shape
    if n < 2:
        raise ConfigurationError(f"[pca] need at least 2 points, got {n}")
    k = d if n_components is None else n_components
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or not 1 <= k <= d:
        raise ConfigurationError(
            f"[pca] n_components must be in [1, {d}], got {n_components}"
        )
    k = int(k)

    mean = X.mean(axis=0)
    Xc = X - mean
    cov = (Xc.T @ Xc) / (n - 1)

    spectrum = symmetric_eigh(cov)
    basis = spectrum.vectors[:, :k]
    projected = Xc @ basis

    total = spectrum.values.sum()
    if total > 0:
        explained = spectrum.values[:k] / total
    else:
        explained = np.zeros(k)

    return PCAResult(
        projected=projected,
        components=basis.copy(),
        values=spectrum.values,
        explained_variance=explained,
        mean=mean,
    )


def project_onto_first_component(points) -> np.ndarray:
    """Each point replaced by its orthogonal projection onto the first principal axis, in input coordinates."""
    res = pca(points, n_components=1)
    pc1 = res.components[:, 0]
    return res.projected[:, :1] * pc1[None, :] + res.mean


def _double_center(D: np.ndarray) -> np.ndarray:
    n = D.shape[0]
    C = np.eye(n) - np.ones((n, n)) / n
    return -0.5 * C @ (D ** 2) @ C


def _align_to_source(raw: np.ndarray, X: np.ndarray) -> np.ndarray:
    """
    Rescale 1-D values onto the source's x-extent and park them at its mean y.
    Purely for display next to the input; not part of MDS itself.
    """
    x = X[:, 0]
    y_const = X[:, 1].mean() if X.shape[1] > 1 else 0.0
    orig_width = x.max() - x.min()
    proj_width = raw.max() - raw.min()
    scale = orig_width / proj_width if proj_width > 0 and orig_width > 0 else 1.0
    x_center = 0.5 * (x.min() + x.max())

    coords = np.empty((raw.shape[0], 2))
    coords[:, 0] = (raw - raw.mean()) * scale + x_center
    coords[:, 1] = y_const
    return coords


def classical_mds(
    distances,
    points,
    method: str = "eigh",
    max_iter: int = 1000,
    tol: float = 1e-10,
    random_state=None,
    stacklevel: int = 2,
) -> MDSResult:
    """
    One-dimensional classical (Torgerson) MDS.

    B = -1/2 * C D^2 C with C = I - J/n; only the dominant eigenpair (v, lam)
    of B is used, giving raw coordinates v * sqrt(max(0, lam)). These are then
    aligned to ``points`` for display (see MDSResult).

    ``method`` picks the eigensolver ("eigh" or "power"); the power-iteration
    controls are forwarded unchanged.
    """
    D = as_square_matrix(distances, caller="classical_mds")
    X = as_point_set(points, caller="classical_mds")
    if X.shape[0] != D.shape[0]:
        raise ConfigurationError(
            f"[classical_mds] distance matrix is {D.shape[0]}x{D.shape[0]} "
            f"but {X.shape[0]} points were given"
        )

    B = _double_center(D)
    pair = dominant_eigenpair(
        B,
        method=method,
        max_iter=max_iter,
        tol=tol,
        random_state=random_state,
        stacklevel=stacklevel + 1,
    )
    lam = max(0.0, pair.value)
    raw = pair.vector * np.sqrt(lam)

    return MDSResult(
        coordinates=_align_to_source(raw, X),
        eigenvectors=pair.vector[None, :].copy(),
        eigenvalue=lam,
        raw=raw,
        converged=pair.converged,
    )


def euclidean_mds(points, **kwargs) -> MDSResult:
    """Classical MDS on plain Euclidean distances (equivalent to PCA onto one axis, up to sign)."""
    return classical_mds(pairwise_distances(points), points, **kwargs)
