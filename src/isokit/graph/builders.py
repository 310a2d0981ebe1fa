# src/isokit/graph/builders.py
"""
Graph construction from a point set.

Both builders compute the full pairwise distance matrix, so cost and memory
are O(n^2). That is fine for the few-hundred-point sets this toolkit targets;
larger inputs should be subsampled first.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial.distance import cdist

from ..errors import ConfigurationError
from ..utils import as_point_set
from .types import WeightedGraph


def _distances(X: np.ndarray) -> np.ndarray:
    D = cdist(X, X, metric="euclidean")
    np.fill_diagonal(D, 0.0)
    return D


def pairwise_distances(points) -> np.ndarray:
    """Symmetric Euclidean distance matrix with an exact zero diagonal."""
    return _distances(as_point_set(points, caller="pairwise_distances"))


def build_knn_graph(points, k: int) -> WeightedGraph:
    """
    Union kNN graph.

    Each vertex picks its k nearest *other* vertices (ties -> lower index first)
    and every pick becomes an undirected edge weighted by the true distance.
    A vertex chosen by many others can therefore end up with degree > k.
    Absent edges hold np.inf.
    """
    D = _distances(as_point_set(points, caller="build_knn_graph"))
    n = D.shape[0]
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1 or k >= n:
        raise ConfigurationError(
            f"[build_knn_graph] k must satisfy 1 <= k < n (n={n}), got k={k}"
        )
    k = int(k)

    # self sorts first at distance 0; push it to the end so it is never picked
    ranked = D.copy()
    np.fill_diagonal(ranked, np.inf)
    order = np.argsort(ranked, axis=1, kind="stable")[:, :k]

    W = np.full((n, n), np.inf)
    np.fill_diagonal(W, 0.0)
    rows = np.repeat(np.arange(n), k)
    cols = order.reshape(-1)
    W[rows, cols] = D[rows, cols]
    W[cols, rows] = D[rows, cols]
    return WeightedGraph(weights=W, kind="knn")


def build_epsilon_graph(points, epsilon: float) -> WeightedGraph:
    """Indicator graph: 1.0 where distance <= epsilon, 0.0 elsewhere (and on the diagonal)."""
    if not np.isfinite(epsilon) or epsilon < 0:
        raise ConfigurationError(
            f"[build_epsilon_graph] epsilon must be a finite value >= 0, got {epsilon}"
        )
    D = _distances(as_point_set(points, caller="build_epsilon_graph"))
    W = (D <= epsilon).astype(np.float64)
    np.fill_diagonal(W, 0.0)
    return WeightedGraph(weights=W, kind="epsilon")
