# src/isokit/evaluate.py

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
from scipy.stats import kendalltau, spearmanr
from sklearn.neighbors import NearestNeighbors

from .errors import ConfigurationError


def rank_agreement(values, reference) -> Dict[str, float]:
    """
    Rank correlation between a 1-D embedding and a reference ordering
    (e.g. the original coordinate along a known axis).

    Returns
    -------
    metrics
        ``spearman`` and ``kendall`` coefficients. Both are NaN when either
        input is constant.
    """
    v = np.asarray(values, dtype=float).ravel()
    r = np.asarray(reference, dtype=float).ravel()
    if v.shape != r.shape:
        raise ConfigurationError(
            f"[rank_agreement] values and reference differ in length: {v.shape[0]} vs {r.shape[0]}"
        )
    if v.shape[0] < 2 or np.ptp(v) == 0 or np.ptp(r) == 0:
        return {"spearman": float("nan"), "kendall": float("nan")}
    rho, _ = spearmanr(v, r)
    tau, _ = kendalltau(v, r)
    return {"spearman": float(rho), "kendall": float(tau)}


def knn_graph_overlap(
    X_base: np.ndarray,
    X_embed: np.ndarray,
    n_neighbors: int = 5,
) -> Dict[str, float]:
    """
    How much of each point's kNN neighbourhood survives the embedding.

    Parameters
    ----------
    X_base
        Reference representation, shape [n, d_base].
    X_embed
        Candidate embedding, shape [n, d_embed].
    n_neighbors
        k for kNN (excluding self).

    Returns
    -------
    metrics
        mean and std of per-point Jaccard overlap.
    """
    X_base = np.asarray(X_base, dtype=float)
    X_embed = np.asarray(X_embed, dtype=float)
    if X_embed.ndim == 1:
        X_embed = X_embed[:, None]
    if X_base.shape[0] != X_embed.shape[0]:
        raise ConfigurationError(
            f"[knn_graph_overlap] X_base and X_embed must have same number of rows; "
            f"got {X_base.shape[0]} and {X_embed.shape[0]}"
        )
    if not 1 <= n_neighbors < X_base.shape[0]:
        raise ConfigurationError(
            f"[knn_graph_overlap] n_neighbors must be in [1, {X_base.shape[0] - 1}], got {n_neighbors}"
        )

    nn_base = NearestNeighbors(n_neighbors=n_neighbors + 1).fit(X_base)
    nn_emb = NearestNeighbors(n_neighbors=n_neighbors + 1).fit(X_embed)

    _, idx_base = nn_base.kneighbors(X_base)
    _, idx_emb = nn_emb.kneighbors(X_embed)

    overlaps = []
    for i, (nb, ne) in enumerate(zip(idx_base, idx_emb)):
        # drop self; with duplicate points it may not sit in column 0
        set_b = set(nb.tolist()) - {i}
        set_e = set(ne.tolist()) - {i}
        union = len(set_b | set_e)
        if union > 0:
            overlaps.append(len(set_b & set_e) / union)

    overlaps_arr = np.asarray(overlaps, dtype=float)
    return {
        "knn_jaccard_mean": float(np.nanmean(overlaps_arr)),
        "knn_jaccard_std": float(np.nanstd(overlaps_arr)),
    }


def evaluate_embedding(
    points,
    embedding,
    reference: Optional[np.ndarray] = None,
    n_neighbors: int = 5,
) -> Dict[str, Any]:
    """
    Aggregate embedding diagnostics.

      - kNN neighbourhood preservation against ``points``
      - optional rank agreement between the first embedding axis and ``reference``
    """
    X = np.asarray(points, dtype=float)
    E = np.asarray(embedding, dtype=float)
    if E.ndim == 1:
        E = E[:, None]

    metrics: Dict[str, Any] = {}
    metrics.update(knn_graph_overlap(X, E, n_neighbors=n_neighbors))
    if reference is not None:
        metrics.update(rank_agreement(E[:, 0], reference))
    return metrics
