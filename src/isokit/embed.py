# src/isokit/embed.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np

from .config import IsomapConfig
from .errors import ImplementationError
from .graph import (
    WeightedGraph,
    all_pairs_shortest_paths,
    build_knn_graph,
    connect_components,
    find_components,
)
from .spectral import MDSResult, classical_mds
from .utils import as_point_set, log


@dataclass
class IsomapResult:
    """
    Isomap embedding plus the intermediate geometry that produced it.
    """
    mds: MDSResult
    graph: WeightedGraph          # raw union-kNN graph
    connected: WeightedGraph      # graph after bridging
    geodesic: np.ndarray          # [n, n] all-pairs shortest paths
    n_components_before: int      # components in the raw kNN graph

    @property
    def coordinates(self) -> np.ndarray:
        return self.mds.coordinates


class IsomapEmbedder:
    """
    - Builds the union kNN graph
    - Bridges disconnected components on the original coordinates
    - Computes geodesic distances with all-pairs Dijkstra
    - Delegates the embedding to rank-1 classical MDS

    Holds configuration only; ``embed`` keeps no state between calls.
    """

    def __init__(self, config: IsomapConfig | None = None):
        self.config = (config or IsomapConfig()).validate()

    def embed(self, points) -> IsomapResult:
        cfg = self.config
        X = as_point_set(points, caller="IsomapEmbedder")
        verbose = cfg.verbose

        log("Isomap", f"building kNN graph (k={cfg.n_neighbors}, n={X.shape[0]})...", verbose)
        graph = build_knn_graph(X, cfg.n_neighbors)
        n_before = len(find_components(graph))
        log("Isomap", f"kNN graph has {n_before} component(s)", verbose)

        connected = connect_components(graph, X, verbose=verbose)
        geodesic = all_pairs_shortest_paths(connected, verbose=verbose)

        unreachable = np.argwhere(~np.isfinite(geodesic))
        if unreachable.size:
            i, j = unreachable[0]
            raise ImplementationError(
                f"[Isomap] {len(unreachable)} unreachable geodesic pair(s) after bridging, "
                f"e.g. ({i}, {j})"
            )

        log("Isomap", f"classical MDS via {cfg.eigen_solver!r} solver", verbose)
        mds = classical_mds(
            geodesic,
            X,
            method=cfg.eigen_solver,
            max_iter=cfg.max_iter,
            tol=cfg.tol,
            random_state=cfg.resolve_random_state(),
            stacklevel=3,
        )
        return IsomapResult(
            mds=mds,
            graph=graph,
            connected=connected,
            geodesic=geodesic,
            n_components_before=n_before,
        )


def isomap(points, k: int, **kwargs) -> IsomapResult:
    """Functional shortcut: ``IsomapEmbedder(IsomapConfig(n_neighbors=k, **kwargs)).embed(points)``."""
    return IsomapEmbedder(IsomapConfig(n_neighbors=k, **kwargs)).embed(points)


def _ensure_isomap_cfg(cfg: IsomapConfig | Mapping[str, Any]) -> IsomapConfig:
    if isinstance(cfg, IsomapConfig):
        return cfg
    return IsomapConfig(**dict(cfg))


def build_isomap_embedding_from_config(
    points,
    cfg: IsomapConfig | Mapping[str, Any],
) -> IsomapResult:
    return IsomapEmbedder(_ensure_isomap_cfg(cfg)).embed(points)
