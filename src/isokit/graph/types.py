# src/isokit/graph/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np

GraphKind = Literal["knn", "epsilon"]

# "no edge" sentinel per graph flavour
NO_EDGE = {
    "knn": np.inf,
    "epsilon": 0.0,
}


@dataclass
class WeightedGraph:
    """
    Symmetric weighted adjacency over vertices 0..n-1.

    The two flavours disagree on what a weight means:

      - knn:     weight = Euclidean distance, np.inf = no edge
      - epsilon: weight = 1.0 (connected),    0.0    = no edge

    Bridging may later add distance-weighted edges to either flavour.
    The diagonal is always zero and never counts as an edge.
    """
    weights: np.ndarray              # [n, n]
    kind: GraphKind = "knn"

    @property
    def n_vertices(self) -> int:
        return int(self.weights.shape[0])

    @property
    def no_edge(self) -> float:
        return NO_EDGE[self.kind]

    def edge_mask(self) -> np.ndarray:
        mask = self.weights != self.no_edge
        np.fill_diagonal(mask, False)
        return mask

    def degrees(self) -> np.ndarray:
        return self.edge_mask().sum(axis=1)

    def add_edge(self, i: int, j: int, weight: float) -> None:
        self.weights[i, j] = weight
        self.weights[j, i] = weight

    def copy(self) -> "WeightedGraph":
        return WeightedGraph(weights=self.weights.copy(), kind=self.kind)

    def as_distance_weights(self) -> np.ndarray:
        """Weights with every absent edge mapped to np.inf (what Dijkstra consumes)."""
        W = np.where(self.edge_mask(), self.weights, np.inf)
        np.fill_diagonal(W, 0.0)
        return W
