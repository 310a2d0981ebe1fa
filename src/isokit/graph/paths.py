# src/isokit/graph/paths.py
"""
Dijkstra shortest paths over a non-negative weighted graph.

The minimum-distance unvisited vertex is found by a linear scan rather than a
heap: O(n^2) per source, O(n^3) for all pairs. Expected graphs have a few
hundred vertices, where this is adequate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

import numpy as np

from ..errors import ConfigurationError
from ..utils import as_square_matrix, log
from .types import WeightedGraph

GraphLike = Union[WeightedGraph, np.ndarray]


@dataclass
class ShortestPaths:
    source: int
    distances: np.ndarray       # [n], np.inf = unreachable
    predecessors: np.ndarray    # [n], -1 = none

    def path_to(self, end: int) -> List[int]:
        if not np.isfinite(self.distances[end]):
            return []
        path = [int(end)]
        while path[-1] != self.source:
            path.append(int(self.predecessors[path[-1]]))
        path.reverse()
        return path


def _distance_weights(graph: GraphLike) -> np.ndarray:
    """
    Dense weights with np.inf for every absent edge and a zero diagonal.
    A raw ndarray is taken to already use np.inf as its no-edge sentinel.
    """
    if isinstance(graph, WeightedGraph):
        W = graph.as_distance_weights()
    else:
        W = as_square_matrix(graph, caller="shortest_paths", allow_inf=True)
        np.fill_diagonal(W, 0.0)
    if (W < 0).any():
        raise ConfigurationError("[shortest_paths] negative edge weights are not supported")
    return W


def _check_vertex(v: int, n: int, name: str) -> int:
    if not 0 <= v < n:
        raise ConfigurationError(f"[shortest_paths] {name}={v} out of range for {n} vertices")
    return int(v)


def _dijkstra(W: np.ndarray, source: int) -> ShortestPaths:
    n = W.shape[0]
    dist = np.full(n, np.inf)
    prev = np.full(n, -1, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)
    dist[source] = 0.0

    for _ in range(n):
        candidates = np.where(visited, np.inf, dist)
        u = int(np.argmin(candidates))
        if not np.isfinite(candidates[u]):
            break  # everything left is unreachable
        visited[u] = True

        row = W[u]
        alt = dist[u] + row
        better = ~visited & np.isfinite(row) & (alt < dist)
        dist[better] = alt[better]
        prev[better] = u

    return ShortestPaths(source=source, distances=dist, predecessors=prev)


def dijkstra(graph: GraphLike, source: int) -> ShortestPaths:
    W = _distance_weights(graph)
    source = _check_vertex(source, W.shape[0], "source")
    return _dijkstra(W, source)


def shortest_path(graph: GraphLike, start: int, end: int) -> List[int]:
    """Vertex sequence start -> end (inclusive), or [] if end is unreachable."""
    W = _distance_weights(graph)
    start = _check_vertex(start, W.shape[0], "start")
    end = _check_vertex(end, W.shape[0], "end")
    return _dijkstra(W, start).path_to(end)


def shortest_path_length(graph: GraphLike, start: int, end: int) -> float:
    W = _distance_weights(graph)
    start = _check_vertex(start, W.shape[0], "start")
    end = _check_vertex(end, W.shape[0], "end")
    return float(_dijkstra(W, start).distances[end])


def all_pairs_shortest_paths(graph: GraphLike, verbose: bool = False) -> np.ndarray:
    """
    Geodesic distance matrix: row i is dijkstra(graph, i).distances.
    Unreachable pairs stay np.inf.
    """
    W = _distance_weights(graph)
    n = W.shape[0]
    log("all_pairs_shortest_paths", f"running Dijkstra from {n} sources", verbose)
    G = np.empty((n, n))
    for i in range(n):
        G[i] = _dijkstra(W, i).distances
    return G
