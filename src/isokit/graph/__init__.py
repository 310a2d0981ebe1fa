# src/isokit/graph/__init__.py
"""
Graph components for isokit.

This subpackage contains:
  - types:      WeightedGraph (dense adjacency + no-edge sentinel)
  - builders:   kNN and epsilon-ball graph construction
  - components: connected components and nearest-pair bridging
  - paths:      O(n^2) Dijkstra, path reconstruction, all-pairs geodesics
"""

from __future__ import annotations

from .types import WeightedGraph, NO_EDGE
from .builders import pairwise_distances, build_knn_graph, build_epsilon_graph
from .components import find_components, connect_components
from .paths import (
    ShortestPaths,
    dijkstra,
    shortest_path,
    shortest_path_length,
    all_pairs_shortest_paths,
)
