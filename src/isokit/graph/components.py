# src/isokit/graph/components.py

from __future__ import annotations

from typing import List

import numpy as np
from scipy.spatial.distance import cdist

from ..errors import ConfigurationError, GraphConnectivityError
from ..utils import as_point_set, log
from .types import WeightedGraph


def find_components(graph: WeightedGraph) -> List[List[int]]:
    """
    Connected components by depth-first traversal over present edges.

    Components come out ordered by their lowest vertex (the first one the scan
    discovers); vertices inside a component are listed in discovery order.
    """
    mask = graph.edge_mask()
    n = graph.n_vertices
    visited = np.zeros(n, dtype=bool)
    components: List[List[int]] = []

    for root in range(n):
        if visited[root]:
            continue
        comp: List[int] = []
        stack = [root]
        while stack:
            u = stack.pop()
            if visited[u]:
                continue
            visited[u] = True
            comp.append(u)
            # reversed so the lowest-index neighbour is explored first
            for v in np.flatnonzero(mask[u] & ~visited)[::-1]:
                stack.append(int(v))
        components.append(comp)
    return components


def connect_components(
    graph: WeightedGraph,
    points,
    verbose: bool = False,
) -> WeightedGraph:
    """
    Return a connected copy of ``graph``.

    While more than one component remains, the globally closest
    cross-component pair (Euclidean distance on ``points``, not graph weights)
    is joined by an edge weighted with that distance. Each bridge merges two
    components, so at most n - 1 bridges are added. Existing edges are never
    touched and the caller's graph is not mutated.

    Raises GraphConnectivityError if no finite bridge can be found.
    """
    X = as_point_set(points, caller="connect_components")
    if X.shape[0] != graph.n_vertices:
        raise ConfigurationError(
            f"[connect_components] graph has {graph.n_vertices} vertices "
            f"but {X.shape[0]} points were given"
        )

    out = graph.copy()
    components = find_components(out)
    n_bridges = 0
    while len(components) > 1:
        best_i, best_j, best_dist = -1, -1, np.inf
        for a, comp_a in enumerate(components):
            for comp_b in components[a + 1 :]:
                d = cdist(X[comp_a], X[comp_b])
                ia, jb = np.unravel_index(int(np.argmin(d)), d.shape)
                if d[ia, jb] < best_dist:
                    best_dist = float(d[ia, jb])
                    best_i, best_j = comp_a[ia], comp_b[jb]

        if best_i < 0 or not np.isfinite(best_dist):
            raise GraphConnectivityError(
                f"[connect_components] no finite bridge between {len(components)} components"
            )

        out.add_edge(best_i, best_j, best_dist)
        n_bridges += 1
        log(
            "connect_components",
            f"bridged {best_i} <-> {best_j} (d={best_dist:.4g}), "
            f"{len(components) - 1} components left",
            verbose,
        )
        components = find_components(out)

    if n_bridges:
        log("connect_components", f"added {n_bridges} bridge edge(s)", verbose)
    return out
