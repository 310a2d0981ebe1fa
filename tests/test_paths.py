"""
Tests for Dijkstra single-source, path reconstruction and all-pairs geodesics.
"""

import numpy as np
import pytest
from scipy.sparse.csgraph import shortest_path as scipy_shortest_path

from isokit import (
    ConfigurationError,
    all_pairs_shortest_paths,
    build_epsilon_graph,
    build_knn_graph,
    connect_components,
    dijkstra,
    shortest_path,
    shortest_path_length,
)


class TestDijkstra:

    def test_unit_square_knn(self, unit_square):
        g = build_knn_graph(unit_square, 1)
        res = dijkstra(g, 0)
        np.testing.assert_allclose(res.distances, [0.0, 1.0, 2.0, 1.0])
        assert res.source == 0

    def test_unit_square_cycle(self, unit_square):
        g = build_knn_graph(unit_square, 2)
        np.testing.assert_allclose(dijkstra(g, 0).distances, [0.0, 1.0, 2.0, 1.0])
        np.testing.assert_allclose(dijkstra(g, 2).distances, [2.0, 1.0, 0.0, 1.0])

    def test_epsilon_graph_counts_hops(self, unit_square):
        g = build_epsilon_graph(unit_square, 1.2)
        np.testing.assert_allclose(dijkstra(g, 0).distances, [0.0, 1.0, 2.0, 1.0])
        g = build_epsilon_graph(unit_square, 1.5)
        np.testing.assert_allclose(dijkstra(g, 0).distances, [0.0, 1.0, 1.0, 1.0])

    def test_edge_relaxation_holds(self, random_points):
        g = connect_components(build_knn_graph(random_points, 3), random_points)
        for s in (0, 7, 39):
            dist = dijkstra(g, s).distances
            assert dist[s] == 0.0
            rows, cols = np.nonzero(g.edge_mask())
            assert (dist[cols] <= dist[rows] + g.weights[rows, cols] + 1e-12).all()

    def test_unreachable_is_inf(self, two_clusters):
        g = build_knn_graph(two_clusters, 1)
        res = dijkstra(g, 0)
        assert np.isinf(res.distances[3:]).all()
        assert (res.predecessors[3:] == -1).all()

    def test_raw_matrix_input(self):
        W = np.array(
            [
                [0.0, 4.0, 1.0],
                [4.0, 0.0, 1.0],
                [1.0, 1.0, 0.0],
            ]
        )
        np.testing.assert_allclose(dijkstra(W, 0).distances, [0.0, 2.0, 1.0])

    def test_negative_weight_rejected(self):
        W = np.array([[0.0, -1.0], [-1.0, 0.0]])
        with pytest.raises(ConfigurationError):
            dijkstra(W, 0)

    @pytest.mark.parametrize("source", [-1, 4])
    def test_source_out_of_range(self, unit_square, source):
        g = build_knn_graph(unit_square, 1)
        with pytest.raises(ConfigurationError):
            dijkstra(g, source)


class TestShortestPath:

    def test_path_endpoints(self, unit_square):
        g = build_knn_graph(unit_square, 1)
        assert shortest_path(g, 3, 2) == [3, 0, 1, 2]
        assert shortest_path(g, 2, 3) == [2, 1, 0, 3]

    def test_same_vertex(self, unit_square):
        g = build_knn_graph(unit_square, 1)
        assert shortest_path(g, 1, 1) == [1]

    def test_unreachable_is_empty(self, two_clusters):
        g = build_knn_graph(two_clusters, 1)
        assert shortest_path(g, 0, 5) == []
        assert np.isinf(shortest_path_length(g, 0, 5))

    def test_length_matches_path(self, random_points):
        g = connect_components(build_knn_graph(random_points, 2), random_points)
        path = shortest_path(g, 0, 20)
        assert path[0] == 0 and path[-1] == 20
        walked = sum(g.weights[u, v] for u, v in zip(path[:-1], path[1:]))
        assert shortest_path_length(g, 0, 20) == pytest.approx(walked)


class TestAllPairs:

    def test_matches_scipy(self, random_points):
        g = connect_components(build_knn_graph(random_points, 3), random_points)
        G = all_pairs_shortest_paths(g)
        ref = scipy_shortest_path(g.as_distance_weights(), method="D", directed=False)
        np.testing.assert_allclose(G, ref)

    def test_symmetric_zero_diagonal(self, random_points):
        g = connect_components(build_knn_graph(random_points, 3), random_points)
        G = all_pairs_shortest_paths(g)
        np.testing.assert_allclose(G, G.T)
        np.testing.assert_array_equal(np.diag(G), 0.0)
        assert np.isfinite(G).all()

    def test_disconnected_keeps_inf(self, two_clusters):
        G = all_pairs_shortest_paths(build_knn_graph(two_clusters, 1))
        assert np.isinf(G[:3, 3:]).all()
        assert np.isfinite(G[:3, :3]).all()

    def test_does_not_mutate_graph(self, unit_square):
        g = build_knn_graph(unit_square, 1)
        before = g.weights.copy()
        all_pairs_shortest_paths(g)
        np.testing.assert_array_equal(g.weights, before)
