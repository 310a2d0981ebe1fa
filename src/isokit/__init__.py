# src/isokit/__init__.py
from __future__ import annotations

# Config + errors
from .config import (
    IsomapConfig,
    PCAConfig,
    isomap_config_from_params,
    pca_config_from_params,
    load_params,
)
from .errors import (
    IsokitError,
    ConfigurationError,
    GraphConnectivityError,
    ImplementationError,
    NumericInstabilityWarning,
)

# Graphs
from isokit.graph import (
    WeightedGraph,
    ShortestPaths,
    pairwise_distances,
    build_knn_graph,
    build_epsilon_graph,
    find_components,
    connect_components,
    dijkstra,
    shortest_path,
    shortest_path_length,
    all_pairs_shortest_paths,
)

# Spectral
from isokit.spectral import (
    Eigenpair,
    Spectrum,
    symmetric_eigh,
    power_iteration,
    dominant_eigenpair,
    PCAResult,
    MDSResult,
    pca,
    project_onto_first_component,
    classical_mds,
    euclidean_mds,
)

# Isomap
from .embed import (
    IsomapEmbedder,
    IsomapResult,
    isomap,
    build_isomap_embedding_from_config,
)
from .evaluate import rank_agreement, knn_graph_overlap, evaluate_embedding

__version__ = "0.1.0"
