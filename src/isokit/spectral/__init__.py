# src/isokit/spectral/__init__.py
"""
Spectral components for isokit.

  - eigen:      symmetric eigendecomposition and power iteration
  - projection: PCA and rank-1 classical MDS
"""

from __future__ import annotations

from .eigen import (
    Eigenpair,
    Spectrum,
    symmetric_eigh,
    power_iteration,
    dominant_eigenpair,
)
from .projection import (
    PCAResult,
    MDSResult,
    pca,
    project_onto_first_component,
    classical_mds,
    euclidean_mds,
)
