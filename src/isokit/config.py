# src/isokit/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Union

import numpy as np
import yaml
from sklearn.utils import check_random_state

from .errors import ConfigurationError


EigenSolver = Literal["eigh", "power"]
EIGEN_SOLVERS = ("eigh", "power")

RandomStateLike = Union[None, int, np.random.RandomState]


@dataclass
class IsomapConfig:
    """
    Knobs for an Isomap run (kNN graph -> bridging -> geodesics -> classical MDS).

    n_neighbors
        k of the kNN graph. Controls local connectivity; must satisfy 1 <= k < n.
    eigen_solver
        "eigh" extracts the dominant pair from a full symmetric eigendecomposition;
        "power" uses power iteration (best-effort, may warn).
    max_iter, tol
        Power-iteration convergence controls. Ignored by "eigh".
    random_state
        Seed (or RandomState) for the power-iteration start vector.
    verbose
        Print per-stage progress.
    """
    n_neighbors: int = 10
    eigen_solver: EigenSolver = "eigh"
    max_iter: int = 1000
    tol: float = 1e-10
    random_state: Optional[int] = None
    verbose: bool = False

    def validate(self) -> "IsomapConfig":
        if int(self.n_neighbors) < 1:
            raise ConfigurationError(
                f"[IsomapConfig] n_neighbors must be >= 1, got {self.n_neighbors}"
            )
        if self.eigen_solver not in EIGEN_SOLVERS:
            raise ConfigurationError(
                f"[IsomapConfig] Unknown eigen_solver: {self.eigen_solver!r}"
            )
        if int(self.max_iter) < 1:
            raise ConfigurationError(
                f"[IsomapConfig] max_iter must be >= 1, got {self.max_iter}"
            )
        if not self.tol > 0:
            raise ConfigurationError(f"[IsomapConfig] tol must be > 0, got {self.tol}")
        return self

    def resolve_random_state(self) -> np.random.RandomState:
        return check_random_state(self.random_state)


@dataclass
class PCAConfig:
    # None => keep every input dimension
    n_components: Optional[int] = None

    def validate(self) -> "PCAConfig":
        if self.n_components is not None and int(self.n_components) < 1:
            raise ConfigurationError(
                f"[PCAConfig] n_components must be >= 1, got {self.n_components}"
            )
        return self


def _filter_fields(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Drop any keys not in the dataclass fields.
    Prevents crashes if params.yml has extra keys.
    """
    valid = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in valid}


def isomap_config_from_params(
    params: Mapping[str, Any],
    key: str = "isomap",
) -> IsomapConfig:
    """
    Build an IsomapConfig from a params.yml-style dict.

    Looks up params[key], filters unknown keys, and applies defaults
    from the dataclass for anything not specified.
    """
    block = dict(params.get(key) or {})
    return IsomapConfig(**_filter_fields(IsomapConfig, block)).validate()


def pca_config_from_params(
    params: Mapping[str, Any],
    key: str = "pca",
) -> PCAConfig:
    block = dict(params.get(key) or {})
    return PCAConfig(**_filter_fields(PCAConfig, block)).validate()


def load_params(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a params.yml file. An empty file yields an empty dict."""
    path = Path(path)
    with path.open("r") as f:
        params = yaml.safe_load(f)
    if params is None:
        return {}
    if not isinstance(params, dict):
        raise ConfigurationError(
            f"[load_params] expected a mapping at the top of {path}, got {type(params).__name__}"
        )
    return params
