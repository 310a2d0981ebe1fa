# src/isokit/utils.py

from __future__ import annotations

import numpy as np
from sklearn.utils import check_array

from .errors import ConfigurationError


def log(tag: str, msg: str, verbose: bool = True) -> None:
    if verbose:
        print(f"[{tag}] {msg}", flush=True)


def as_point_set(points, caller: str = "isokit") -> np.ndarray:
    """
    Coerce ``points`` into a read-only-by-convention float64 array of shape (n, d).

    - A 1-D input is rejected rather than silently reshaped.
    - An empty point set raises ConfigurationError.
    - The returned array is always a fresh copy.
    """
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (ValueError, TypeError) as exc:
        raise ConfigurationError(f"[{caller}] invalid point set: {exc}") from exc
    if arr.ndim != 2 or arr.shape[0] == 0:
        raise ConfigurationError(
            f"[{caller}] expected a non-empty (n, d) point set, got shape {arr.shape}"
        )
    try:
        X = check_array(arr, dtype=np.float64, copy=True, ensure_min_features=1)
    except ValueError as exc:
        raise ConfigurationError(f"[{caller}] invalid point set: {exc}") from exc
    return X


def as_square_matrix(matrix, caller: str = "isokit", allow_inf: bool = False) -> np.ndarray:
    M = np.array(matrix, dtype=np.float64, copy=True)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise ConfigurationError(
            f"[{caller}] expected a square matrix, got shape {M.shape}"
        )
    if np.isnan(M).any():
        raise ConfigurationError(f"[{caller}] matrix contains NaN entries")
    if not allow_inf and not np.isfinite(M).all():
        raise ConfigurationError(f"[{caller}] matrix contains non-finite entries")
    return M
