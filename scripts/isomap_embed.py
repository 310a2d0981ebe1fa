#!/usr/bin/env python3
# scripts/isomap_embed.py
"""
Embed a point set with Isomap, classical MDS or PCA.

Thin wrapper around `isokit.build_isomap_embedding_from_config` / `isokit.pca`.

Usage:

  python scripts/isomap_embed.py \
      --params configs/params.yml \
      --points data/spiral.csv \
      --out out/spiral_isomap.npy \
      --method isomap

Points are read from .npy or from delimited text (comma / whitespace),
one point per row. The output .npy holds the (n, m) coordinates.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from isokit import (
    build_isomap_embedding_from_config,
    euclidean_mds,
    evaluate_embedding,
    isomap_config_from_params,
    load_params,
    pca,
    pca_config_from_params,
)


def load_points(path: Path) -> np.ndarray:
    if path.suffix == ".npy":
        return np.load(path)
    delimiter = "," if path.suffix == ".csv" else None
    return np.loadtxt(path, delimiter=delimiter, ndmin=2)


def main() -> None:
    p = argparse.ArgumentParser(description="Isomap / MDS / PCA embedding of a point set.")
    p.add_argument("--params", default=None, help="Path to configs/params.yml")
    p.add_argument("--points", required=True, help="Point set (.npy, .csv or whitespace text)")
    p.add_argument("--out", required=True, help="Output .npy for the coordinates")
    p.add_argument(
        "--method",
        choices=("isomap", "mds", "pca"),
        default="isomap",
    )
    p.add_argument("--k", type=int, default=None, help="Override isomap.n_neighbors")
    args = p.parse_args()

    params = load_params(args.params) if args.params else {}
    X = load_points(Path(args.points))
    print(f"[isomap_embed] loaded points with shape {X.shape}", flush=True)

    if args.method == "isomap":
        cfg = isomap_config_from_params(params)
        if args.k is not None:
            cfg.n_neighbors = args.k
        cfg.verbose = True
        res = build_isomap_embedding_from_config(X, cfg)
        coords = res.coordinates
        axis = res.mds.raw
    elif args.method == "mds":
        cfg = isomap_config_from_params(params)
        res = euclidean_mds(
            X,
            method=cfg.eigen_solver,
            max_iter=cfg.max_iter,
            tol=cfg.tol,
            random_state=cfg.resolve_random_state(),
        )
        coords = res.coordinates
        axis = res.raw
    else:
        pca_cfg = pca_config_from_params(params)
        res = pca(X, n_components=pca_cfg.n_components)
        coords = res.projected
        axis = res.projected[:, 0]
        print(
            f"[isomap_embed] explained variance: {np.round(res.explained_variance, 4).tolist()}",
            flush=True,
        )

    n_neighbors = min(5, X.shape[0] - 1)
    if n_neighbors >= 1:
        metrics = evaluate_embedding(X, axis, reference=X[:, 0], n_neighbors=n_neighbors)
        for key, val in metrics.items():
            print(f"[isomap_embed] {key}: {val:.4f}", flush=True)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    np.save(out, coords)
    print(f"[isomap_embed] wrote {coords.shape} coordinates -> {out}", flush=True)


if __name__ == "__main__":
    main()
