"""Pure in-memory synthetic datasets."""

from __future__ import annotations

import numpy as np

from .registry import DataSpec, DatasetSpec, register_dataset
from .utils import one_hot


def make_separable(n_points: int = 100, seed: int = 0, margin: float = 0.2) -> tuple[np.ndarray, np.ndarray]:
    """Two classes in opposite corners of the unit square.

    Class 0 lies in ``[0, 0.5 - margin/2]^2`` and class 1 in
    ``[0.5 + margin/2, 1]^2``, so the line ``x0 + x1 = 1`` separates them.
    """

    if not 0 < margin < 1:
        raise ValueError("margin must be in (0, 1)")
    rng = np.random.default_rng(seed)
    width = 0.5 - margin / 2
    n0 = n_points // 2
    n1 = n_points - n0
    x0 = rng.uniform(0.0, width, size=(n0, 2))
    x1 = rng.uniform(1.0 - width, 1.0, size=(n1, 2))
    x = np.vstack([x0, x1])
    y = np.concatenate([np.zeros(n0, dtype=np.int64), np.ones(n1, dtype=np.int64)])
    idx = rng.permutation(n_points)
    return x[idx], y[idx]


@register_dataset("separable")
def load_separable(
    *,
    n_points: int = 100,
    seed: int = 0,
    margin: float = 0.2,
    **_: object,
) -> DatasetSpec:
    x, y = make_separable(n_points=n_points, seed=seed, margin=margin)
    labels = one_hot(y, 2)
    provenance = {
        "type": "separable",
        "n_points": n_points,
        "seed": seed,
        "margin": margin,
    }
    return DatasetSpec(
        name="separable",
        inputs=x,
        labels=labels,
        data_spec=DataSpec(d_in=2, d_out=2, num_classes=2),
        provenance=provenance,
    )


__all__ = ["load_separable", "make_separable"]
