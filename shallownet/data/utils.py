"""Utility helpers for dataset loaders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import numpy as np
from sklearn.preprocessing import MinMaxScaler


@dataclass(frozen=True)
class SplitIndices:
    """Indices for train/test partitions."""

    train: np.ndarray
    test: np.ndarray

    @property
    def sizes(self) -> Mapping[str, int]:
        return {"train": int(self.train.size), "test": int(self.test.size)}


def deterministic_split(n_samples: int, *, test_split: float = 0.0, seed: int = 0) -> SplitIndices:
    """Return shuffled train/test indices for ``test_split``.

    With ``test_split == 0`` every sample is used for training, in order.
    """

    if not 0 <= test_split < 1:
        raise ValueError("test_split must be in [0, 1)")
    if test_split == 0:
        return SplitIndices(train=np.arange(n_samples), test=np.arange(0))

    rng = np.random.default_rng(seed)
    indices = np.arange(n_samples)
    rng.shuffle(indices)

    test_size = min(max(int(round(n_samples * test_split)), 1), n_samples)
    if n_samples - test_size <= 0:
        raise ValueError("Not enough samples for the requested split")
    return SplitIndices(train=indices[test_size:], test=indices[:test_size])


def one_hot(indices: np.ndarray, num_classes: int) -> np.ndarray:
    idx = np.asarray(indices).reshape(-1).astype(np.int64)
    if idx.size and (idx.min() < 0 or idx.max() >= num_classes):
        raise ValueError(f"Class indices must lie in [0, {num_classes})")
    return np.eye(num_classes, dtype=np.float64)[idx]


def minmax_scale(array: np.ndarray) -> tuple[np.ndarray, dict[str, list[float]]]:
    """Scale each column to ``[0, 1]`` returning the data and its parameters."""

    scaler = MinMaxScaler()
    scaled = scaler.fit_transform(np.asarray(array, dtype=np.float64))
    params = {
        "min": scaler.data_min_.tolist(),
        "max": scaler.data_max_.tolist(),
    }
    return scaled.astype(np.float64), params


__all__ = ["SplitIndices", "deterministic_split", "minmax_scale", "one_hot"]
