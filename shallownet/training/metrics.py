"""Evaluation metrics for trained networks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping

import numpy as np

from ..core.types import Array


@dataclass(frozen=True)
class MetricResult:
    name: str
    value: float


def _check_pair(predictions: Array, labels: Array) -> tuple[Array, Array]:
    preds = np.asarray(predictions, dtype=np.float64)
    targs = np.asarray(labels, dtype=np.float64)
    if preds.shape != targs.shape:
        raise ValueError(f"Predictions {preds.shape} and labels {targs.shape} differ in shape")
    return preds, targs


def label_indices(labels: Array) -> Array:
    """Index of the first column equal to 1.0 in each one-hot row (0 if none)."""

    hits = np.asarray(labels) == 1.0
    return np.argmax(hits, axis=1)


def accuracy(predictions: Array, labels: Array) -> float:
    """Fraction of rows whose true-class output equals the row maximum.

    Ties with another column count as correct.
    """

    preds, targs = _check_pair(predictions, labels)
    if preds.shape[0] == 0:
        return 0.0
    true_idx = label_indices(targs)
    at_truth = preds[np.arange(preds.shape[0]), true_idx]
    correct = int(np.sum(at_truth == preds.max(axis=1)))
    return correct / preds.shape[0]


def compute_metric(name: str, predictions: Array, labels: Array) -> MetricResult:
    key = name.lower()
    if key == "accuracy":
        value = accuracy(predictions, labels)
    elif key == "mae":
        preds, targs = _check_pair(predictions, labels)
        value = float(np.mean(np.abs(targs - preds)))
    elif key == "mse":
        preds, targs = _check_pair(predictions, labels)
        value = float(np.mean((targs - preds) ** 2))
    else:
        raise KeyError(f"Unknown metric: {name}")
    return MetricResult(name=key, value=float(value))


def compute_metrics(names: Iterable[str], predictions: Array, labels: Array) -> Mapping[str, float]:
    results: Dict[str, float] = {}
    for name in names:
        metric = compute_metric(name, predictions, labels)
        results[metric.name] = metric.value
    return results


DEFAULT_METRICS = ("accuracy", "mae", "mse")

__all__ = ["DEFAULT_METRICS", "MetricResult", "accuracy", "compute_metric", "compute_metrics"]
