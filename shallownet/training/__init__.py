"""Training loop, evaluation metrics and pipelines."""

from .metrics import accuracy, compute_metrics
from .trainer import Trainer

__all__ = ["Trainer", "accuracy", "compute_metrics"]
