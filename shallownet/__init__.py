"""shallownet public API."""

from .core import activations, matrix  # noqa: F401
from .core.errors import (
    ConfigurationMismatch,
    InvalidAxis,
    NetworkError,
    UninitializedParameters,
)
from .core.types import NetworkConfig, ParameterSet, TrainResult
from .network import NeuralNetwork
from .training.metrics import accuracy
from .training.pipelines import load_preset, presets, run_pipeline
from .training.trainer import Trainer

__all__ = [
    "ConfigurationMismatch",
    "InvalidAxis",
    "NetworkConfig",
    "NetworkError",
    "NeuralNetwork",
    "ParameterSet",
    "TrainResult",
    "Trainer",
    "UninitializedParameters",
    "accuracy",
    "activations",
    "load_preset",
    "matrix",
    "presets",
    "run_pipeline",
]
