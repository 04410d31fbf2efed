"""Core typing contracts for shallownet."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Dict, Mapping, Tuple

import numpy as np

Array = np.ndarray

Gradients = Dict[str, Array]


@dataclass(frozen=True)
class NetworkConfig:
    """Architecture and optimisation settings of a single-hidden-layer network."""

    input_neurons: int
    output_neurons: int
    hidden_neurons: int
    num_epochs: int
    learning_rate: float

    def __post_init__(self) -> None:
        for name in ("input_neurons", "output_neurons", "hidden_neurons"):
            value = getattr(self, name)
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if (
            not isinstance(self.num_epochs, (int, np.integer))
            or isinstance(self.num_epochs, bool)
            or self.num_epochs < 0
        ):
            raise ValueError(f"num_epochs must be a non-negative integer, got {self.num_epochs!r}")
        lr = float(self.learning_rate)
        if not math.isfinite(lr) or lr <= 0:
            raise ValueError(f"learning_rate must be a positive float, got {self.learning_rate!r}")

    def parameter_shapes(self) -> Mapping[str, Tuple[int, int]]:
        return {
            "hidden_weights": (self.input_neurons, self.hidden_neurons),
            "hidden_biases": (1, self.hidden_neurons),
            "output_weights": (self.hidden_neurons, self.output_neurons),
            "output_biases": (1, self.output_neurons),
        }


@dataclass
class ParameterSet:
    """The four learned tensors of the network."""

    hidden_weights: Array
    hidden_biases: Array
    output_weights: Array
    output_biases: Array

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def shapes(self) -> Mapping[str, Tuple[int, int]]:
        return {name: tuple(getattr(self, name).shape) for name in self.names()}

    def apply_gradients(self, grads: Gradients) -> None:
        """Add each gradient to its parameter in place.

        Every tensor needs a gradient of matching shape; nothing is updated
        unless all of them do.
        """

        for name in self.names():
            if name not in grads:
                raise KeyError(f"Missing gradient for {name}")
            expected = getattr(self, name).shape
            if grads[name].shape != expected:
                raise ValueError(
                    f"Gradient for {name} has shape {grads[name].shape}, expected {expected}"
                )
        for name in self.names():
            getattr(self, name)[...] += grads[name]

    def state_dict(self) -> Mapping[str, Array]:
        return {name: getattr(self, name).copy() for name in self.names()}

    def copy(self) -> "ParameterSet":
        return ParameterSet(**self.state_dict())

    def parameter_count(self) -> int:
        return int(sum(int(getattr(self, name).size) for name in self.names()))


@dataclass(frozen=True)
class ForwardState:
    """Intermediate matrices produced by the forward pass."""

    hidden_input: Array
    hidden_activations: Array
    output_input: Array
    output: Array


@dataclass(frozen=True)
class TrainResult:
    """Summary returned by :meth:`shallownet.network.NeuralNetwork.train`."""

    epochs: int
    loss: float | None = None


@dataclass(frozen=True)
class RunResult:
    """Summary returned by :func:`shallownet.training.pipelines.run_pipeline`."""

    epochs: int
    accuracy: float
    metrics_path: str
    manifest_path: str
    summary_path: str = ""
