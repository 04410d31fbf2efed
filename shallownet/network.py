"""Single-hidden-layer sigmoid network with train/predict entry points."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .core import matrix
from .core.errors import ConfigurationMismatch, UninitializedParameters
from .core.params import init_parameters
from .core.propagation import forward_pass
from .core.types import Array, NetworkConfig, ParameterSet, TrainResult
from .training.trainer import Trainer


class NeuralNetwork:
    """Feed-forward classifier trained by full-batch backpropagation.

    Parameters
    ----------
    config:
        Fixed architecture and optimisation settings.
    rng:
        Random source used to initialise parameters on each :meth:`train`
        call. When omitted every call draws from a fresh unseeded generator.
    """

    def __init__(self, config: NetworkConfig, rng: np.random.Generator | None = None) -> None:
        self.config = config
        self.rng = rng
        self.params: ParameterSet | None = None

    def __repr__(self) -> str:
        c = self.config
        return (
            f"<NeuralNetwork {c.input_neurons}-{c.hidden_neurons}-{c.output_neurons} "
            f"trained={self.is_trained}>"
        )

    @property
    def is_trained(self) -> bool:
        return self.params is not None

    def train(
        self,
        inputs: Array,
        labels: Array,
        callbacks: Sequence[object] | None = None,
        log_every: int = 1,
    ) -> TrainResult:
        """Fit fresh parameters to ``inputs``/``labels`` and install them.

        Existing parameters are replaced only after every epoch has run.
        """

        x = self._check_inputs(inputs)
        y = self._check_labels(labels, x.shape[0])

        params = init_parameters(self.config, self.rng)
        trainer = Trainer(self.config, callbacks=callbacks, log_every=log_every)
        result = trainer.run(params, x, y)

        self.params = params
        return result

    def predict(self, inputs: Array) -> Array:
        """Return the sigmoid output for each row of ``inputs``."""

        if self.params is None:
            raise UninitializedParameters("network has no trained parameters; call train() first")
        x = self._check_inputs(inputs)
        return forward_pass(x, self.params).output

    def parameter_count(self) -> int:
        shapes = self.config.parameter_shapes().values()
        return int(sum(rows * cols for rows, cols in shapes))

    # ------------------------------------------------------------------
    # Validation

    def _check_inputs(self, inputs: Array) -> Array:
        try:
            x = matrix.as_matrix(inputs)
        except ValueError as exc:
            raise ConfigurationMismatch(f"inputs: {exc}") from exc
        if x.shape[1] != self.config.input_neurons:
            raise ConfigurationMismatch(
                f"inputs have {x.shape[1]} columns but the network expects "
                f"{self.config.input_neurons}"
            )
        return x

    def _check_labels(self, labels: Array, n_rows: int) -> Array:
        try:
            y = matrix.as_matrix(labels)
        except ValueError as exc:
            raise ConfigurationMismatch(f"labels: {exc}") from exc
        if y.shape[1] != self.config.output_neurons:
            raise ConfigurationMismatch(
                f"labels have {y.shape[1]} columns but the network expects "
                f"{self.config.output_neurons}"
            )
        if y.shape[0] != n_rows:
            raise ConfigurationMismatch(
                f"inputs have {n_rows} rows but labels have {y.shape[0]}"
            )
        return y


__all__ = ["NeuralNetwork"]
