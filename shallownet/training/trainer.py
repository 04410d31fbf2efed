"""Fixed-length, full-batch training loop."""

from __future__ import annotations

from typing import Mapping, Sequence

import numpy as np

from ..core.propagation import backward_pass, forward_pass
from ..core.types import Array, NetworkConfig, ParameterSet, TrainResult


class Trainer:
    """Run ``config.num_epochs`` gradient steps over the whole batch.

    Each epoch is one forward pass, one backward pass and one in-place
    update of ``params``. There is no early stopping.
    """

    def __init__(
        self,
        config: NetworkConfig,
        callbacks: Sequence[object] | None = None,
        log_every: int = 1,
    ) -> None:
        if log_every < 1:
            raise ValueError("log_every must be >= 1")
        self.config = config
        self.callbacks = list(callbacks or [])
        self.log_every = int(log_every)

    def run(self, params: ParameterSet, inputs: Array, labels: Array) -> TrainResult:
        epochs = self.config.num_epochs
        lr = float(self.config.learning_rate)
        loss: float | None = None
        for epoch in range(1, epochs + 1):
            state = forward_pass(inputs, params)
            grads = backward_pass(inputs, labels, params, state, lr)
            params.apply_gradients(grads)

            last = epoch == epochs
            if last or (self.callbacks and epoch % self.log_every == 0):
                metrics = self._epoch_metrics(state.output, labels)
                loss = metrics["loss"]
                self._emit_epoch(epoch, metrics)
        return TrainResult(epochs=epochs, loss=loss)

    # ------------------------------------------------------------------
    # Internal helpers

    @staticmethod
    def _epoch_metrics(output: Array, labels: Array) -> Mapping[str, float]:
        error = labels - output
        return {
            "loss": float(np.mean(np.square(error))),
            "mae": float(np.mean(np.abs(error))),
        }

    def _emit_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        for callback in self.callbacks:
            if hasattr(callback, "on_epoch"):
                callback.on_epoch(epoch, metrics)  # type: ignore[attr-defined]
            elif callable(callback):
                callback(epoch, metrics)


__all__ = ["Trainer"]
