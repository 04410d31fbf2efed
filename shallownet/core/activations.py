"""Activation utilities for shallownet."""

from __future__ import annotations

import numpy as np

from .types import Array


def sigmoid(x: Array) -> Array:
    """Return the logistic sigmoid ``1 / (1 + exp(-x))``.

    Non-negative inputs use ``1 / (1 + exp(-x))`` and negative inputs
    ``exp(x) / (1 + exp(x))``, so ``exp`` is only ever taken of a
    non-positive number and cannot overflow.
    """

    x = np.asarray(x, dtype=np.float64)
    flat = x.reshape(-1)
    out = np.empty_like(flat)
    pos = flat >= 0
    neg = ~pos
    # exp of a large negative number underflows to 0.0, which is the limit
    with np.errstate(under="ignore"):
        out[pos] = 1.0 / (1.0 + np.exp(-flat[pos]))
        exp_x = np.exp(flat[neg])
        out[neg] = exp_x / (1.0 + exp_x)
    return out.reshape(x.shape)


def sigmoid_prime(a: Array) -> Array:
    """Sigmoid slope expressed through its output ``a = sigmoid(x)``.

    Pass post-activation values, not the layer's raw input.
    """

    a = np.asarray(a, dtype=np.float64)
    return a * (1.0 - a)


__all__ = ["sigmoid", "sigmoid_prime"]
