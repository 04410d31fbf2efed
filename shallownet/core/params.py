"""Random initialisation of network parameters."""

from __future__ import annotations

import numpy as np

from .types import NetworkConfig, ParameterSet


def init_parameters(config: NetworkConfig, rng: np.random.Generator | None = None) -> ParameterSet:
    """Allocate a fresh :class:`ParameterSet` drawn from uniform ``[0, 1)``.

    No fan-in scaling is applied. Without ``rng`` an unseeded generator is
    created, so repeated calls are not reproducible.
    """

    rng = rng if rng is not None else np.random.default_rng()
    tensors = {
        name: rng.random(shape, dtype=np.float64)
        for name, shape in config.parameter_shapes().items()
    }
    return ParameterSet(**tensors)


__all__ = ["init_parameters"]
