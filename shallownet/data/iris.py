"""The classic three-species iris dataset."""

from __future__ import annotations

import numpy as np
from sklearn.datasets import load_iris as _sk_load_iris

from .registry import DataSpec, DatasetSpec, register_dataset
from .utils import minmax_scale, one_hot


@register_dataset("iris")
def load_iris(*, scale: bool = True, **_: object) -> DatasetSpec:
    """Return the 150 iris samples with one-hot species labels.

    Features are min-max scaled to ``[0, 1]`` unless ``scale`` is False.
    """

    bunch = _sk_load_iris()
    inputs = np.asarray(bunch.data, dtype=np.float64)
    normalization: dict[str, dict[str, list[float]]] = {}
    if scale:
        inputs, params = minmax_scale(inputs)
        normalization["inputs"] = params

    num_classes = len(bunch.target_names)
    labels = one_hot(bunch.target, num_classes)

    data_spec = DataSpec(
        d_in=int(inputs.shape[1]),
        d_out=num_classes,
        num_classes=num_classes,
        normalization=normalization,
    )
    provenance = {
        "type": "iris",
        "source": "sklearn.datasets.load_iris",
        "scale": scale,
        "classes": [str(name) for name in bunch.target_names],
        "features": [str(name) for name in bunch.feature_names],
    }
    return DatasetSpec(
        name="iris",
        inputs=inputs,
        labels=labels,
        data_spec=data_spec,
        provenance=provenance,
    )


__all__ = ["load_iris"]
