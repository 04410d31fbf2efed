"""Dataset registry and metadata contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, MutableMapping

import numpy as np

from ..core.types import Array


@dataclass(frozen=True)
class DataSpec:
    """Structural information about a dataset.

    Attributes
    ----------
    d_in:
        Number of feature columns.
    d_out:
        Number of one-hot label columns.
    num_classes:
        Number of discrete classes, equal to ``d_out``.
    normalization:
        Metadata describing scaling applied to the inputs. The registry does
        not interpret these values.
    """

    d_in: int
    d_out: int
    num_classes: int
    normalization: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DatasetSpec:
    """A fully materialised classification dataset."""

    name: str
    inputs: Array
    labels: Array
    data_spec: DataSpec
    provenance: Dict[str, Any]

    @property
    def size(self) -> int:
        return int(self.inputs.shape[0])

    def subset(self, indices: Array) -> tuple[Array, Array]:
        """Return the ``(inputs, labels)`` rows selected by ``indices``."""

        idx = np.asarray(indices, dtype=np.int64)
        return self.inputs[idx], self.labels[idx]


DatasetFactory = Callable[..., DatasetSpec]


_REGISTRY: MutableMapping[str, DatasetFactory] = {}


def register_dataset(
    name: str | None = None,
    factory: DatasetFactory | None = None,
) -> Callable[[DatasetFactory], DatasetFactory] | DatasetFactory:
    """Register a dataset factory.

    ``register_dataset`` can be used both as a decorator::

        @register_dataset("iris")
        def make_iris(**kwargs):
            ...

    or directly::

        register_dataset("iris", make_iris)
    """

    def _decorator(func: DatasetFactory) -> DatasetFactory:
        _REGISTRY[str(name or func.__name__)] = func
        return func

    if factory is not None:
        return _decorator(factory)
    if name is None:
        raise TypeError("register_dataset requires a name when used without a decorator")
    return _decorator


def get_dataset(dataset: str, /, **options: Any) -> DatasetSpec:
    """Build and validate the dataset registered as ``dataset``."""

    if dataset not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise KeyError(f"Unknown dataset {dataset!r}. Available datasets: {available}")
    spec = _REGISTRY[dataset](**options)
    _validate_spec(spec)
    return spec


def available_datasets() -> Iterable[str]:
    """Return the sorted list of available dataset identifiers."""

    return sorted(_REGISTRY)


def _validate_spec(spec: DatasetSpec) -> None:
    if spec.inputs.ndim != 2 or spec.labels.ndim != 2:
        raise ValueError(f"Dataset {spec.name!r} must provide 2-D inputs and labels")
    if spec.inputs.shape[0] != spec.labels.shape[0]:
        raise ValueError(
            f"Dataset {spec.name!r} has {spec.inputs.shape[0]} input rows "
            f"but {spec.labels.shape[0]} label rows"
        )
    if spec.inputs.shape[1] != spec.data_spec.d_in:
        raise ValueError(f"Dataset {spec.name!r} declares d_in={spec.data_spec.d_in}")
    if spec.labels.shape[1] != spec.data_spec.d_out:
        raise ValueError(f"Dataset {spec.name!r} declares d_out={spec.data_spec.d_out}")


__all__ = [
    "DataSpec",
    "DatasetSpec",
    "available_datasets",
    "get_dataset",
    "register_dataset",
]
