"""Dataset registry and loader helpers."""

# Ensure built-in datasets register themselves when the package is imported.
from . import iris as _iris  # noqa: F401
from . import records as _records  # noqa: F401
from . import synthetic as _synthetic  # noqa: F401
from .registry import (
    DatasetSpec,
    DataSpec,
    available_datasets,
    get_dataset,
    register_dataset,
)

__all__ = [
    "DataSpec",
    "DatasetSpec",
    "available_datasets",
    "get_dataset",
    "register_dataset",
]
