"""Loader for delimited feature/one-hot label record files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from .registry import DataSpec, DatasetSpec, register_dataset


def read_records(
    path: str | Path,
    *,
    n_features: int = 4,
    n_classes: int = 3,
    delimiter: str = ",",
) -> tuple[np.ndarray, np.ndarray]:
    """Parse ``path`` into ``(inputs, labels)`` matrices.

    The first row is a header. Every row must carry exactly
    ``n_features + n_classes`` fields; the trailing ``n_classes`` fields are
    the one-hot label.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")
    n_fields = n_features + n_classes

    try:
        df = pd.read_csv(
            path,
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.ParserError as exc:
        raise ValueError(f"{path}: every record must have {n_fields} fields ({exc})") from exc
    except pd.errors.EmptyDataError as exc:
        raise ValueError(f"{path}: file is empty") from exc

    if df.shape[1] != n_fields or df.isna().to_numpy().any():
        raise ValueError(f"{path}: every record must have exactly {n_fields} fields")

    body = df.iloc[1:]
    if body.empty:
        raise ValueError(f"{path}: no data rows after the header")
    try:
        values = body.apply(pd.to_numeric).to_numpy(dtype=np.float64)
    except ValueError as exc:
        raise ValueError(f"{path}: non-numeric field ({exc})") from exc
    if np.isnan(values).any():
        raise ValueError(f"{path}: empty field in record")

    return values[:, :n_features].copy(), values[:, n_features:].copy()


@register_dataset("records")
def load_records(
    *,
    csv_path: str | Path | None = None,
    n_features: int = 4,
    n_classes: int = 3,
    delimiter: str = ",",
    **_: object,
) -> DatasetSpec:
    """Load a classification dataset from a delimited record file."""

    if csv_path is None:
        raise KeyError("The records dataset requires `csv_path`")
    path = Path(csv_path)
    inputs, labels = read_records(
        path, n_features=n_features, n_classes=n_classes, delimiter=delimiter
    )

    data_spec = DataSpec(d_in=n_features, d_out=n_classes, num_classes=n_classes)
    provenance = {
        "type": "records",
        "path": str(path),
        "rows": int(inputs.shape[0]),
        "n_features": n_features,
        "n_classes": n_classes,
        "delimiter": delimiter,
    }
    return DatasetSpec(
        name="records",
        inputs=inputs,
        labels=labels,
        data_spec=data_spec,
        provenance=provenance,
    )


__all__ = ["load_records", "read_records"]
