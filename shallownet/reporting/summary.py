"""Summaries of the per-epoch training history."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence, Tuple

import numpy as np

History = Sequence[Tuple[int, Mapping[str, float]]]


def summarize_history(history: History, *, tail: int = 32) -> Mapping[str, object]:
    """Describe how each reported metric evolved over the run.

    For every metric the first and final values, the best (lowest) value with
    the epoch it was reached at, and the mean over the last ``tail`` reports
    are recorded.
    """

    if not history:
        return {"version": 2, "reports": 0, "final_epoch": None, "metrics": {}}

    epochs = np.asarray([epoch for epoch, _ in history], dtype=np.int64)
    names = sorted({name for _, metrics in history for name in metrics})
    window = max(1, min(tail, len(history)))

    per_metric: dict[str, Mapping[str, object]] = {}
    for name in names:
        values = np.asarray([metrics.get(name, np.nan) for _, metrics in history], dtype=np.float64)
        best = int(np.nanargmin(values))
        per_metric[name] = {
            "initial": float(values[0]),
            "final": float(values[-1]),
            "best": float(values[best]),
            "best_epoch": int(epochs[best]),
            "reduction": float(values[0] - values[-1]),
            "tail_mean": float(np.nanmean(values[-window:])),
        }

    return {
        "version": 2,
        "reports": len(history),
        "final_epoch": int(epochs[-1]),
        "tail_window": window,
        "metrics": per_metric,
    }


def write_summary(history: History, out_summary_json: str | Path, *, tail: int = 32) -> str:
    out_path = Path(out_summary_json)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    summary = summarize_history(history, tail=tail)
    out_path.write_text(json.dumps(summary, sort_keys=True, indent=2))
    return str(out_path)


__all__ = ["History", "summarize_history", "write_summary"]
