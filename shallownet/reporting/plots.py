"""Headless-safe training curve plotting."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence, Tuple


def plot_history(
    history: Sequence[Tuple[int, Mapping[str, float]]],
    path: str | Path,
    *,
    metrics: Sequence[str] = ("loss", "mae"),
) -> Path | None:
    """Draw the reported ``metrics`` against the epoch and save to ``path``.

    Returns ``None`` when there is nothing to draw.
    """

    if not history:
        return None
    import matplotlib

    matplotlib.use("Agg", force=True)
    import matplotlib.pyplot as plt  # imported lazily for headless safety

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    epochs = [epoch for epoch, _ in history]
    fig, ax = plt.subplots()
    for name in metrics:
        values = [float(m[name]) for _, m in history if name in m]
        if len(values) == len(epochs):
            ax.plot(epochs, values, label=name)
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Training error")
    ax.set_title(f"Training curve ({epochs[-1]} epochs)")
    ax.legend()
    fig.savefig(path)
    plt.close(fig)
    return path


__all__ = ["plot_history"]
