"""Pipeline assembly: dataset -> network -> training -> evaluation -> artifacts."""

from __future__ import annotations

import json
import time
from copy import deepcopy
from pathlib import Path
from typing import Dict, Mapping

import numpy as np

from ..core.types import NetworkConfig, RunResult
from ..data import registry
from ..data.utils import deterministic_split
from ..network import NeuralNetwork
from ..reporting.artifacts import write_manifest
from ..reporting.metrics import CsvSink, JsonlSink, MetricsCapture
from ..reporting.plots import plot_history
from ..reporting.summary import write_summary
from .metrics import DEFAULT_METRICS, compute_metrics

_PRESETS: Dict[str, Mapping[str, object]] = {
    "iris": {
        "data": {"name": "iris", "options": {"scale": True}},
        "model": {"hidden": 3},
        "train": {
            "epochs": 5000,
            "lr": 0.3,
            "seed": 0,
            "test_split": 0.0,
            "log_every": 100,
            "run_dir": "runs/iris",
            "enable_plots": False,
        },
    },
    "iris-holdout": {
        "data": {"name": "iris", "options": {"scale": True}},
        "model": {"hidden": 3},
        "train": {
            "epochs": 5000,
            "lr": 0.3,
            "seed": 0,
            "test_split": 0.2,
            "log_every": 100,
            "run_dir": "runs/iris-holdout",
            "enable_plots": False,
        },
    },
    "separable": {
        "data": {"name": "separable", "options": {"n_points": 100, "seed": 0}},
        "model": {"hidden": 3},
        "train": {
            "epochs": 500,
            "lr": 0.05,
            "seed": 0,
            "test_split": 0.0,
            "log_every": 10,
            "run_dir": "runs/separable",
            "enable_plots": False,
        },
    },
}


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Mapping[str, object]:
    try:
        return deepcopy(_PRESETS[name])
    except KeyError as exc:
        available = ", ".join(sorted(_PRESETS))
        raise KeyError(f"Unknown preset {name!r}. Available presets: {available}") from exc


def run_pipeline(config: Mapping[str, object]) -> RunResult:
    """Train and evaluate a network described by ``config``."""

    # Path values in options are stored as strings in config.json and the manifest
    safe_config = json.loads(json.dumps(config, default=str))

    data_cfg = dict(config["data"])
    model_cfg = dict(config.get("model", {}))
    train_cfg = dict(config.get("train", {}))

    dataset = registry.get_dataset(str(data_cfg["name"]), **dict(data_cfg.get("options", {})))
    data_spec = dataset.data_spec

    d_in = int(model_cfg.get("d_in", data_spec.d_in))
    d_out = int(model_cfg.get("d_out", data_spec.d_out))
    if d_in != data_spec.d_in:
        raise ValueError(f"Configured d_in={d_in} but dataset has {data_spec.d_in} features")
    if d_out != data_spec.d_out:
        raise ValueError(f"Configured d_out={d_out} but dataset has {data_spec.d_out} classes")

    seed = int(train_cfg.get("seed", 0))
    net_config = NetworkConfig(
        input_neurons=d_in,
        output_neurons=d_out,
        hidden_neurons=int(model_cfg.get("hidden", 3)),
        num_epochs=int(train_cfg.get("epochs", 5000)),
        learning_rate=float(train_cfg.get("lr", 0.3)),
    )

    test_split = float(train_cfg.get("test_split", 0.0))
    splits = deterministic_split(dataset.size, test_split=test_split, seed=seed)
    train_x, train_y = dataset.subset(splits.train)
    if splits.test.size:
        eval_x, eval_y = dataset.subset(splits.test)
        eval_split = "test"
    else:
        eval_x, eval_y = train_x, train_y
        eval_split = "train"

    run_dir = _resolve_run_dir(train_cfg, dataset.name)
    run_dir.mkdir(parents=True, exist_ok=True)

    network = NeuralNetwork(net_config, rng=np.random.default_rng(seed))
    _print_startup_summary(
        dataset_name=dataset.name,
        config=net_config,
        splits=splits.sizes,
        eval_split=eval_split,
        param_count=network.parameter_count(),
    )

    train_jsonl = JsonlSink(run_dir / "metrics_train.jsonl", split="train", seed=seed)
    train_csv = CsvSink(run_dir / "metrics_train.csv", split="train")
    capture = MetricsCapture()

    started = time.perf_counter()
    train_result = network.train(
        train_x,
        train_y,
        callbacks=[train_jsonl, train_csv, capture],
        log_every=int(train_cfg.get("log_every", 1)),
    )
    elapsed = time.perf_counter() - started
    if train_cfg.get("enable_plots", False):
        plot_history(capture.history, run_dir / "loss.png")

    predictions = network.predict(eval_x)
    metric_names = train_cfg.get("metrics", DEFAULT_METRICS)
    if isinstance(metric_names, str):
        metric_names = [m.strip() for m in metric_names.split(",") if m.strip()]
    eval_metrics = dict(compute_metrics(metric_names, predictions, eval_y))
    eval_metrics["rows"] = int(eval_x.shape[0])
    (run_dir / "metrics_eval.json").write_text(
        json.dumps({"split": eval_split, **eval_metrics}, indent=2)
    )

    manifest = write_manifest(
        run_dir / "manifest.json",
        config=safe_config,
        dataset_provenance=dataset.provenance,
        network={
            "layers": [d_in, net_config.hidden_neurons, d_out],
            "parameters": network.parameter_count(),
            "epochs": train_result.epochs,
            "final_loss": train_result.loss,
            "train_seconds": round(elapsed, 3),
            "final_train_metrics": dict(capture.last),
        },
    )
    summary_path = write_summary(
        capture.history, run_dir / "summary.json", tail=int(train_cfg.get("summary_tail", 32))
    )
    (run_dir / "config.json").write_text(json.dumps(safe_config, indent=2))

    accuracy = float(eval_metrics.get("accuracy", float("nan")))
    print(f"Accuracy = {accuracy}")
    return RunResult(
        epochs=train_result.epochs,
        accuracy=accuracy,
        metrics_path=str(train_jsonl.path),
        manifest_path=manifest,
        summary_path=summary_path,
    )


def _resolve_run_dir(train_cfg: Mapping[str, object], dataset: str) -> Path:
    if train_cfg.get("run_dir"):
        return Path(str(train_cfg["run_dir"]))
    timestamp = time.strftime("%Y%m%d-%H%M%S")
    return Path("runs") / timestamp / dataset


def _print_startup_summary(
    *,
    dataset_name: str,
    config: NetworkConfig,
    splits: Mapping[str, int],
    eval_split: str,
    param_count: int,
) -> None:
    print("=== shallownet run ===")
    print(f"Dataset       : {dataset_name}")
    print(f"Layers        : {[config.input_neurons, config.hidden_neurons, config.output_neurons]}")
    print(f"Epochs        : {config.num_epochs}")
    print(f"Learning rate : {config.learning_rate}")
    print(f"Rows          : train={splits['train']} test={splits['test']}")
    print(f"Evaluated on  : {eval_split}")
    print(f"Parameters    : {param_count}")
    print("======================")


__all__ = ["load_preset", "presets", "run_pipeline"]
