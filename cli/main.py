"""Command line entry point for shallownet training runs."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

from shallownet.data import available_datasets
from shallownet.training import pipelines


def _format_result(result) -> str:
    payload = {
        "epochs": result.epochs,
        "accuracy": result.accuracy,
        "metrics": result.metrics_path,
        "manifest": result.manifest_path,
    }
    if getattr(result, "summary_path", ""):
        payload["summary"] = result.summary_path
    return json.dumps(payload, sort_keys=True)


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    preset_names = sorted(pipelines.presets().keys())
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--preset",
        choices=preset_names,
        default="iris",
        help="Preset configuration to execute",
    )
    parser.add_argument("--config", type=Path, help="Optional JSON/YAML config override")
    parser.add_argument(
        "--dataset",
        choices=sorted(available_datasets()),
        help="Override the dataset used by the run",
    )
    parser.add_argument("--csv-path", help="Path to a delimited record file for the records dataset")
    parser.add_argument("--delimiter", help="Field delimiter for record files")
    parser.add_argument("--features", type=int, help="Number of feature columns in record files")
    parser.add_argument("--classes", type=int, help="Number of one-hot label columns in record files")
    parser.add_argument("--hidden", type=int, help="Number of hidden neurons")
    parser.add_argument("--epochs", type=int, help="Number of full-batch training epochs")
    parser.add_argument("--lr", type=float, help="Learning rate")
    parser.add_argument("--seed", type=int, help="Seed for parameter initialisation and splits")
    parser.add_argument(
        "--test-split",
        type=float,
        help="Fraction of rows held out for evaluation (0 evaluates on the training rows)",
    )
    parser.add_argument("--log-every", type=int, help="Report training metrics every N epochs")
    parser.add_argument("--run-dir", help="Directory receiving metrics and manifests")
    parser.add_argument("--enable-plots", action="store_true", help="Save a loss curve plot")
    parser.add_argument(
        "--list-presets", action="store_true", help="List available presets and exit"
    )
    parser.add_argument(
        "--dump-config", type=Path, help="Dump the resolved config to a JSON file"
    )
    return parser.parse_args(argv)


def _load_override(path: Path) -> dict:
    text = path.read_text()
    if path.suffix in {".yml", ".yaml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to load YAML configs") from exc
        return yaml.safe_load(text) or {}
    return json.loads(text)


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge(dict(base[key]), value)
        else:
            base[key] = value
    return base


def build_config(args: argparse.Namespace) -> dict:
    config = json.loads(json.dumps(pipelines.load_preset(args.preset)))

    if args.config:
        config = _merge(config, _load_override(args.config))

    if args.dataset:
        config["data"] = {"name": args.dataset, "options": {}}
    opts = config.setdefault("data", {}).setdefault("options", {})
    if args.csv_path:
        opts["csv_path"] = args.csv_path
    if args.delimiter:
        opts["delimiter"] = args.delimiter
    if args.features is not None:
        opts["n_features"] = int(args.features)
    if args.classes is not None:
        opts["n_classes"] = int(args.classes)

    if args.hidden is not None:
        config.setdefault("model", {})["hidden"] = int(args.hidden)

    train_cfg = config.setdefault("train", {})
    if args.epochs is not None:
        train_cfg["epochs"] = int(args.epochs)
    if args.lr is not None:
        train_cfg["lr"] = float(args.lr)
    if args.seed is not None:
        train_cfg["seed"] = int(args.seed)
    if args.test_split is not None:
        train_cfg["test_split"] = float(args.test_split)
    if args.log_every is not None:
        train_cfg["log_every"] = int(args.log_every)
    if args.run_dir:
        train_cfg["run_dir"] = args.run_dir
    if args.enable_plots:
        train_cfg["enable_plots"] = True
    return config


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)

    if args.list_presets:
        for name in sorted(pipelines.presets().keys()):
            print(name)
        raise SystemExit(0)

    config = build_config(args)

    if args.dump_config:
        args.dump_config.parent.mkdir(parents=True, exist_ok=True)
        args.dump_config.write_text(json.dumps(config, indent=2))

    result = pipelines.run_pipeline(config)
    print(_format_result(result))


if __name__ == "__main__":
    main()
