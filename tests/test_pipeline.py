import csv
import json
from pathlib import Path

import pytest

from shallownet.training import pipelines


def _config(run_dir, **train):
    config = pipelines.load_preset("separable")
    config["train"].update({"epochs": 60, "log_every": 10, "run_dir": str(run_dir)})
    config["train"].update(train)
    return config


def test_presets_are_deep_copies():
    first = pipelines.load_preset("iris")
    first["train"]["epochs"] = 1
    assert pipelines.load_preset("iris")["train"]["epochs"] == 5000
    assert {"iris", "iris-holdout", "separable"} <= set(pipelines.presets())


def test_iris_preset_matches_reference_setup():
    preset = pipelines.load_preset("iris")
    assert preset["model"]["hidden"] == 3
    assert preset["train"]["epochs"] == 5000
    assert preset["train"]["lr"] == 0.3


def test_unknown_preset():
    with pytest.raises(KeyError):
        pipelines.load_preset("nope")


def test_pipeline_writes_artifacts(tmp_path, capsys):
    result = pipelines.run_pipeline(_config(tmp_path / "run"))
    run_dir = tmp_path / "run"

    assert result.epochs == 60
    assert 0.0 <= result.accuracy <= 1.0
    records = [
        json.loads(line) for line in Path(result.metrics_path).read_text().splitlines() if line
    ]
    assert [r["epoch"] for r in records] == [10, 20, 30, 40, 50, 60]
    assert all(r["split"] == "train" and "loss" in r and "mae" in r for r in records)

    with (run_dir / "metrics_train.csv").open() as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 6

    evaluation = json.loads((run_dir / "metrics_eval.json").read_text())
    assert evaluation["split"] == "train"
    assert evaluation["rows"] == 100
    assert evaluation["accuracy"] == pytest.approx(result.accuracy)

    manifest = json.loads(Path(result.manifest_path).read_text())
    assert manifest["network"]["layers"] == [2, 3, 2]
    assert manifest["dataset"]["type"] == "separable"
    assert set(manifest["network"]["final_train_metrics"]) >= {"loss", "mae"}
    assert manifest["network"]["final_train_metrics"]["loss"] == pytest.approx(records[-1]["loss"])
    summary = json.loads((run_dir / "summary.json").read_text())
    assert summary["final_epoch"] == 60
    assert summary["metrics"]["loss"]["final"] == pytest.approx(records[-1]["loss"])
    assert (run_dir / "config.json").exists()
    assert not (run_dir / "loss.png").exists()

    out = capsys.readouterr().out
    assert "=== shallownet run ===" in out
    assert "Accuracy =" in out


def test_pipeline_holdout_split(tmp_path):
    pipelines.run_pipeline(_config(tmp_path / "run", test_split=0.2))
    evaluation = json.loads((tmp_path / "run" / "metrics_eval.json").read_text())
    assert evaluation["split"] == "test"
    assert evaluation["rows"] == 20


def test_pipeline_records_dataset(tmp_path):
    path = tmp_path / "train.csv"
    lines = ["f1,f2,f3,f4,a,b,c"]
    for i in range(9):
        label = [0, 0, 0]
        label[i % 3] = 1
        features = [(i % 3) / 2, 0.5, 1 - (i % 3) / 2, 0.25]
        lines.append(",".join(str(v) for v in features + label))
    path.write_text("\n".join(lines) + "\n")

    config = {
        "data": {"name": "records", "options": {"csv_path": str(path)}},
        "model": {"hidden": 3},
        "train": {"epochs": 20, "lr": 0.3, "seed": 1, "run_dir": str(tmp_path / "run")},
    }
    result = pipelines.run_pipeline(config)
    assert result.epochs == 20
    manifest = json.loads(Path(result.manifest_path).read_text())
    assert manifest["dataset"]["rows"] == 9


def test_pipeline_accepts_path_options(tmp_path):
    path = tmp_path / "train.csv"
    rows = ["x1,x2,a,b"] + [f"{i / 10},{1 - i / 10},{i % 2},{1 - i % 2}" for i in range(8)]
    path.write_text("\n".join(rows) + "\n")

    config = {
        "data": {"name": "records", "options": {"csv_path": path, "n_features": 2, "n_classes": 2}},
        "model": {"hidden": 2},
        "train": {"epochs": 5, "lr": 0.3, "seed": 0, "run_dir": tmp_path / "run"},
    }
    result = pipelines.run_pipeline(config)
    run_dir = tmp_path / "run"

    assert Path(result.manifest_path).exists()
    assert (run_dir / "summary.json").exists()
    saved = json.loads((run_dir / "config.json").read_text())
    assert saved["data"]["options"]["csv_path"] == str(path)
    manifest = json.loads(Path(result.manifest_path).read_text())
    assert manifest["config"]["train"]["run_dir"] == str(run_dir)


def test_pipeline_rejects_conflicting_dimensions(tmp_path):
    config = _config(tmp_path / "run")
    config["model"]["d_in"] = 5
    with pytest.raises(ValueError):
        pipelines.run_pipeline(config)


def test_pipeline_plots_when_enabled(tmp_path):
    pytest.importorskip("matplotlib")
    pipelines.run_pipeline(_config(tmp_path / "run", enable_plots=True))
    assert (tmp_path / "run" / "loss.png").exists()
