import numpy as np
import pytest

from shallownet.data import available_datasets, get_dataset
from shallownet.data.records import read_records
from shallownet.data.utils import deterministic_split, one_hot

HEADER = "sepal_length,sepal_width,petal_length,petal_width,setosa,virginica,versicolor\n"


def _write(tmp_path, text, name="train.csv"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_builtin_datasets_are_registered():
    assert {"iris", "records", "separable"} <= set(available_datasets())


def test_unknown_dataset_raises():
    with pytest.raises(KeyError):
        get_dataset("does-not-exist")


def test_records_split_features_and_labels(tmp_path):
    path = _write(
        tmp_path,
        HEADER + "0.30,0.58,0.08,0.04,1.0,0.0,0.0\n0.61,0.41,0.76,0.71,0.0,1.0,0.0\n",
    )
    spec = get_dataset("records", csv_path=path)
    assert spec.inputs.shape == (2, 4)
    assert spec.labels.shape == (2, 3)
    assert spec.inputs.dtype == np.float64
    assert np.allclose(spec.inputs[1], [0.61, 0.41, 0.76, 0.71])
    assert np.array_equal(spec.labels, [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    assert spec.provenance["rows"] == 2


def test_records_custom_layout_and_delimiter(tmp_path):
    path = _write(tmp_path, "a;b;c;d\n1;2;0;1\n3;4;1;0\n", name="custom.txt")
    inputs, labels = read_records(path, n_features=2, n_classes=2, delimiter=";")
    assert np.array_equal(inputs, [[1.0, 2.0], [3.0, 4.0]])
    assert np.array_equal(labels, [[0.0, 1.0], [1.0, 0.0]])


@pytest.mark.parametrize(
    "body",
    [
        "0.1,0.2,0.3,0.4,1.0,0.0\n",
        "0.1,0.2,0.3,0.4,1.0,0.0,0.0,0.5\n",
        "0.1,0.2,abc,0.4,1.0,0.0,0.0\n",
        "0.1,0.2,,0.4,1.0,0.0,0.0\n",
    ],
)
def test_records_reject_malformed_rows(tmp_path, body):
    path = _write(tmp_path, HEADER + "0.3,0.5,0.1,0.0,1.0,0.0,0.0\n" + body)
    with pytest.raises(ValueError):
        read_records(path)


def test_records_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_records(tmp_path / "missing.csv")


def test_records_require_path():
    with pytest.raises(KeyError):
        get_dataset("records")


def test_iris_is_scaled_and_one_hot():
    spec = get_dataset("iris")
    assert spec.inputs.shape == (150, 4)
    assert spec.labels.shape == (150, 3)
    assert spec.inputs.min() == pytest.approx(0.0)
    assert spec.inputs.max() == pytest.approx(1.0)
    assert np.array_equal(spec.labels.sum(axis=1), np.ones(150))
    assert np.array_equal(spec.labels.sum(axis=0), [50.0, 50.0, 50.0])


def test_iris_unscaled_keeps_centimetres():
    spec = get_dataset("iris", scale=False)
    assert spec.inputs.max() > 1.0
    assert spec.data_spec.normalization == {}


def test_separable_is_deterministic_and_linearly_separable():
    a = get_dataset("separable", n_points=30, seed=4)
    b = get_dataset("separable", n_points=30, seed=4)
    assert np.array_equal(a.inputs, b.inputs)
    assert a.labels.shape == (30, 2)
    side = a.inputs.sum(axis=1) > 1.0
    assert np.array_equal(side, a.labels[:, 1] == 1.0)


def test_deterministic_split_sizes():
    splits = deterministic_split(150, test_split=0.2, seed=0)
    assert splits.sizes == {"train": 120, "test": 30}
    assert set(splits.train).isdisjoint(splits.test)
    again = deterministic_split(150, test_split=0.2, seed=0)
    assert np.array_equal(splits.test, again.test)


def test_zero_test_split_keeps_order():
    splits = deterministic_split(5, test_split=0.0)
    assert np.array_equal(splits.train, np.arange(5))
    assert splits.test.size == 0


def test_one_hot_rejects_out_of_range():
    assert np.array_equal(one_hot(np.array([0, 2]), 3), [[1, 0, 0], [0, 0, 1]])
    with pytest.raises(ValueError):
        one_hot(np.array([3]), 3)


def test_records_need_data_rows(tmp_path):
    with pytest.raises(ValueError):
        read_records(_write(tmp_path, HEADER))
