"""Dataset helpers: iris, synthetic tables and CSV loading."""

import numpy as np
import pandas as pd
import pytest

from automl_framework import InvalidConfigurationError
from automl_framework.datasets import (
    DATASET_REGISTRY,
    get_dataset,
    get_iris,
    load_csv,
    make_classification_table,
    make_regression_table,
)


def test_iris():
    ds = get_iris()
    assert ds.features.shape == (150, 4)
    assert len(ds) == 150
    assert sorted(set(ds.target)) == ["setosa", "versicolor", "virginica"]
    assert ds.class_names == ["setosa", "versicolor", "virginica"]


def test_iris_shuffle_is_seeded():
    a, b = get_iris(random_state=123), get_iris(random_state=123)
    pd.testing.assert_frame_equal(a.features, b.features)
    np.testing.assert_array_equal(a.target, b.target)
    plain = get_iris(shuffle=False)
    assert list(plain.target[:3]) == ["setosa"] * 3
    assert list(a.features.index) == list(range(150))


def test_synthetic_tables():
    clf = make_classification_table(n_rows=50, n_numeric=3, n_classes=2, categorical=True)
    assert clf.features.shape == (50, 4)
    assert clf.class_names == ["class0", "class1"]
    assert set(clf.features["color"]) <= {"level0", "level1"}
    reg = make_regression_table(n_rows=40, n_numeric=2)
    assert reg.features.shape == (40, 2)
    assert reg.target.dtype == np.float64


def test_load_csv(tmp_path):
    path = tmp_path / "data.csv"
    pd.DataFrame({"a": [1, 2, 3], "b": ["x", "y", "x"], "label": ["p", "q", "p"]}).to_csv(path, index=False)
    ds = load_csv(path, "label")
    assert list(ds.features.columns) == ["a", "b"]
    assert ds.class_names == ["p", "q"]
    assert ds.name == "data"
    with pytest.raises(InvalidConfigurationError, match="Target column"):
        load_csv(path, "missing")
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "none.csv", "label")


def test_registry():
    assert set(DATASET_REGISTRY) == {"iris", "synthetic_classification", "synthetic_regression"}
    assert get_dataset("synthetic_regression", n_rows=10).n_rows == 10
    with pytest.raises(KeyError):
        get_dataset("mnist")
