"""Leaf learners and transformers honour the stage contract."""

import numpy as np
import pandas as pd
import pytest

from automl_framework import InvalidConfigurationError, NotFittedError, ShapeMismatchError
from automl_framework.datasets import make_classification_table, make_regression_table
from automl_framework.learners import (
    LDA,
    SVM,
    Adaboost,
    Baseline,
    LogisticRegression,
    PrunedTree,
    RandomForest,
    SKLearner,
)
from automl_framework.transformers import (
    PCA,
    CatFeatureSelector,
    ColumnSelector,
    Identity,
    Imputer,
    NumFeatureSelector,
    OneHotEncoder,
    SKPreprocessor,
    UnitRange,
    ZScore,
)


@pytest.fixture
def clf_data():
    ds = make_classification_table(n_rows=120, n_numeric=4, n_classes=3, random_state=0)
    return ds.features, ds.target


@pytest.fixture
def mixed_data():
    ds = make_classification_table(n_rows=60, n_numeric=2, n_classes=2, categorical=True, random_state=1)
    return ds.features, ds.target


@pytest.mark.parametrize("cls", [RandomForest, Adaboost, PrunedTree, SVM, LDA, LogisticRegression, Baseline])
def test_learners_output_one_named_column(clf_data, cls):
    X, y = clf_data
    learner = cls()
    out = learner.fit(X, y).transform(X)
    assert list(out.columns) == [learner.name]
    assert len(out) == len(X)
    assert set(out[learner.name]) <= set(y)


@pytest.mark.parametrize("cls", [RandomForest, Adaboost, PrunedTree, SVM, Baseline])
def test_regressors(cls):
    ds = make_regression_table(n_rows=80, random_state=0)
    out = cls().fit(ds.features, ds.target).transform(ds.features)
    assert out.iloc[:, 0].dtype.kind == "f"


def test_classification_only_learner_rejects_regression():
    ds = make_regression_table(n_rows=30)
    with pytest.raises(InvalidConfigurationError, match="does not support regression"):
        LDA().fit(ds.features, ds.target)


def test_learner_needs_target(clf_data):
    X, _ = clf_data
    with pytest.raises(InvalidConfigurationError):
        RandomForest().fit(X)
    with pytest.raises(NotFittedError):
        RandomForest().transform(X)


def test_predict_proba(clf_data):
    X, y = clf_data
    rf = RandomForest(n_estimators=20).fit(X, y)
    proba = rf.predict_proba(X)
    assert proba.shape == (len(X), 3)
    np.testing.assert_allclose(proba.sum(axis=1).to_numpy(), 1.0)


def test_logistic_regression_tunes_C(clf_data):
    X, y = clf_data
    lr = LogisticRegression(tune_C=True, C_grid=[0.1, 1.0])
    lr.fit(X, y)
    assert lr.selected_C_ in (0.1, 1.0)
    assert lr.C == 1.0


def test_baseline_majority_and_mean():
    X = pd.DataFrame({"a": range(5)})
    out = Baseline().fit(X, np.array(["b", "a", "b", "a", "c"])).transform(X)
    assert (out["baseline"] == "b").all()
    out = Baseline().fit(X, np.array([1.0, 2.0, 3.0, 4.0, 5.0])).transform(X)
    np.testing.assert_allclose(out["baseline"].to_numpy(), 3.0)


def test_sklearner(clf_data):
    X, y = clf_data
    knn = SKLearner("KNeighborsClassifier", n_neighbors=3)
    assert knn.name == "kneighborsclassifier"
    out = knn.fit(X, y).transform(X)
    assert len(out) == len(X)
    knn.set_params(n_neighbors=5)
    assert knn.estimator_params["n_neighbors"] == 5
    with pytest.raises(InvalidConfigurationError, match="No scikit-learn estimator"):
        SKLearner("NoSuchEstimator")


def test_selectors(mixed_data):
    X, _ = mixed_data
    assert list(CatFeatureSelector().fit_transform(X).columns) == ["color"]
    assert list(NumFeatureSelector().fit_transform(X).columns) == ["num1", "num2"]
    assert list(ColumnSelector(["num2"]).fit_transform(X).columns) == ["num2"]
    with pytest.raises(ShapeMismatchError, match="Columns not found"):
        ColumnSelector(["missing"]).fit(X)


def test_selector_decides_at_fit(mixed_data):
    X, _ = mixed_data
    sel = CatFeatureSelector().fit(X)
    with pytest.raises(ShapeMismatchError):
        sel.transform(X.drop(columns=["color"]))


def test_onehot(mixed_data):
    X, _ = mixed_data
    ohe = OneHotEncoder().fit(X)
    out = ohe.transform(X)
    levels = sorted(pd.unique(X["color"]))
    encoded = sorted(c for c in out.columns if c.startswith("color="))
    assert encoded == [f"color={lv}" for lv in levels]
    assert "num1" in out.columns
    np.testing.assert_allclose(out[encoded].sum(axis=1).to_numpy(), 1.0)
    unseen = X.head(2).copy()
    unseen["color"] = "ultraviolet"
    np.testing.assert_allclose(ohe.transform(unseen)[encoded].to_numpy(), 0.0)


def test_onehot_numeric_levels():
    X = pd.DataFrame({"k": [1, 2, 1, 2], "v": [0.1, 0.2, 0.3, 0.4]})
    out = OneHotEncoder(numeric_levels=2).fit_transform(X)
    assert list(out.columns) == ["k=1", "k=2", "v"]


def test_zscore_and_unitrange(clf_data):
    X, _ = clf_data
    z = ZScore().fit_transform(X)
    np.testing.assert_allclose(z.mean().to_numpy(), 0.0, atol=1e-10)
    np.testing.assert_allclose(z.std(ddof=0).to_numpy(), 1.0)
    u = UnitRange().fit_transform(X)
    assert u.min().min() == pytest.approx(0.0)
    assert u.max().max() == pytest.approx(1.0)
    const = pd.DataFrame({"c": [3.0, 3.0, 3.0]})
    np.testing.assert_allclose(ZScore().fit_transform(const)["c"].to_numpy(), 0.0)


def test_pca(clf_data):
    X, _ = clf_data
    pca = PCA(n_components=2)
    assert pca.n_features_out is None
    out = pca.fit_transform(X)
    assert list(out.columns) == ["pca1", "pca2"]
    assert pca.n_features_out == 2


def test_imputer():
    X = pd.DataFrame({"a": [1.0, np.nan, 3.0], "b": ["x", None, "x"]})
    out = Imputer().fit_transform(X)
    assert out["a"].tolist() == [1.0, 2.0, 3.0]
    assert out["b"].tolist() == ["x", "x", "x"]


def test_identity_returns_copy(clf_data):
    X, _ = clf_data
    out = Identity().fit_transform(X)
    pd.testing.assert_frame_equal(out, X)
    assert out is not X


def test_skpreprocessor(clf_data):
    X, y = clf_data
    out = SKPreprocessor("StandardScaler").fit_transform(X)
    assert list(out.columns) == list(X.columns)
    sel = SKPreprocessor("SelectKBest", k=2)
    out = sel.fit_transform(X, y)
    assert list(out.columns) == ["selectkbest1", "selectkbest2"]


def test_non_numeric_features_name_the_stage(mixed_data):
    X, y = mixed_data
    with pytest.raises(InvalidConfigurationError, match=r"\[rf\] Features must be numeric.*'color'"):
        RandomForest(n_estimators=5).fit(X, y)
