"""Ensembles on shuffled iris: training accuracy above 90% for every ensemble form."""

import numpy as np
import pandas as pd
import pytest

from automl_framework import fit_transform, fitted_copy, parse_pipeline, score
from automl_framework.datasets import get_iris
from automl_framework.ensembles import BestLearner, StackEnsemble, VoteEnsemble
from automl_framework.learners import Adaboost, PrunedTree, RandomForest


@pytest.fixture(scope="module")
def iris():
    ds = get_iris(shuffle=True, random_state=123)
    return ds.features, ds.target


def _members():
    return RandomForest(), Adaboost(), PrunedTree()


@pytest.mark.parametrize("factory", [VoteEnsemble, StackEnsemble, BestLearner])
def test_default_ensembles(iris, factory):
    X, y = iris
    ensemble = factory()
    pred = fit_transform(ensemble, X, y)
    assert ensemble.is_fitted
    assert score("accuracy", pred, y) > 90.0


@pytest.mark.parametrize("factory", [VoteEnsemble, StackEnsemble, BestLearner])
def test_member_ensembles(iris, factory):
    X, y = iris
    ensemble = factory(*_members())
    pred = ensemble.fit_transform(X, y)
    assert score("accuracy", pred, y) > 90.0


def test_fitted_copy_does_not_mutate(iris):
    X, y = iris
    ensemble = VoteEnsemble(*_members())
    fitted = fitted_copy(ensemble, X, y)
    assert not ensemble.is_fitted
    assert not any(m.is_fitted for m in ensemble.members)
    assert score("accuracy", fitted.transform(X), y) > 90.0


def test_nested_ensembles(iris):
    X, y = iris
    inner = VoteEnsemble(RandomForest(name="rf_inner"), PrunedTree(name="tree_inner"), n_folds=3)
    outer = BestLearner(inner, Adaboost(), n_folds=3)
    pred = outer.fit_transform(X, y)
    assert score("accuracy", pred, y) > 90.0
    assert set(outer.scores_) == {"vote", "ada"}


def test_pipeline_with_selection_on_iris(iris):
    X, y = iris
    pipe = parse_pipeline("numf >> zscore >> rf | ada | prunedtree")
    pred = pipe.fit(X, y).transform(X)
    assert isinstance(pred, pd.DataFrame)
    assert score("accuracy", pred, y) > 90.0
    np.testing.assert_array_equal(pipe.transform(X).to_numpy(), pred.to_numpy())
