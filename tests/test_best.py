"""BestLearner: cross-validated selection of the best member."""

import numpy as np
import pandas as pd
import pytest

from automl_framework import InvalidConfigurationError
from automl_framework.ensembles import BestLearner
from automl_framework.learners import PrunedTree

from helpers import ColumnLearner, ConstantLearner, FailingLearner, numeric_table


@pytest.fixture
def labelled():
    X = numeric_table(40)
    X["label"] = np.where(X["x1"] > 0, "pos", "neg")
    return X, X["label"].to_numpy()


def test_always_best_member_is_kept(labelled):
    X, y = labelled
    members = [ConstantLearner("pos"), ColumnLearner("label"), ConstantLearner("neg", name="other")]
    best = BestLearner(*members)
    best.fit(X, y)
    assert best.best_index == 1
    assert best.best_member is members[1]
    assert best.best_name == "column"
    assert best.scores_["column"].mean == 100.0
    independent = ColumnLearner("label").fit(X, y).transform(X)
    np.testing.assert_array_equal(best.transform(X).to_numpy(), independent.to_numpy())


def test_best_output_matches_member_on_held_out_rows(labelled):
    X, y = labelled
    X = X.drop(columns="label")
    train, test = np.arange(30), np.arange(30, 40)
    best = BestLearner(ConstantLearner("pos"), PrunedTree(), n_folds=3)
    best.fit(X.iloc[train], y[train])
    assert best.best_name == "prunedtree"
    independent = PrunedTree().fit(X.iloc[train], y[train]).transform(X.iloc[test])
    pd.testing.assert_frame_equal(best.transform(X.iloc[test]), independent)


def test_ties_go_to_first_member(labelled):
    X, y = labelled
    first, second = ConstantLearner("pos"), ConstantLearner("pos", name="twin")
    best = BestLearner(first, second).fit(X, y)
    assert best.best_member is first
    assert best.scores_["constant"].mean == best.scores_["twin"].mean


def test_error_metric_is_minimized():
    X = numeric_table(30)
    y = X["x1"].to_numpy()
    best = BestLearner(ConstantLearner(10.0), ColumnLearner("x1"), metric="rmse").fit(X, y)
    assert best.best_name == "column"
    assert best.scores_["column"].mean == 0.0


def test_greater_is_better_override():
    X = numeric_table(30)
    y = X["x1"].to_numpy()

    def distance(pred, actual):
        return float(np.mean(np.abs(pred.astype(float) - actual.astype(float))))

    best = BestLearner(ConstantLearner(10.0), ColumnLearner("x1"), metric=distance, greater_is_better=False).fit(X, y)
    assert best.best_name == "column"


def test_param_grid(labelled):
    X, y = labelled
    member = ConstantLearner("neg")
    best = BestLearner(member, param_grid={"constant": [{"value": "neg"}, {"value": "pos"}, {"value": "zzz"}]})
    best.fit(X, y)
    assert list(best.scores_) == ["constant[0]", "constant[1]", "constant[2]"]
    expected = "constant[1]" if (y == "pos").sum() > (y == "neg").sum() else "constant[0]"
    assert best.best_name == expected
    assert best.best_member is not member
    assert member.value == "neg"
    assert best.scores_["constant[2]"].mean == 0.0


def test_param_grid_with_learner(labelled):
    X, y = labelled
    X = X.drop(columns="label")
    best = BestLearner(PrunedTree(), param_grid={"prunedtree": [{"max_depth": 1}, {"max_depth": 3}]}, n_folds=4)
    best.fit(X, y)
    assert set(best.scores_) == {"prunedtree[0]", "prunedtree[1]"}
    assert best.best_member.max_depth in (1, 3)


def test_single_member_allowed(labelled):
    X, y = labelled
    best = BestLearner(ColumnLearner("label")).fit(X, y)
    assert best.best_index == 0


def test_default_members_when_empty():
    assert [m.name for m in BestLearner().members] == ["prunedtree", "ada", "rf"]


def test_member_failure_propagates(labelled):
    X, y = labelled
    with pytest.raises(ValueError, match="boom"):
        BestLearner(ConstantLearner("pos"), FailingLearner()).fit(X, y)


def test_best_needs_target(labelled):
    X, _ = labelled
    with pytest.raises(InvalidConfigurationError, match="needs a target"):
        BestLearner(ConstantLearner()).fit(X)
