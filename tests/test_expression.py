"""Pipeline expressions build the same trees as the operators."""

import pytest

from automl_framework import FeatureUnion, InvalidConfigurationError, Pipeline, Selection, explain, parse_pipeline
from automl_framework.ensembles import VoteEnsemble
from automl_framework.pipelines import build_stage
from automl_framework.learners import Adaboost, RandomForest
from automl_framework.transformers import PCA, CatFeatureSelector, NumFeatureSelector, OneHotEncoder, ZScore
from automl_framework.utils.registry import Registry

from helpers import Scale


def test_precedence_matches_operators():
    parsed = parse_pipeline("numf + catf >> rf | ada")
    built = NumFeatureSelector() + CatFeatureSelector() >> RandomForest() | Adaboost()
    assert explain(parsed) == explain(built)
    assert isinstance(parsed, Selection)
    assert isinstance(parsed.stages[0], Pipeline)
    assert isinstance(parsed.stages[0].stages[0], FeatureUnion)


def test_parentheses_and_pipe_alias():
    parsed = parse_pipeline("(catf |> ohe) + (numf >> zscore) >> rf")
    built = (CatFeatureSelector() >> OneHotEncoder()) + (NumFeatureSelector() >> ZScore()) >> RandomForest()
    assert explain(parsed) == explain(built)


def test_nested_selection_flattens_like_operators():
    parsed = parse_pipeline("rf | (ada | prunedtree)")
    assert [s.name for s in parsed.stages] == ["rf", "ada", "prunedtree"]


def test_literal_arguments():
    stage = parse_pipeline("pca(n_components=2) >> rf(n_estimators=10, max_depth=3)")
    assert isinstance(stage.stages[0], PCA)
    assert stage.stages[0].n_components == 2
    assert stage.stages[1].n_estimators == 10
    assert stage.stages[1].max_depth == 3
    assert parse_pipeline("rf(name='forest')").name == "forest"


def test_options_supply_defaults():
    stage = parse_pipeline("rf", options={"rf": {"n_estimators": 7, "max_depth": 2}})
    assert stage.n_estimators == 7
    stage = parse_pipeline("rf(n_estimators=3)", options={"rf": {"n_estimators": 7}})
    assert stage.n_estimators == 3


def test_ensemble_names():
    stage = parse_pipeline("zscore >> vote(n_folds=3)")
    ensemble = stage.stages[1]
    assert isinstance(ensemble, VoteEnsemble)
    assert ensemble.n_folds == 3
    assert [m.name for m in ensemble.members] == ["prunedtree", "ada", "rf"]


def test_namespace_resolution():
    shared = Scale(5.0, name="five")
    stage = parse_pipeline("five >> half", namespace={"five": shared, "half": lambda: Scale(0.5, name="half")})
    assert stage.stages[0] is shared
    assert stage.stages[1].factor == 0.5


def test_custom_registry():
    registry = Registry("stage", {"scale": Scale})
    stage = parse_pipeline("scale(4.0)", registry=registry)
    assert stage.factor == 4.0
    with pytest.raises(InvalidConfigurationError, match="Unknown stage 'rf'"):
        parse_pipeline("rf", registry=registry)


@pytest.mark.parametrize(
    "expression",
    ["", "   ", "rf >>", "(rf", "rf)", "rf ada", "nosuch", "rf(n_estimators=foo)", "rf(", ">> rf", "rf & ada"],
)
def test_invalid_expressions(expression):
    with pytest.raises(InvalidConfigurationError):
        parse_pipeline(expression)


def test_instance_takes_no_arguments():
    with pytest.raises(InvalidConfigurationError, match="takes no arguments"):
        parse_pipeline("s(1)", namespace={"s": Scale()})


def test_repeated_instance_rejected():
    s = Scale()
    with pytest.raises(InvalidConfigurationError, match="more than once"):
        parse_pipeline("s >> s", namespace={"s": s})


def test_registry_decorator():
    registry = Registry("stage")

    @registry.register()
    class Double(Scale):
        name = "double"

        def __init__(self, name=None):
            super().__init__(2.0, name=name)

    assert "double" in registry
    assert registry.list_names() == ["double"]
    assert parse_pipeline("double", registry=registry).factor == 2.0


def test_build_stage():
    rf = build_stage("rf", options={"n_estimators": 12})
    assert isinstance(rf, RandomForest)
    assert rf.n_estimators == 12
    vote = build_stage("vote", options={"n_folds": 3})
    assert vote.n_folds == 3
    scale = build_stage("scale", registry=Registry("stage", {"scale": Scale}), options={"factor": 0.25})
    assert scale.factor == 0.25
    with pytest.raises(InvalidConfigurationError):
        build_stage("nosuch")
