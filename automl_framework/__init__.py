"""Composable ML pipelines: chain (>>), union (+) and selection (|) of stages, plus ensembles."""

from .errors import (
    PipelineError,
    StageNotImplementedError,
    InvalidConfigurationError,
    InsufficientDataError,
    ShapeMismatchError,
    NotFittedError,
)
from .base import StageBase, LearnerBase, TransformerBase, clone, fit, transform, fit_transform, fitted_copy
from .pipelines import Pipeline, FeatureUnion, Selection, parse_pipeline, explain
from .ensembles import VoteEnsemble, StackEnsemble, BestLearner
from .utils.crossval import CVResult, crossvalidate, kfold_split
from .utils.metrics import score

__all__ = [
    "PipelineError",
    "StageNotImplementedError",
    "InvalidConfigurationError",
    "InsufficientDataError",
    "ShapeMismatchError",
    "NotFittedError",
    "StageBase",
    "LearnerBase",
    "TransformerBase",
    "clone",
    "fit",
    "transform",
    "fit_transform",
    "fitted_copy",
    "Pipeline",
    "FeatureUnion",
    "Selection",
    "parse_pipeline",
    "explain",
    "VoteEnsemble",
    "StackEnsemble",
    "BestLearner",
    "CVResult",
    "crossvalidate",
    "kfold_split",
    "score",
]
