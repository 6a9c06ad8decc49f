"""Composition algebra: Pipeline (>>), FeatureUnion (+), Selection (|), expressions, explain."""

from .base import CompositeBase
from .tree import check_tree, explain
from .pipeline import Pipeline, make_pipeline
from .union import FeatureUnion
from .selection import Selection
from .registry import default_registry, build_stage
from .expression import parse_pipeline

__all__ = [
    "CompositeBase",
    "check_tree",
    "explain",
    "Pipeline",
    "make_pipeline",
    "FeatureUnion",
    "Selection",
    "default_registry",
    "build_stage",
    "parse_pipeline",
]
