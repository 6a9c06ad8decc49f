"""Utility functions: tabular plumbing, metrics, registry, config.

Cross-validation lives in ``automl_framework.utils.crossval`` (it depends on the stage base).
"""

from .config_loader import load_config
from .metrics import METRICS, score, get_metric, greater_is_better
from .registry import Registry
from .tabular import as_table, as_target, as_vector, hconcat, infer_task

__all__ = [
    "load_config",
    "METRICS",
    "score",
    "get_metric",
    "greater_is_better",
    "Registry",
    "as_table",
    "as_target",
    "as_vector",
    "hconcat",
    "infer_task",
]
