"""
Scoring metrics: accuracy (percent), balanced accuracy, macro F1, RMSE, MSE, MAE, R^2.
A metric is any callable (predictions, actual) -> float; names resolve through METRICS.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from automl_framework.errors import InsufficientDataError, InvalidConfigurationError, ShapeMismatchError
from automl_framework.utils.tabular import as_vector

Metric = Callable[[np.ndarray, np.ndarray], float]


def accuracy(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    """Percentage of exact label matches (0..100)."""
    return float(100.0 * np.sum(y_pred == y_true) / len(y_true))


def balanced_accuracy(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    """Per-class recall averaged (macro), in percent; robust to class imbalance."""
    from sklearn.metrics import balanced_accuracy_score
    return float(100.0 * balanced_accuracy_score(y_true, y_pred))


def f1_macro(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    from sklearn.metrics import f1_score
    return float(f1_score(y_true, y_pred, average="macro", zero_division=0))


def mse(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    from sklearn.metrics import mean_squared_error
    return float(mean_squared_error(np.asarray(y_true, dtype=np.float64), np.asarray(y_pred, dtype=np.float64)))


def rmse(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    return float(np.sqrt(mse(y_pred, y_true)))


def mae(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    from sklearn.metrics import mean_absolute_error
    return float(mean_absolute_error(np.asarray(y_true, dtype=np.float64), np.asarray(y_pred, dtype=np.float64)))


def r2(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    from sklearn.metrics import r2_score
    return float(r2_score(np.asarray(y_true, dtype=np.float64), np.asarray(y_pred, dtype=np.float64)))


METRICS: dict[str, Metric] = {
    "accuracy": accuracy,
    "balanced_accuracy": balanced_accuracy,
    "f1_macro": f1_macro,
    "mse": mse,
    "rmse": rmse,
    "mae": mae,
    "r2": r2,
}

# Error metrics: lower is better.
LOWER_IS_BETTER = {"mse", "rmse", "mae"}


def get_metric(metric: str | Metric) -> Metric:
    """Resolve a metric name or pass a callable through."""
    if callable(metric):
        return metric
    fn = METRICS.get(str(metric).lower())
    if fn is None:
        raise InvalidConfigurationError(f"Unknown metric '{metric}'. Available: {list(METRICS.keys())}")
    return fn


def metric_name(metric: str | Metric) -> str:
    if callable(metric):
        return getattr(metric, "__name__", repr(metric))
    return str(metric).lower()


def greater_is_better(metric: str | Metric) -> bool:
    """Direction of a metric; callables count as greater-is-better unless registered otherwise."""
    return metric_name(metric) not in LOWER_IS_BETTER


def score(metric: str | Metric, predictions: Any, actual: Any) -> float:
    """Score predictions (vector or one-column table) against actual values."""
    fn = get_metric(metric)
    pred = as_vector(predictions)
    true = as_vector(actual)
    if len(true) == 0:
        raise InsufficientDataError("Cannot score an empty target.")
    if len(pred) != len(true):
        raise ShapeMismatchError(f"{len(pred)} predictions for {len(true)} actual values.")
    return float(fn(pred, true))
