"""
Row-wise k-fold splitting and cross-validation.
Every fold fits a fresh clone of the stage; nothing is fitted on held-out rows.
"""

from __future__ import annotations

import logging
import time
from typing import Any, NamedTuple

import numpy as np
import pandas as pd

from automl_framework.base import StageBase, clone
from automl_framework.errors import InsufficientDataError, InvalidConfigurationError
from automl_framework.utils.metrics import Metric, metric_name, score
from automl_framework.utils.parallel import run_parallel
from automl_framework.utils.tabular import as_table, as_target, as_vector, check_rows, take_rows

logger = logging.getLogger(__name__)

Fold = tuple[np.ndarray, np.ndarray]


class CVResult(NamedTuple):
    """Cross-validation summary; unpacks as (mean, std, scores)."""

    mean: float
    std: float
    scores: list[float]


def kfold_split(
    n_rows: int,
    k: int,
    shuffle: bool = False,
    random_state: int | None = None,
) -> list[Fold]:
    """
    K-fold split at row level. Returns list of (train_indices, test_indices).
    Folds are contiguous unless shuffle=True; shuffling is seeded by random_state.
    """
    if k < 2:
        raise InvalidConfigurationError(f"k-fold needs k >= 2, got k={k}")
    if k > n_rows:
        raise InvalidConfigurationError(f"k-fold count {k} exceeds the number of rows {n_rows}")
    from sklearn.model_selection import KFold
    kf = KFold(n_splits=k, shuffle=shuffle, random_state=random_state if shuffle else None)
    folds = [(train_idx, test_idx) for train_idx, test_idx in kf.split(np.arange(n_rows))]
    check_folds(folds)
    return folds


def check_folds(folds: list[Fold], stage: str | None = None) -> None:
    """Raise InsufficientDataError if any train or test partition is empty."""
    for i, (train_idx, test_idx) in enumerate(folds):
        if len(train_idx) == 0 or len(test_idx) == 0:
            raise InsufficientDataError(
                f"Fold {i + 1}/{len(folds)} is empty (train={len(train_idx)}, test={len(test_idx)})",
                stage=stage,
            )


def _fit_predict_fold(stage: StageBase, X: pd.DataFrame, y: np.ndarray, fold: Fold, fold_no: int) -> np.ndarray:
    """Fit a fresh clone on the fold's training rows and predict its held-out rows."""
    train_idx, test_idx = fold
    model = clone(stage)
    t0 = time.perf_counter()
    try:
        model.fit(take_rows(X, train_idx), y[train_idx])
        pred = as_vector(model.transform(take_rows(X, test_idx)), stage=stage.name)
    except Exception as e:
        logger.error("Stage %s failed on fold %d: %s", stage.name, fold_no, e)
        raise
    logger.debug(
        "Stage %s fold %d fit/predict completed in %.3f ms",
        stage.name,
        fold_no,
        (time.perf_counter() - t0) * 1e3,
    )
    return pred


def cross_val_predict(
    stage: StageBase,
    X: Any,
    y: Any,
    folds: list[Fold],
    n_jobs: int = 1,
) -> np.ndarray:
    """Out-of-fold predictions: each row is predicted by a model that never saw it."""
    X = as_table(X)
    y = as_target(y)
    check_rows(X, y, stage=stage.name)
    check_folds(folds, stage=stage.name)
    preds = run_parallel(
        lambda item: _fit_predict_fold(stage, X, y, item[1], item[0] + 1),
        list(enumerate(folds)),
        n_jobs=n_jobs,
    )
    out = np.empty(len(X), dtype=object)
    for (_, test_idx), pred in zip(folds, preds):
        out[test_idx] = pred
    return out


def crossvalidate(
    stage: StageBase,
    X: Any,
    y: Any,
    metric: str | Metric = "accuracy",
    k: int = 10,
    shuffle: bool = True,
    random_state: int | None = None,
    n_jobs: int = 1,
    folds: list[Fold] | None = None,
) -> CVResult:
    """
    Fit a fresh copy of stage on each fold's training rows and score it on the held-out rows.
    Returns CVResult(mean, std, scores); std is the sample standard deviation.
    A failure on any fold aborts the whole call.
    """
    X = as_table(X)
    y = as_target(y)
    if y is None:
        raise InvalidConfigurationError("crossvalidate needs a target", stage=stage.name)
    check_rows(X, y, stage=stage.name)
    if folds is None:
        folds = kfold_split(len(X), k, shuffle=shuffle, random_state=random_state)
    else:
        check_folds(folds, stage=stage.name)

    def _score_fold(item: tuple[int, Fold]) -> float:
        fold_no, fold = item
        pred = _fit_predict_fold(stage, X, y, fold, fold_no + 1)
        return score(metric, pred, y[fold[1]])

    scores = run_parallel(_score_fold, list(enumerate(folds)), n_jobs=n_jobs)
    mean = float(np.mean(scores))
    std = float(np.std(scores, ddof=1)) if len(scores) > 1 else 0.0
    logger.info(
        "Cross-validation %s: %s=%.3f +/- %.3f over %d folds",
        stage.name,
        metric_name(metric),
        mean,
        std,
        len(scores),
    )
    return CVResult(mean=mean, std=std, scores=[float(s) for s in scores])
