"""Stacked generalization: a meta-learner fit on out-of-fold member predictions."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import StageBase
from automl_framework.errors import InsufficientDataError, InvalidConfigurationError
from automl_framework.learners import RandomForest
from automl_framework.utils.crossval import cross_val_predict, kfold_split
from automl_framework.utils.parallel import run_parallel
from automl_framework.utils.tabular import (
    CLASSIFICATION,
    as_vector,
    dedupe_columns,
    hconcat,
    predictions_table,
    resolve_task,
)

from .base import EnsembleBase

logger = logging.getLogger(__name__)


class StackEnsemble(EnsembleBase):
    """
    fit: k-fold out-of-fold predictions per member form the meta-feature matrix
    (aligned by row); members are then refit on all rows and the meta-learner is
    fit on the meta-features against the target.
    transform: members predict, the meta-learner maps their predictions to the output.

    Classification meta-features are one-hot member predictions over the training
    labels (``<member>=<label>``); regression meta-features are the raw predictions.
    keep_original_features (config) appends the input columns to the meta-features.
    """

    name = "stack"

    def __init__(
        self,
        *members: StageBase,
        meta_learner: StageBase | None = None,
        name: str | None = None,
        config: dict[str, Any] | None = None,
        **options: Any,
    ) -> None:
        self.meta_learner = meta_learner if meta_learner is not None else RandomForest(name="stacker")
        super().__init__(*members, name=name, config=config, **options)
        self.keep_original_features = bool(self.config.get("keep_original_features", False))
        self.classes_: list[Any] = []
        self.oof_predictions_: pd.DataFrame | None = None
        self.oof_indices_: list[np.ndarray] = []
        self._member_names: list[str] = []

    def children(self) -> list[StageBase]:
        return list(self.stages) + [self.meta_learner]

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "StackEnsemble":
        self._fitted = False
        self._validate_members()
        X, y = self._prepare(X, y)
        y = self._require_target(y)
        n_rows = len(X)
        if self.n_folds > n_rows:
            raise InvalidConfigurationError(
                f"n_folds={self.n_folds} exceeds the number of training rows ({n_rows})", stage=self.name
            )
        self._task = resolve_task(self.task, y)
        folds = kfold_split(n_rows, self.n_folds, shuffle=self.shuffle, random_state=self.random_state)

        oof = run_parallel(lambda m: cross_val_predict(m, X, y, folds), self.stages, n_jobs=self.n_jobs)
        self.oof_indices_ = [test_idx for _, test_idx in folds]
        counts = np.bincount(np.concatenate(self.oof_indices_), minlength=n_rows)
        if not np.all(counts == 1):
            raise InsufficientDataError(
                "Out-of-fold indices do not cover every training row exactly once", stage=self.name
            )
        self._member_names = dedupe_columns([m.name for m in self.stages])
        self.oof_predictions_ = pd.DataFrame(dict(zip(self._member_names, oof)), index=X.index)
        self.classes_ = list(pd.unique(y)) if self._task == CLASSIFICATION else []

        self._fit_members(X, y)
        meta = self._meta_features(self.oof_predictions_, X)
        self.meta_learner.fit(meta, y)
        self._fitted = True
        logger.info(
            "StackEnsemble %s: %d members, %d folds, %d meta-features -> %s",
            self.name,
            len(self.stages),
            len(folds),
            meta.shape[1],
            self.meta_learner.name,
        )
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        preds = self._member_predictions(X)
        table = pd.DataFrame(dict(zip(self._member_names, preds)), index=X.index)
        out = self.meta_learner.transform(self._meta_features(table, X))
        return predictions_table(as_vector(out, stage=self.meta_learner.name), self.name, X.index)

    def _meta_features(self, predictions: pd.DataFrame, X: pd.DataFrame) -> pd.DataFrame:
        if self._task == CLASSIFICATION:
            parts: dict[str, np.ndarray] = {}
            for col in predictions.columns:
                values = predictions[col].to_numpy()
                for label in self.classes_:
                    parts[f"{col}={label}"] = (values == label).astype(np.float64)
            meta = pd.DataFrame(parts, index=predictions.index)
        else:
            meta = predictions.astype(np.float64)
        if self.keep_original_features:
            meta = hconcat([meta, X], names=["meta-features", "original features"], stage=self.name)
        return meta

    def _describe_detail(self) -> str | None:
        return f"meta_learner={self.meta_learner.name}"
