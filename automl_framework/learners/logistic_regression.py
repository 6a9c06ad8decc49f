"""Regularized multinomial Logistic Regression."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from automl_framework.utils.tabular import CLASSIFICATION

from .base import SklearnLearnerBase

logger = logging.getLogger(__name__)


class LogisticRegression(SklearnLearnerBase):
    """L2-regularized Logistic Regression with standardized inputs.
    Supports tune_C: inner CV on the training rows only for C in C_grid."""

    name = "logreg"
    supported_tasks = (CLASSIFICATION,)

    def __init__(
        self,
        name: str | None = None,
        C: float = 1.0,
        tune_C: bool = False,
        C_grid: list[float] | None = None,
        max_iter: int = 1000,
        cv_folds: int = 3,
        **kwargs: Any,
    ) -> None:
        super().__init__(name=name, **kwargs)
        self.C = C
        self.tune_C = bool(tune_C)
        self.C_grid = C_grid or [0.01, 0.1, 1.0, 10.0]
        self.max_iter = max_iter
        self.cv_folds = cv_folds
        self.selected_C_: float | None = None

    def _make(self, C: float) -> Any:
        from sklearn.linear_model import LogisticRegression as LR
        from sklearn.pipeline import make_pipeline
        from sklearn.preprocessing import StandardScaler
        return make_pipeline(StandardScaler(), LR(C=C, max_iter=self.max_iter, random_state=42))

    def _select_best_C(self, X: np.ndarray, y: np.ndarray) -> float:
        from sklearn.model_selection import StratifiedKFold, cross_val_score

        n_splits = max(2, min(self.cv_folds, len(X) // 2))
        best_C, best_score = self.C, -1.0
        for C in self.C_grid:
            kf = StratifiedKFold(n_splits=n_splits, shuffle=True, random_state=42)
            mean_score = float(np.mean(cross_val_score(self._make(C), X, y, cv=kf, scoring="accuracy")))
            if mean_score > best_score:
                best_score, best_C = mean_score, C
        return best_C

    def _build_estimator(self, task: str) -> Any:
        return self._make(self.C)

    def fit(self, X: Any, y: Any = None) -> "LogisticRegression":
        if not self.tune_C:
            self.selected_C_ = self.C
            return super().fit(X, y)
        X_tab, y_arr = self._prepare(X, y)
        if y_arr is not None and len(X_tab) >= 6:
            self.selected_C_ = self._select_best_C(self._matrix(X_tab), y_arr)
            logger.info("[%s] selected C=%.4f (from grid %s)", self.name, self.selected_C_, self.C_grid)
        else:
            self.selected_C_ = self.C
        C = self.C
        self.C = self.selected_C_
        try:
            return super().fit(X_tab, y_arr)
        finally:
            self.C = C
