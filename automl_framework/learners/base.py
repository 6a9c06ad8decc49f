"""Base class for scikit-learn backed learners. Unified API: fit(X, y), transform(X) -> predictions."""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import LearnerBase
from automl_framework.errors import InvalidConfigurationError
from automl_framework.utils.tabular import CLASSIFICATION, REGRESSION, predictions_table, resolve_task

logger = logging.getLogger(__name__)


class SklearnLearnerBase(LearnerBase):
    """Learner wrapping a scikit-learn estimator built per task (classification / regression).

    Subclasses implement _build_estimator(task); `supported_tasks` restricts which targets
    the learner accepts.
    """

    name = "sklearn_learner"
    supported_tasks: tuple[str, ...] = (CLASSIFICATION, REGRESSION)

    def __init__(self, name: str | None = None, task: str = "auto", **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self.task = task
        self._clf = None
        self._task: str | None = None
        self._columns: list[str] = []

    @abstractmethod
    def _build_estimator(self, task: str) -> Any:
        """Return an unfitted scikit-learn estimator for the task."""
        pass

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "SklearnLearnerBase":
        X, y = self._prepare(X, y)
        if y is None:
            raise InvalidConfigurationError("Learner needs a target to fit", stage=self.name)
        task = resolve_task(self.task, y)
        if task not in self.supported_tasks:
            raise InvalidConfigurationError(f"{type(self).__name__} does not support {task}", stage=self.name)
        clf = self._build_estimator(task)
        clf.fit(self._matrix(X), y)
        self._clf = clf
        self._task = task
        self._columns = [str(c) for c in X.columns]
        self._fitted = True
        logger.debug("%s fitted (%s) on %s", self.name, task, X.shape)
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        pred = self._clf.predict(self._matrix(X))
        return predictions_table(pred, self.name, X.index)

    def predict_proba(self, X: pd.DataFrame) -> pd.DataFrame:
        """Class probabilities as a table with one column per class (classification only)."""
        self._check_fitted()
        if self._task != CLASSIFICATION or not hasattr(self._clf, "predict_proba"):
            raise InvalidConfigurationError("predict_proba needs a probabilistic classifier", stage=self.name)
        X, _ = self._prepare(X)
        proba = self._clf.predict_proba(self._matrix(X)).astype(np.float64)
        return pd.DataFrame(proba, columns=[str(c) for c in self._clf.classes_], index=X.index)

    def _matrix(self, X: pd.DataFrame) -> np.ndarray:
        try:
            return X.to_numpy(dtype=np.float64)
        except (TypeError, ValueError) as e:
            non_numeric = [str(c) for c in X.columns if not pd.api.types.is_numeric_dtype(X[c])]
            raise InvalidConfigurationError(
                f"Features must be numeric; encode or drop columns {non_numeric} first ({e})",
                stage=self.name,
            ) from e
