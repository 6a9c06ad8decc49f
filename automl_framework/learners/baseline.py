"""Baseline learner: majority class (classification) or mean (regression)."""

from __future__ import annotations

from collections import Counter
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import LearnerBase
from automl_framework.errors import InvalidConfigurationError
from automl_framework.utils.tabular import CLASSIFICATION, predictions_table, resolve_task


class Baseline(LearnerBase):
    """Predicts a constant learned from the target. Useful as a floor in BestLearner."""

    name = "baseline"

    def __init__(self, name: str | None = None, task: str = "auto", **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self.task = task
        self._value: Any = None

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "Baseline":
        X, y = self._prepare(X, y)
        if y is None or len(y) == 0:
            raise InvalidConfigurationError("Baseline needs a non-empty target", stage=self.name)
        if resolve_task(self.task, y) == CLASSIFICATION:
            # Counter keeps first-seen order, so ties go to the earliest label.
            self._value = Counter(y.tolist()).most_common(1)[0][0]
        else:
            self._value = float(np.mean(y))
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        return predictions_table([self._value] * len(X), self.name, X.index)
