"""Majority-vote ensemble."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Sequence

import numpy as np
import pandas as pd

from automl_framework.utils.tabular import CLASSIFICATION, predictions_table, resolve_task

from .base import EnsembleBase

logger = logging.getLogger(__name__)


def plurality(votes: Sequence[Any]) -> Any:
    """Most frequent vote; among tied labels, the one cast by the earliest voter wins."""
    counts = Counter(votes)
    top = max(counts.values())
    return next(v for v in votes if counts[v] == top)


class VoteEnsemble(EnsembleBase):
    """Fit every member on the full data; combine predictions per row.

    Classification: plurality vote (ties -> first-declared member among the tied labels).
    Regression: arithmetic mean of member predictions.
    """

    name = "vote"

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "VoteEnsemble":
        self._fitted = False
        self._validate_members()
        X, y = self._prepare(X, y)
        y = self._require_target(y)
        self._task = resolve_task(self.task, y)
        self._fit_members(X, y)
        self._fitted = True
        logger.info("VoteEnsemble %s fitted %d members (%s)", self.name, len(self.stages), self._task)
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        preds = self._member_predictions(X)
        if self._task == CLASSIFICATION:
            combined = [plurality(row) for row in zip(*preds)]
        else:
            combined = np.mean(np.column_stack(preds).astype(np.float64), axis=1)
        return predictions_table(combined, self.name, X.index)

    def _describe_detail(self) -> str | None:
        return f"task={self._task}" if self._fitted else None
