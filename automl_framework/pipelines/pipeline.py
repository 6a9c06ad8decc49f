"""Pipeline: stage 1 -> stage 2 -> ... -> stage N.

Strict order: during fit, stage i is fit on the output of stage i-1 (with the
original target); during transform, features are piped through every stage.
"""

import logging
import time
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import StageBase

from .base import CompositeBase

logger = logging.getLogger(__name__)


class Pipeline(CompositeBase):
    """Sequential composite; `a >> b` builds Pipeline(a, b)."""

    name = "pipeline"

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "Pipeline":
        """Fit each stage on the previous stage's output; the last stage is only fit."""
        self._fitted = False
        data, y = self._prepare(X, y)
        last = len(self.stages) - 1
        for i, stage in enumerate(self.stages):
            start = time.perf_counter()
            if i < last:
                data = stage.fit_transform(data, y)
            else:
                stage.fit(data, y)
            logger.debug(
                "Pipeline %s: step %s fit completed in %.3f ms",
                self.name,
                stage.name,
                (time.perf_counter() - start) * 1e3,
            )
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        """Pipe features through every fitted stage."""
        self._check_fitted()
        data, _ = self._prepare(X)
        for stage in self.stages:
            data = stage.transform(data)
        return data

    def fit_transform(self, X: pd.DataFrame, y: np.ndarray | None = None) -> pd.DataFrame:
        """Fit every stage and return the last stage's output on X."""
        self._fitted = False
        data, y = self._prepare(X, y)
        for stage in self.stages:
            data = stage.fit_transform(data, y)
        self._fitted = True
        return data

    def __repr__(self) -> str:
        return f"Pipeline(name={self.name!r}, stages={[s.name for s in self.stages]})"


def make_pipeline(*stages: StageBase, **kwargs: Any) -> Pipeline:
    """Pipeline(*stages) with keyword options (e.g. name)."""
    return Pipeline(*stages, **kwargs)
