"""FeatureUnion: apply sibling stages to the same input and concatenate their columns."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import StageBase
from automl_framework.utils.parallel import run_parallel
from automl_framework.utils.tabular import hconcat

from .base import CompositeBase

logger = logging.getLogger(__name__)


class FeatureUnion(CompositeBase):
    """Union composite; `a + b` builds FeatureUnion(a, b).

    Output columns are the children's columns in declaration order. A name that is
    already taken gets ``_<n>`` (smallest free n >= 1), so downstream stages see one
    flat feature set.
    """

    name = "union"

    def __init__(self, *stages: StageBase, name: str | None = None, n_jobs: int = 1, **kwargs: Any) -> None:
        super().__init__(*stages, name=name, **kwargs)
        self.n_jobs = n_jobs

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "FeatureUnion":
        self._fitted = False
        X, y = self._prepare(X, y)
        run_parallel(lambda stage: stage.fit(X, y), self.stages, n_jobs=self.n_jobs)
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        outputs = run_parallel(lambda stage: stage.transform(X), self.stages, n_jobs=self.n_jobs)
        return hconcat(outputs, names=[s.name for s in self.stages], stage=self.name)

    def __repr__(self) -> str:
        return f"FeatureUnion(name={self.name!r}, stages={[s.name for s in self.stages]})"
