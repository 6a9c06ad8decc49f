"""Generic wrapper around any scikit-learn transformer, looked up by class name."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import TransformerBase
from automl_framework.learners.sklearn_learner import find_sklearn_class

_SEARCH_MODULES = (
    "sklearn.preprocessing",
    "sklearn.decomposition",
    "sklearn.feature_selection",
    "sklearn.impute",
    "sklearn.random_projection",
)


class SKPreprocessor(TransformerBase):
    """SKPreprocessor("StandardScaler") / SKPreprocessor("FastICA", n_components=3)."""

    name = "skpreprocessor"

    def __init__(self, preprocessor: str = "StandardScaler", name: str | None = None, **preprocessor_params: Any) -> None:
        super().__init__(name=name or preprocessor.lower())
        self.preprocessor = preprocessor
        self.preprocessor_params = dict(preprocessor_params)
        self._tr = None
        find_sklearn_class(preprocessor, _SEARCH_MODULES)

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "SKPreprocessor":
        X, y = self._prepare(X, y)
        tr = find_sklearn_class(self.preprocessor, _SEARCH_MODULES)(**self.preprocessor_params)
        # Supervised selectors (e.g. SelectKBest) need y; unsupervised ones ignore it.
        tr.fit(X.to_numpy(dtype=np.float64), y)
        self._tr = tr
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        Z = np.asarray(self._tr.transform(X.to_numpy(dtype=np.float64)))
        if Z.shape[1] == X.shape[1]:
            columns = list(X.columns)
        else:
            columns = [f"{self.name}{i + 1}" for i in range(Z.shape[1])]
        return pd.DataFrame(Z, columns=columns, index=X.index)
