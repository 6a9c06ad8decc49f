"""Missing-value imputation: mean for numeric columns, most frequent level otherwise."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import TransformerBase


class Imputer(TransformerBase):
    """Fill missing values with statistics learned at fit."""

    name = "imputer"

    def __init__(self, name: str | None = None, strategy: str = "mean", **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self.strategy = strategy
        self._fill: dict[Any, Any] = {}

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "Imputer":
        X, _ = self._prepare(X)
        fill: dict[Any, Any] = {}
        for col in X.columns:
            s = X[col].dropna()
            if s.empty:
                continue
            if pd.api.types.is_numeric_dtype(s) and self.strategy in ("mean", "median"):
                fill[col] = float(s.mean() if self.strategy == "mean" else s.median())
            else:
                fill[col] = s.mode().iloc[0]
        self._fill = fill
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        return X.fillna(value=self._fill)
