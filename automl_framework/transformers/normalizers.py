"""Column-wise normalizers: z-score and unit range."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import TransformerBase


class ZScore(TransformerBase):
    """
    Standardize each column with the mean/std seen at fit.
    Zero-variance columns keep std = 1 so they map to 0 instead of NaN.
    """

    name = "zscore"

    def __init__(self, name: str | None = None, **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self._mean: np.ndarray | None = None
        self._std: np.ndarray | None = None
        self._columns: list[Any] = []

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "ZScore":
        X, _ = self._prepare(X)
        values = X.to_numpy(dtype=np.float64)
        self._mean = np.mean(values, axis=0)
        std = np.std(values, axis=0)
        std[std < 1e-10] = 1.0
        self._std = std
        self._columns = list(X.columns)
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        z = (X.loc[:, self._columns].to_numpy(dtype=np.float64) - self._mean) / self._std
        return pd.DataFrame(z, columns=self._columns, index=X.index)


class UnitRange(TransformerBase):
    """Rescale each column to [0, 1] using the min/max seen at fit."""

    name = "unitrange"

    def __init__(self, name: str | None = None, **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self._min: np.ndarray | None = None
        self._span: np.ndarray | None = None
        self._columns: list[Any] = []

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "UnitRange":
        X, _ = self._prepare(X)
        values = X.to_numpy(dtype=np.float64)
        self._min = np.min(values, axis=0)
        span = np.max(values, axis=0) - self._min
        span[span < 1e-10] = 1.0
        self._span = span
        self._columns = list(X.columns)
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        scaled = (X.loc[:, self._columns].to_numpy(dtype=np.float64) - self._min) / self._span
        return pd.DataFrame(scaled, columns=self._columns, index=X.index)
