"""Column selectors: explicit names, categorical columns, numeric columns."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np
import pandas as pd

from automl_framework.base import TransformerBase
from automl_framework.errors import ShapeMismatchError

logger = logging.getLogger(__name__)


class ColumnSelector(TransformerBase):
    """Select a fixed list of columns (by name)."""

    name = "columns"

    def __init__(self, columns: Sequence[str] = (), name: str | None = None, **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self.columns = list(columns)
        self._selected: list[Any] = []

    def _choose(self, X: pd.DataFrame) -> list[Any]:
        return list(self.columns)

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "ColumnSelector":
        X, _ = self._prepare(X)
        selected = self._choose(X)
        missing = [c for c in selected if c not in X.columns]
        if missing:
            raise ShapeMismatchError(f"Columns not found: {missing}", stage=self.name)
        if not selected:
            logger.warning("%s selected no columns from %s", self.name, list(X.columns))
        self._selected = selected
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        missing = [c for c in self._selected if c not in X.columns]
        if missing:
            raise ShapeMismatchError(f"Columns seen at fit are missing: {missing}", stage=self.name)
        return X.loc[:, self._selected].copy()


class CatFeatureSelector(ColumnSelector):
    """Select categorical (non-numeric) columns, decided once at fit time."""

    name = "catf"

    def _choose(self, X: pd.DataFrame) -> list[Any]:
        return [c for c in X.columns if not pd.api.types.is_numeric_dtype(X[c]) or pd.api.types.is_bool_dtype(X[c])]


class NumFeatureSelector(ColumnSelector):
    """Select numeric columns, decided once at fit time."""

    name = "numf"

    def _choose(self, X: pd.DataFrame) -> list[Any]:
        return [c for c in X.columns if pd.api.types.is_numeric_dtype(X[c]) and not pd.api.types.is_bool_dtype(X[c])]
