"""One-hot encoding of categorical columns with levels fixed at fit."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import TransformerBase

logger = logging.getLogger(__name__)


class OneHotEncoder(TransformerBase):
    """
    Encode non-numeric columns as indicator columns ``<column>=<level>``.
    Numeric columns pass through unless they have at most numeric_levels distinct
    values. Levels unseen at fit map to all-zero rows.
    """

    name = "ohe"

    def __init__(self, name: str | None = None, numeric_levels: int = 0, **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self.numeric_levels = numeric_levels
        self._levels: dict[Any, list[Any]] = {}
        self._columns: list[Any] = []

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "OneHotEncoder":
        X, _ = self._prepare(X)
        levels: dict[Any, list[Any]] = {}
        for col in X.columns:
            uniq = pd.unique(X[col].dropna())
            numeric = pd.api.types.is_numeric_dtype(X[col]) and not pd.api.types.is_bool_dtype(X[col])
            if numeric and len(uniq) > self.numeric_levels:
                continue
            levels[col] = list(uniq)
        logger.debug("%s encodes %d of %d columns", self.name, len(levels), X.shape[1])
        self._levels = levels
        self._columns = list(X.columns)
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        parts: dict[str, np.ndarray] = {}
        for col in self._columns:
            if col not in self._levels:
                parts[str(col)] = X[col].to_numpy()
                continue
            values = X[col].to_numpy()
            for level in self._levels[col]:
                parts[f"{col}={level}"] = (values == level).astype(np.float64)
        return pd.DataFrame(parts, index=X.index)
