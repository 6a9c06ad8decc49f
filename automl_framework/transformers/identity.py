"""Pass-through transformer."""

import numpy as np
import pandas as pd

from automl_framework.base import TransformerBase


class Identity(TransformerBase):
    """Returns its input unchanged (a copy). Handy as a union branch that keeps original columns."""

    name = "identity"

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "Identity":
        self._prepare(X)
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        return X.copy()
