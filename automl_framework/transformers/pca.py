"""Principal component projection."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import TransformerBase


class PCA(TransformerBase):
    """Project onto the first n_components principal axes; output columns pca1..pcaN."""

    name = "pca"

    def __init__(self, name: str | None = None, n_components: int | float | None = None, **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self.n_components = n_components
        self._pca = None

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "PCA":
        from sklearn.decomposition import PCA as SKPCA
        X, _ = self._prepare(X)
        self._pca = SKPCA(n_components=self.n_components, random_state=42)
        self._pca.fit(X.to_numpy(dtype=np.float64))
        self._fitted = True
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        X, _ = self._prepare(X)
        Z = self._pca.transform(X.to_numpy(dtype=np.float64))
        return pd.DataFrame(Z, columns=[f"{self.name}{i + 1}" for i in range(Z.shape[1])], index=X.index)

    @property
    def n_features_out(self) -> int | None:
        return None if self._pca is None else int(self._pca.n_components_)
