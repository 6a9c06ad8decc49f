"""Deterministic stub stages for exact-property tests."""

from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import LearnerBase, TransformerBase
from automl_framework.utils.tabular import predictions_table


class ConstantLearner(LearnerBase):
    """Always predicts `value`."""

    name = "constant"

    def __init__(self, value: Any = 0, name: str | None = None) -> None:
        super().__init__(name=name)
        self.value = value

    def fit(self, X, y=None):
        X, y = self._prepare(X, y)
        self._fitted = True
        return self

    def transform(self, X):
        self._check_fitted()
        X, _ = self._prepare(X)
        return predictions_table([self.value] * len(X), self.name, X.index)


class ColumnLearner(LearnerBase):
    """Predicts the values of one input column (a perfect learner when that column is the target)."""

    name = "column"

    def __init__(self, column: str = "x1", name: str | None = None) -> None:
        super().__init__(name=name)
        self.column = column

    def fit(self, X, y=None):
        self._prepare(X, y)
        self._fitted = True
        return self

    def transform(self, X):
        self._check_fitted()
        X, _ = self._prepare(X)
        return predictions_table(X[self.column].to_numpy(), self.name, X.index)


class SeenRowsLearner(LearnerBase):
    """Predicts 1 for rows whose index label was in its training set, else 0."""

    name = "seen"

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name=name)
        self.train_index: set = set()

    def fit(self, X, y=None):
        X, y = self._prepare(X, y)
        self.train_index = set(X.index)
        self._fitted = True
        return self

    def transform(self, X):
        self._check_fitted()
        X, _ = self._prepare(X)
        return predictions_table([int(i in self.train_index) for i in X.index], self.name, X.index)


class Center(TransformerBase):
    """Subtracts the column means seen at fit."""

    name = "center"

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name=name)
        self.mean_: pd.Series | None = None

    def fit(self, X, y=None):
        X, _ = self._prepare(X)
        self.mean_ = X.mean()
        self._fitted = True
        return self

    def transform(self, X):
        self._check_fitted()
        X, _ = self._prepare(X)
        return X - self.mean_


class Scale(TransformerBase):
    """Multiplies by a factor."""

    name = "scale"

    def __init__(self, factor: float = 2.0, name: str | None = None) -> None:
        super().__init__(name=name)
        self.factor = factor

    def fit(self, X, y=None):
        self._prepare(X)
        self._fitted = True
        return self

    def transform(self, X):
        self._check_fitted()
        X, _ = self._prepare(X)
        return X * self.factor


class DropLastRow(TransformerBase):
    """Broken transformer: loses a row."""

    name = "droplast"

    def fit(self, X, y=None):
        self._fitted = True
        return self

    def transform(self, X):
        return X.iloc[:-1]


class FailingLearner(LearnerBase):
    """Raises on fit."""

    name = "failing"

    def fit(self, X, y=None):
        raise ValueError("boom")


def numeric_table(n_rows: int = 100, n_cols: int = 3, seed: int = 0) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    return pd.DataFrame(rng.normal(size=(n_rows, n_cols)), columns=[f"x{i + 1}" for i in range(n_cols)])


class FailOnRefit(ConstantLearner):
    """Constant learner that raises on its second fit (copies share the count)."""

    name = "refit"

    def __init__(self, value: Any = 0, name: str | None = None) -> None:
        super().__init__(value, name=name)
        self.fits = 0

    def fit(self, X, y=None):
        self.fits += 1
        if self.fits > 1:
            raise ValueError("refit failed")
        return super().fit(X, y)
