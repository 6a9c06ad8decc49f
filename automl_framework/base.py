"""Capability contract shared by every stage: fit, transform, fit_transform.

Leaves (learners, transformers) and composites (pipelines, unions, selections,
ensembles) all derive from StageBase, so composites recurse through the same
interface. Operators build composites:

    a >> b    sequential chain (Pipeline)
    a + b     column-wise union (FeatureUnion)
    a | b     selection among alternatives (Selection)
"""

from __future__ import annotations

import copy
from abc import ABC
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.errors import InvalidConfigurationError, NotFittedError, StageNotImplementedError
from automl_framework.utils.tabular import as_table, as_target, check_rows


class StageBase(ABC):
    """Abstract stage. fit(X, y) -> self, transform(X) -> DataFrame."""

    name: str = "stage"

    def __init__(self, name: str | None = None, **kwargs: Any) -> None:
        self.name = name or type(self).name
        self.params = kwargs
        self._fitted = False

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "StageBase":
        """Fit on features (n_rows, n_columns) and optional target (n_rows,)."""
        raise StageNotImplementedError(f"{type(self).__name__} does not implement fit", stage=self.name)

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        """Transform features to a table with the same number of rows."""
        raise StageNotImplementedError(f"{type(self).__name__} does not implement transform", stage=self.name)

    def fit_transform(self, X: pd.DataFrame, y: np.ndarray | None = None) -> pd.DataFrame:
        """Fit and transform."""
        self.fit(X, y)
        return self.transform(X)

    @property
    def is_fitted(self) -> bool:
        return self._fitted

    def children(self) -> list["StageBase"]:
        """Direct child stages (empty for leaves)."""
        return []

    def set_params(self, **params: Any) -> "StageBase":
        """Update constructor options. The stage must be refit afterwards."""
        for key, value in params.items():
            if key == "name" or not hasattr(self, key):
                raise InvalidConfigurationError(
                    f"Unknown option '{key}' for {type(self).__name__}", stage=self.name
                )
            setattr(self, key, value)
            self.params[key] = value
        self._fitted = False
        return self

    def describe(self) -> dict[str, Any]:
        """Nested {type, name, fitted, children} structure used by explain()."""
        return {
            "type": type(self).__name__,
            "name": self.name,
            "fitted": self._fitted,
            "children": [c.describe() for c in self.children()],
        }

    def _check_fitted(self) -> None:
        if not self._fitted:
            raise NotFittedError("transform called before fit", stage=self.name)

    def _prepare(self, X: Any, y: Any = None) -> tuple[pd.DataFrame, np.ndarray | None]:
        """Coerce inputs and check row counts."""
        X = as_table(X)
        y = as_target(y)
        check_rows(X, y, stage=self.name)
        return X, y

    def __rshift__(self, other: "StageBase") -> "StageBase":
        from automl_framework.pipelines.pipeline import Pipeline
        return Pipeline._combine(self, other)

    def __add__(self, other: "StageBase") -> "StageBase":
        from automl_framework.pipelines.union import FeatureUnion
        return FeatureUnion._combine(self, other)

    def __or__(self, other: "StageBase") -> "StageBase":
        from automl_framework.pipelines.selection import Selection
        return Selection._combine(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, params={self.params})"


class LearnerBase(StageBase):
    """Leaf learner: consumes features + target at fit, outputs a one-column prediction table."""

    name = "learner"


class TransformerBase(StageBase):
    """Leaf transformer: target is accepted but ignored."""

    name = "transformer"


def clone(stage: StageBase) -> StageBase:
    """Deep, unfit copy of a stage (fresh copy for cross-validation folds)."""
    new = copy.deepcopy(stage)
    _mark_unfit(new)
    return new


def _mark_unfit(stage: StageBase) -> None:
    stage._fitted = False
    for child in stage.children():
        _mark_unfit(child)


def fit(stage: StageBase, X: Any, y: Any = None) -> StageBase:
    """Fit stage in place and return it."""
    return stage.fit(X, y)


def transform(stage: StageBase, X: Any) -> pd.DataFrame:
    """Apply a fitted stage."""
    return stage.transform(X)


def fit_transform(stage: StageBase, X: Any, y: Any = None) -> pd.DataFrame:
    """Fit stage in place, then transform the same input."""
    return stage.fit_transform(X, y)


def fitted_copy(stage: StageBase, X: Any, y: Any = None) -> StageBase:
    """Fit a fresh copy, leaving the given stage untouched."""
    return clone(stage).fit(X, y)
