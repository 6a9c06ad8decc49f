"""Tabular plumbing: coerce inputs to DataFrames, check row counts, concatenate outputs."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np
import pandas as pd

from automl_framework.errors import ShapeMismatchError

logger = logging.getLogger(__name__)

CLASSIFICATION = "classification"
REGRESSION = "regression"


def as_table(X: Any) -> pd.DataFrame:
    """Return X as a DataFrame. 2D arrays get columns x1..xn; a Series becomes one column."""
    if isinstance(X, pd.DataFrame):
        return X
    if isinstance(X, pd.Series):
        return X.to_frame(name=X.name if X.name is not None else "x1")
    arr = np.asarray(X)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise ShapeMismatchError(f"Features must be 2D (n_rows, n_columns). Got shape {arr.shape}.")
    return pd.DataFrame(arr, columns=[f"x{i + 1}" for i in range(arr.shape[1])])


def as_target(y: Any) -> np.ndarray | None:
    """Return y as a 1D numpy array (None stays None). One-column tables are squeezed."""
    if y is None:
        return None
    if isinstance(y, pd.DataFrame):
        return as_vector(y)
    if isinstance(y, pd.Series):
        return y.to_numpy()
    arr = np.asarray(y)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise ShapeMismatchError(f"Target must be 1D. Got shape {arr.shape}.")
    return arr


def as_vector(table: Any, stage: str | None = None) -> np.ndarray:
    """Flatten a one-column prediction table (or any 1D sequence) to a numpy vector."""
    if isinstance(table, pd.DataFrame):
        if table.shape[1] != 1:
            raise ShapeMismatchError(
                f"Expected a single prediction column, got {table.shape[1]} columns {list(table.columns)}.",
                stage=stage,
            )
        return table.iloc[:, 0].to_numpy()
    if isinstance(table, pd.Series):
        return table.to_numpy()
    return np.asarray(table).ravel()


def check_rows(X: pd.DataFrame, y: np.ndarray | None, stage: str | None = None) -> None:
    """Raise ShapeMismatchError if features and target disagree on row count."""
    if y is not None and len(X) != len(y):
        raise ShapeMismatchError(
            f"Feature rows ({len(X)}) and target length ({len(y)}) differ.",
            stage=stage,
        )


def take_rows(X: pd.DataFrame, indices: np.ndarray) -> pd.DataFrame:
    """Positional row subset (copy); the original index labels are kept."""
    return X.iloc[np.asarray(indices)].copy()


def predictions_table(values: Any, name: str, index: pd.Index | None = None) -> pd.DataFrame:
    """Wrap a prediction vector as a one-column table named after the producing stage."""
    return pd.DataFrame({name: np.asarray(values).ravel()}, index=index)


def dedupe_columns(names: Sequence[str]) -> list[str]:
    """First occurrence keeps its name; later duplicates get ``_<n>`` with the smallest free n >= 1."""
    taken = set(names)
    seen: set[str] = set()
    out: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            out.append(name)
            continue
        n = 1
        while f"{name}_{n}" in taken or f"{name}_{n}" in seen:
            n += 1
        renamed = f"{name}_{n}"
        seen.add(renamed)
        out.append(renamed)
    return out


def hconcat(tables: Sequence[pd.DataFrame], names: Sequence[str] | None = None, stage: str | None = None) -> pd.DataFrame:
    """Concatenate tables column-wise in order; all must have the same number of rows."""
    if not tables:
        raise ShapeMismatchError("Nothing to concatenate.", stage=stage)
    n_rows = len(tables[0])
    for i, t in enumerate(tables):
        if len(t) != n_rows:
            who = names[i] if names is not None else f"child {i}"
            raise ShapeMismatchError(
                f"{who} produced {len(t)} rows, expected {n_rows}.",
                stage=stage,
            )
    index = tables[0].index
    columns = dedupe_columns([str(c) for t in tables for c in t.columns])
    parts = [t.set_axis(index, axis=0) for t in tables]
    out = pd.concat(parts, axis=1)
    out.columns = columns
    return out


def infer_task(y: np.ndarray) -> str:
    """Classification for string/bool/categorical/integer targets, regression for floats."""
    if isinstance(y, pd.Categorical) or isinstance(getattr(y, "dtype", None), pd.CategoricalDtype):
        return CLASSIFICATION
    kind = np.asarray(y).dtype.kind
    if kind in ("O", "U", "S", "b", "i", "u"):
        return CLASSIFICATION
    return REGRESSION


def resolve_task(task: str | None, y: np.ndarray) -> str:
    """Honor an explicit task, else infer it from the target."""
    task = (task or "auto").lower()
    if task in (CLASSIFICATION, REGRESSION):
        return task
    return infer_task(y)
