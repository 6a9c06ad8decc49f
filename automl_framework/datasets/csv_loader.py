"""CSV loader: one file, one target column."""

from pathlib import Path

import pandas as pd

from automl_framework.errors import InvalidConfigurationError

from .base import TabularDataset


def load_csv(path: str | Path, target: str, **read_kwargs: object) -> TabularDataset:
    """Read a CSV with pandas; `target` names the label column, the rest are features."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data not found: {path}")
    df = pd.read_csv(path, **read_kwargs)
    if target not in df.columns:
        raise InvalidConfigurationError(f"Target column '{target}' not in {list(df.columns)}")
    y = df[target].to_numpy()
    features = df.drop(columns=[target])
    class_names = [str(c) for c in pd.unique(y)] if y.dtype.kind in ("O", "U", "S", "b") else []
    return TabularDataset(features=features, target=y, name=path.stem, target_name=target, class_names=class_names)
