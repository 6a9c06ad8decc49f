"""Iris flowers: 150 rows, 4 numeric columns, 3 string classes."""

import numpy as np
import pandas as pd

from .base import TabularDataset


def get_iris(shuffle: bool = True, random_state: int | None = 123) -> TabularDataset:
    """Load iris from scikit-learn with species names as the target."""
    from sklearn.datasets import load_iris
    raw = load_iris()
    columns = ["sepal_length", "sepal_width", "petal_length", "petal_width"]
    features = pd.DataFrame(raw.data, columns=columns)
    names = [str(n) for n in raw.target_names]
    target = np.array([names[i] for i in raw.target], dtype=object)
    ds = TabularDataset(features=features, target=target, name="iris", target_name="species", class_names=names)
    return ds.shuffled(random_state) if shuffle else ds
