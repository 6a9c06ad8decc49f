"""
Synthetic tables for pipeline testing and CI: separable classification
(optionally with a categorical column) and linear regression.
"""

import logging

import numpy as np
import pandas as pd

from .base import TabularDataset

logger = logging.getLogger(__name__)


def make_classification_table(
    n_rows: int = 200,
    n_numeric: int = 4,
    n_classes: int = 3,
    categorical: bool = False,
    class_sep: float = 2.0,
    random_state: int | None = 42,
) -> TabularDataset:
    """Gaussian blobs per class; `categorical` adds a string column correlated with the class."""
    from sklearn.datasets import make_classification
    X, y = make_classification(
        n_samples=n_rows,
        n_features=n_numeric,
        n_informative=min(n_numeric, max(2, n_classes)),
        n_redundant=0,
        n_classes=n_classes,
        n_clusters_per_class=1,
        class_sep=class_sep,
        random_state=random_state,
    )
    features = pd.DataFrame(X, columns=[f"num{i + 1}" for i in range(n_numeric)])
    class_names = [f"class{c}" for c in range(n_classes)]
    target = np.array([class_names[c] for c in y], dtype=object)
    if categorical:
        rng = np.random.default_rng(random_state)
        noise = rng.random(n_rows) < 0.2
        codes = np.where(noise, rng.integers(0, n_classes, size=n_rows), y)
        palette = np.array([f"level{c}" for c in range(n_classes)], dtype=object)
        features["color"] = palette[codes]
    logger.debug("Synthetic classification table: %s, classes=%s", features.shape, class_names)
    return TabularDataset(features=features, target=target, name="synthetic_classification", class_names=class_names)


def make_regression_table(
    n_rows: int = 200,
    n_numeric: int = 4,
    noise: float = 0.1,
    random_state: int | None = 42,
) -> TabularDataset:
    """Linear target with gaussian noise."""
    from sklearn.datasets import make_regression
    X, y = make_regression(n_samples=n_rows, n_features=n_numeric, noise=noise, random_state=random_state)
    features = pd.DataFrame(X, columns=[f"num{i + 1}" for i in range(n_numeric)])
    return TabularDataset(features=features, target=y.astype(np.float64), name="synthetic_regression")
