"""Tabular dataset helpers: iris, synthetic tables, CSV files."""

from .base import TabularDataset
from .iris import get_iris
from .synthetic import make_classification_table, make_regression_table
from .csv_loader import load_csv

__all__ = [
    "TabularDataset",
    "get_iris",
    "make_classification_table",
    "make_regression_table",
    "load_csv",
    "DATASET_REGISTRY",
    "get_dataset",
]

DATASET_REGISTRY = {
    "iris": get_iris,
    "synthetic_classification": make_classification_table,
    "synthetic_regression": make_regression_table,
}


def get_dataset(name: str, **kwargs: object) -> TabularDataset:
    """Build a named built-in dataset."""
    if name not in DATASET_REGISTRY:
        raise KeyError(f"Unknown dataset '{name}'. Available: {list(DATASET_REGISTRY.keys())}")
    return DATASET_REGISTRY[name](**kwargs)
