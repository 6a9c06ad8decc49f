"""Leaf transformers: fit(X, y=None), transform(X) -> table with the same rows."""

from .identity import Identity
from .selectors import ColumnSelector, CatFeatureSelector, NumFeatureSelector
from .normalizers import ZScore, UnitRange
from .onehot import OneHotEncoder
from .pca import PCA
from .imputer import Imputer
from .sklearn_preprocessor import SKPreprocessor

TRANSFORMER_REGISTRY: dict[str, type] = {
    "identity": Identity,
    "columns": ColumnSelector,
    "catf": CatFeatureSelector,
    "numf": NumFeatureSelector,
    "zscore": ZScore,
    "unitrange": UnitRange,
    "ohe": OneHotEncoder,
    "pca": PCA,
    "imputer": Imputer,
    "skpreprocessor": SKPreprocessor,
}

__all__ = [
    "Identity",
    "ColumnSelector",
    "CatFeatureSelector",
    "NumFeatureSelector",
    "ZScore",
    "UnitRange",
    "OneHotEncoder",
    "PCA",
    "Imputer",
    "SKPreprocessor",
    "TRANSFORMER_REGISTRY",
]
