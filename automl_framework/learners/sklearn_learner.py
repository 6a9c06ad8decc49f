"""Generic wrapper around any scikit-learn estimator, looked up by class name."""

from __future__ import annotations

import importlib
from typing import Any

from automl_framework.errors import InvalidConfigurationError

from .base import SklearnLearnerBase

_SEARCH_MODULES = (
    "sklearn.ensemble",
    "sklearn.tree",
    "sklearn.linear_model",
    "sklearn.svm",
    "sklearn.neighbors",
    "sklearn.naive_bayes",
    "sklearn.discriminant_analysis",
    "sklearn.neural_network",
)


def find_sklearn_class(estimator: str, modules: tuple[str, ...] = _SEARCH_MODULES) -> type:
    """Find a scikit-learn class by name in the usual estimator modules."""
    for mod_name in modules:
        mod = importlib.import_module(mod_name)
        cls = getattr(mod, estimator, None)
        if cls is not None:
            return cls
    raise InvalidConfigurationError(f"No scikit-learn estimator named '{estimator}'")


class SKLearner(SklearnLearnerBase):
    """SKLearner("GradientBoostingClassifier", n_estimators=50): any sklearn predictor as a stage.

    The task is whatever the named estimator does; the target is passed straight through.
    """

    name = "sklearner"

    def __init__(self, estimator: str = "RandomForestClassifier", name: str | None = None, **estimator_params: Any) -> None:
        super().__init__(name=name or estimator.lower())
        self.estimator = estimator
        self.estimator_params = dict(estimator_params)
        find_sklearn_class(estimator)

    def set_params(self, **params: Any) -> "SKLearner":
        """Options the wrapper does not own are forwarded to the estimator."""
        own = {k: v for k, v in params.items() if k != "name" and hasattr(self, k)}
        self.estimator_params.update({k: v for k, v in params.items() if k not in own})
        super().set_params(**own)
        self._fitted = False
        return self

    def _build_estimator(self, task: str) -> Any:
        return find_sklearn_class(self.estimator)(**self.estimator_params)
