"""Random Forest learner."""

from typing import Any

from automl_framework.utils.tabular import CLASSIFICATION

from .base import SklearnLearnerBase


class RandomForest(SklearnLearnerBase):
    """Random Forest (classifier or regressor, depending on the target)."""

    name = "rf"

    def __init__(
        self,
        name: str | None = None,
        n_estimators: int = 100,
        max_depth: int | None = None,
        min_samples_leaf: int = 1,
        random_state: int | None = 42,
        **kwargs: Any,
    ) -> None:
        super().__init__(name=name, **kwargs)
        self.n_estimators = n_estimators
        self.max_depth = max_depth
        self.min_samples_leaf = min_samples_leaf
        self.random_state = random_state

    def _build_estimator(self, task: str) -> Any:
        from sklearn.ensemble import RandomForestClassifier, RandomForestRegressor
        cls = RandomForestClassifier if task == CLASSIFICATION else RandomForestRegressor
        return cls(
            n_estimators=self.n_estimators,
            max_depth=self.max_depth,
            min_samples_leaf=self.min_samples_leaf,
            random_state=self.random_state,
        )
