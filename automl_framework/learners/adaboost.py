"""AdaBoost over shallow decision trees."""

from typing import Any

from automl_framework.utils.tabular import CLASSIFICATION

from .base import SklearnLearnerBase


class Adaboost(SklearnLearnerBase):
    """AdaBoost with decision-stump (depth 1) base estimators by default."""

    name = "ada"

    def __init__(
        self,
        name: str | None = None,
        n_estimators: int = 50,
        learning_rate: float = 1.0,
        base_depth: int = 1,
        random_state: int | None = 42,
        **kwargs: Any,
    ) -> None:
        super().__init__(name=name, **kwargs)
        self.n_estimators = n_estimators
        self.learning_rate = learning_rate
        self.base_depth = base_depth
        self.random_state = random_state

    def _build_estimator(self, task: str) -> Any:
        from sklearn.ensemble import AdaBoostClassifier, AdaBoostRegressor
        from sklearn.tree import DecisionTreeClassifier, DecisionTreeRegressor
        if task == CLASSIFICATION:
            base = DecisionTreeClassifier(max_depth=self.base_depth, random_state=self.random_state)
            cls = AdaBoostClassifier
        else:
            base = DecisionTreeRegressor(max_depth=self.base_depth, random_state=self.random_state)
            cls = AdaBoostRegressor
        return cls(
            estimator=base,
            n_estimators=self.n_estimators,
            learning_rate=self.learning_rate,
            random_state=self.random_state,
        )
