"""Decision tree with cost-complexity pruning."""

from typing import Any

from automl_framework.utils.tabular import CLASSIFICATION

from .base import SklearnLearnerBase


class PrunedTree(SklearnLearnerBase):
    """Single decision tree, pruned by minimal cost-complexity (ccp_alpha)."""

    name = "prunedtree"

    def __init__(
        self,
        name: str | None = None,
        ccp_alpha: float = 0.01,
        max_depth: int | None = None,
        random_state: int | None = 42,
        **kwargs: Any,
    ) -> None:
        super().__init__(name=name, **kwargs)
        self.ccp_alpha = ccp_alpha
        self.max_depth = max_depth
        self.random_state = random_state

    def _build_estimator(self, task: str) -> Any:
        from sklearn.tree import DecisionTreeClassifier, DecisionTreeRegressor
        cls = DecisionTreeClassifier if task == CLASSIFICATION else DecisionTreeRegressor
        return cls(ccp_alpha=self.ccp_alpha, max_depth=self.max_depth, random_state=self.random_state)
