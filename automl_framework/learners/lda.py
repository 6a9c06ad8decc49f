"""LDA learner."""

from typing import Any

from automl_framework.utils.tabular import CLASSIFICATION

from .base import SklearnLearnerBase


class LDA(SklearnLearnerBase):
    """Linear Discriminant Analysis."""

    name = "lda"
    supported_tasks = (CLASSIFICATION,)

    def _build_estimator(self, task: str) -> Any:
        from sklearn.discriminant_analysis import LinearDiscriminantAnalysis
        return LinearDiscriminantAnalysis()
