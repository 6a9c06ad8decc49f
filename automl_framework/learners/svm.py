"""SVM learner."""

from typing import Any

from automl_framework.utils.tabular import CLASSIFICATION

from .base import SklearnLearnerBase


class SVM(SklearnLearnerBase):
    """Support Vector Machine (RBF by default); SVC or SVR depending on the target."""

    name = "svm"

    def __init__(
        self,
        name: str | None = None,
        C: float = 1.0,
        kernel: str = "rbf",
        gamma: str = "scale",
        **kwargs: Any,
    ) -> None:
        super().__init__(name=name, **kwargs)
        self.C = C
        self.kernel = kernel
        self.gamma = gamma

    def _build_estimator(self, task: str) -> Any:
        from sklearn.svm import SVC, SVR
        if task == CLASSIFICATION:
            return SVC(C=self.C, kernel=self.kernel, gamma=self.gamma, probability=True, random_state=42)
        return SVR(C=self.C, kernel=self.kernel, gamma=self.gamma)
