"""Leaf learners with a unified API: fit(X, y), transform(X) -> one-column prediction table."""

from .base import SklearnLearnerBase
from .random_forest import RandomForest
from .adaboost import Adaboost
from .pruned_tree import PrunedTree
from .svm import SVM
from .lda import LDA
from .logistic_regression import LogisticRegression
from .baseline import Baseline
from .sklearn_learner import SKLearner

LEARNER_REGISTRY: dict[str, type] = {
    "rf": RandomForest,
    "ada": Adaboost,
    "prunedtree": PrunedTree,
    "svm": SVM,
    "lda": LDA,
    "logreg": LogisticRegression,
    "baseline": Baseline,
    "sklearner": SKLearner,
}

__all__ = [
    "SklearnLearnerBase",
    "RandomForest",
    "Adaboost",
    "PrunedTree",
    "SVM",
    "LDA",
    "LogisticRegression",
    "Baseline",
    "SKLearner",
    "LEARNER_REGISTRY",
]
