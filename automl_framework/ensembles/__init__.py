"""Ensemble meta-learners: VoteEnsemble, StackEnsemble, BestLearner."""

from .base import EnsembleBase, default_members
from .vote import VoteEnsemble, plurality
from .stack import StackEnsemble
from .best import BestLearner

ENSEMBLE_REGISTRY: dict[str, type[EnsembleBase]] = {
    "vote": VoteEnsemble,
    "stack": StackEnsemble,
    "best": BestLearner,
}

__all__ = [
    "EnsembleBase",
    "default_members",
    "VoteEnsemble",
    "plurality",
    "StackEnsemble",
    "BestLearner",
    "ENSEMBLE_REGISTRY",
]
