"""Base class for ensemble meta-learners. Members are arbitrary stages, so ensembles nest."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import StageBase
from automl_framework.errors import InvalidConfigurationError
from automl_framework.learners import Adaboost, PrunedTree, RandomForest
from automl_framework.pipelines.base import CompositeBase
from automl_framework.utils.parallel import run_parallel
from automl_framework.utils.tabular import as_vector

logger = logging.getLogger(__name__)


def default_members() -> list[StageBase]:
    """Fresh default trio used when an ensemble is built without members."""
    return [PrunedTree(), Adaboost(), RandomForest()]


class EnsembleBase(CompositeBase):
    """
    Ensemble over member stages, configured by an explicit dict (never module globals):

        metric        scoring metric name or callable      (default "accuracy")
        n_folds       k for internal k-fold passes         (default 5)
        shuffle       shuffle rows before splitting         (default True)
        random_state  seed for the shuffle                  (default 42)
        n_jobs        threads for member/fold fitting       (default 1)
        task          "auto" | "classification" | "regression"

    Keyword options override config entries. Passing a single Selection
    (``VoteEnsemble(a | b | c)``) adopts its alternatives as members.
    """

    name = "ensemble"
    min_children = 0
    min_members = 2

    def __init__(
        self,
        *members: StageBase,
        name: str | None = None,
        config: dict[str, Any] | None = None,
        **options: Any,
    ) -> None:
        members = self._expand_members(members)
        if not members:
            members = tuple(default_members())
        super().__init__(*members, name=name)
        cfg = dict(config or {})
        cfg.update(options)
        self.config = cfg
        self.metric = cfg.get("metric", "accuracy")
        self.n_folds = int(cfg.get("n_folds", 5))
        self.shuffle = bool(cfg.get("shuffle", True))
        self.random_state = cfg.get("random_state", 42)
        self.n_jobs = int(cfg.get("n_jobs", 1))
        self.task = cfg.get("task", "auto")
        self._task: str | None = None

    @staticmethod
    def _expand_members(members: tuple[Any, ...]) -> tuple[StageBase, ...]:
        from automl_framework.pipelines.selection import Selection
        if len(members) == 1 and isinstance(members[0], (list, tuple)):
            members = tuple(members[0])
        if len(members) == 1 and isinstance(members[0], Selection):
            return tuple(members[0].alternatives)
        return tuple(members)

    @property
    def members(self) -> list[StageBase]:
        return self.stages

    def _validate_members(self) -> None:
        if len(self.stages) < self.min_members:
            raise InvalidConfigurationError(
                f"{type(self).__name__} needs at least {self.min_members} members, got {len(self.stages)}",
                stage=self.name,
            )

    def _require_target(self, y: np.ndarray | None) -> np.ndarray:
        if y is None:
            raise InvalidConfigurationError(f"{type(self).__name__} needs a target to fit", stage=self.name)
        return y

    def _fit_members(self, X: pd.DataFrame, y: np.ndarray) -> None:
        run_parallel(lambda m: m.fit(X, y), self.stages, n_jobs=self.n_jobs)

    def _member_predictions(self, X: pd.DataFrame) -> list[np.ndarray]:
        """One prediction vector per member, in declaration order."""
        return run_parallel(lambda m: as_vector(m.transform(X), stage=m.name), self.stages, n_jobs=self.n_jobs)

    def _describe_detail(self) -> str | None:
        return None

    def describe(self) -> dict[str, Any]:
        node = super().describe()
        detail = self._describe_detail()
        if detail:
            node["detail"] = detail
        return node

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, members={[m.name for m in self.stages]})"
