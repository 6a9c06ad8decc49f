"""Selection: choose among alternative sub-pipelines at fit time."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import StageBase
from automl_framework.errors import InvalidConfigurationError
from automl_framework.utils.crossval import CVResult, crossvalidate, kfold_split

from .base import CompositeBase

logger = logging.getLogger(__name__)

STRATEGIES = ("best", "vote", "stack")


class Selection(CompositeBase):
    """Selection composite over N >= 2 alternatives; `a | b | c` builds Selection(a, b, c).

    Every alternative is cross-validated (scores_) and then, by strategy:
      best   keep the single best-scoring alternative (BestLearner)
      vote   keep all, combine by majority vote / mean (VoteEnsemble)
      stack  keep all, combine through a meta-learner (StackEnsemble)
    The config dict is handed to the underlying ensemble unchanged.
    """

    name = "selection"
    min_children = 2

    def __init__(
        self,
        *alternatives: StageBase,
        strategy: str = "best",
        meta_learner: StageBase | None = None,
        name: str | None = None,
        config: dict[str, Any] | None = None,
        **options: Any,
    ) -> None:
        super().__init__(*alternatives, name=name)
        self.strategy = self._check_strategy(strategy)
        self.meta_learner = meta_learner
        cfg = dict(config or {})
        cfg.update(options)
        self.config = cfg
        self.scores_: dict[str, CVResult] = {}
        self._delegate = None

    def _check_strategy(self, strategy: str | None) -> str:
        strategy = (strategy or "best").lower()
        if strategy not in STRATEGIES:
            raise InvalidConfigurationError(
                f"Unknown selection strategy '{strategy}'. Available: {list(STRATEGIES)}", stage=self.name
            )
        return strategy

    def set_params(self, **params: Any) -> "Selection":
        if "strategy" in params:
            params["strategy"] = self._check_strategy(params["strategy"])
        super().set_params(**params)
        self._delegate = None
        return self

    @property
    def alternatives(self) -> list[StageBase]:
        return self.stages

    @property
    def selected(self) -> StageBase | None:
        """Best alternative (strategy "best") or the combining ensemble, after fit."""
        if self._delegate is None:
            return None
        best = getattr(self._delegate, "best_member", None)
        return best if best is not None else self._delegate

    def _build_delegate(self) -> StageBase:
        from automl_framework.ensembles import BestLearner, StackEnsemble, VoteEnsemble
        if self.strategy == "best":
            return BestLearner(*self.stages, name=self.name, config=self.config)
        if self.strategy == "vote":
            return VoteEnsemble(*self.stages, name=self.name, config=self.config)
        if self.strategy != "stack":
            raise InvalidConfigurationError(f"Unknown selection strategy '{self.strategy}'", stage=self.name)
        return StackEnsemble(*self.stages, meta_learner=self.meta_learner, name=self.name, config=self.config)

    def _score_alternatives(self, X: pd.DataFrame, y: np.ndarray) -> dict[str, CVResult]:
        folds = kfold_split(
            len(X),
            int(self.config.get("n_folds", 5)),
            shuffle=bool(self.config.get("shuffle", True)),
            random_state=self.config.get("random_state", 42),
        )
        metric = self.config.get("metric", "accuracy")
        return {s.name: crossvalidate(s, X, y, metric=metric, folds=folds) for s in self.stages}

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "Selection":
        self._fitted = False
        self._delegate = None
        self.scores_ = {}
        X, y = self._prepare(X, y)
        if y is None:
            raise InvalidConfigurationError("Selection needs a target to score alternatives", stage=self.name)
        delegate = self._build_delegate()
        if self.strategy != "best":
            self.scores_ = self._score_alternatives(X, y)
        delegate.fit(X, y)
        if self.strategy == "best":
            self.scores_ = dict(delegate.scores_)
        self._delegate = delegate
        self._fitted = True
        logger.info("Selection %s (%s) fitted over %d alternatives", self.name, self.strategy, len(self.stages))
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        return self._delegate.transform(X)

    def describe(self) -> dict[str, Any]:
        node = super().describe()
        detail = f"strategy={self.strategy}"
        if self._fitted and self.strategy == "best":
            detail += f" selected={self._delegate.best_name}"
        node["detail"] = detail
        return node

    def __repr__(self) -> str:
        return f"Selection(name={self.name!r}, strategy={self.strategy!r}, alternatives={[s.name for s in self.stages]})"
