"""Best-of-N selection by cross-validated score."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from automl_framework.base import StageBase, clone
from automl_framework.utils.crossval import CVResult, crossvalidate, kfold_split
from automl_framework.utils.metrics import greater_is_better, metric_name
from automl_framework.utils.parallel import run_parallel
from automl_framework.utils.tabular import dedupe_columns, resolve_task

from .base import EnsembleBase

logger = logging.getLogger(__name__)


class BestLearner(EnsembleBase):
    """
    Cross-validate every member on the same seeded folds, average per-fold scores,
    refit the best member on all rows and delegate transform to it.
    Ties go to the first-declared member. Error metrics (rmse, mse, mae) are minimized;
    for custom callables set ``greater_is_better`` in the config.

    param_grid (config) maps a member name to a list of option dicts; that member is
    then evaluated once per option set (as separate clones) instead of as declared.
    """

    name = "best"
    min_members = 1

    def __init__(
        self,
        *members: StageBase,
        name: str | None = None,
        config: dict[str, Any] | None = None,
        **options: Any,
    ) -> None:
        super().__init__(*members, name=name, config=config, **options)
        self.param_grid: dict[str, list[dict[str, Any]]] = dict(self.config.get("param_grid") or {})
        gib = self.config.get("greater_is_better")
        self.greater_is_better = greater_is_better(self.metric) if gib is None else bool(gib)
        self.best_member: StageBase | None = None
        self.best_index: int | None = None
        self.best_name: str | None = None
        self.scores_: dict[str, CVResult] = {}

    def _candidates(self) -> list[tuple[str, StageBase]]:
        """(label, stage) per candidate, in declaration order; grid options expand a member."""
        labels: list[str] = []
        stages: list[StageBase] = []
        for member in self.stages:
            grid = self.param_grid.get(member.name)
            if not grid:
                labels.append(member.name)
                stages.append(member)
                continue
            for j, params in enumerate(grid):
                candidate = clone(member)
                candidate.set_params(**params)
                labels.append(f"{member.name}[{j}]")
                stages.append(candidate)
        return list(zip(dedupe_columns(labels), stages))

    def fit(self, X: pd.DataFrame, y: np.ndarray | None = None) -> "BestLearner":
        self._fitted = False
        self._validate_members()
        X, y = self._prepare(X, y)
        y = self._require_target(y)
        self._task = resolve_task(self.task, y)
        folds = kfold_split(len(X), self.n_folds, shuffle=self.shuffle, random_state=self.random_state)
        candidates = self._candidates()
        results = run_parallel(
            lambda item: crossvalidate(item[1], X, y, metric=self.metric, folds=folds),
            candidates,
            n_jobs=self.n_jobs,
        )
        best_i = 0
        for i in range(1, len(results)):
            mean, best_mean = results[i].mean, results[best_i].mean
            if (mean > best_mean) if self.greater_is_better else (mean < best_mean):
                best_i = i
        self.scores_ = {label: result for (label, _), result in zip(candidates, results)}
        label, best = candidates[best_i]
        best.fit(X, y)
        self.best_member = best
        self.best_index = best_i
        self.best_name = label
        self._fitted = True
        logger.info(
            "BestLearner %s selected %s (%s=%.3f +/- %.3f over %d candidates)",
            self.name,
            label,
            metric_name(self.metric),
            results[best_i].mean,
            results[best_i].std,
            len(candidates),
        )
        return self

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        return self.best_member.transform(X)

    def _describe_detail(self) -> str | None:
        return f"best={self.best_name}" if self._fitted else None
