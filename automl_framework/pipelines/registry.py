"""Stage catalogue: short names for learners, transformers and ensembles."""

from __future__ import annotations

from typing import Any

from automl_framework.base import StageBase
from automl_framework.learners import LEARNER_REGISTRY
from automl_framework.transformers import TRANSFORMER_REGISTRY
from automl_framework.utils.registry import Registry


def default_registry() -> Registry:
    """A fresh catalogue (callers may register more without touching shared state)."""
    from automl_framework.ensembles import ENSEMBLE_REGISTRY
    registry = Registry("stage")
    registry.update(TRANSFORMER_REGISTRY)
    registry.update(LEARNER_REGISTRY)
    registry.update(ENSEMBLE_REGISTRY)
    return registry


def build_stage(name: str, registry: Registry | None = None, options: dict[str, Any] | None = None) -> StageBase:
    """Instantiate a catalogued stage; ensemble options end up in its config dict."""
    registry = registry or default_registry()
    return registry.create(name, **dict(options or {}))
