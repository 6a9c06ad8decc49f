"""Error taxonomy for stages, composites and ensembles.

Every error may carry the name of the stage that raised it; the message is then
prefixed with ``[stage_name]`` so nested failures stay diagnosable.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for all framework errors."""

    def __init__(self, message: str, stage: str | None = None) -> None:
        self.stage = stage
        self.message = message
        super().__init__(f"[{stage}] {message}" if stage else message)


class StageNotImplementedError(PipelineError, NotImplementedError):
    """A stage variant did not override fit or transform."""


class InvalidConfigurationError(PipelineError, ValueError):
    """Malformed ensemble, fold or expression setup (too few members, invalid k, ...)."""


class InsufficientDataError(PipelineError, ValueError):
    """A fold or split produced an empty partition."""


class ShapeMismatchError(PipelineError, ValueError):
    """Feature/target row counts disagree, or union children disagree on rows."""


class NotFittedError(PipelineError, RuntimeError):
    """transform called before a successful fit."""
