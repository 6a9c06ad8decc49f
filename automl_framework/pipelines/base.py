"""Base class for composites: stages that own an ordered list of child stages."""

from __future__ import annotations

from typing import Any

from automl_framework.base import StageBase
from automl_framework.errors import InvalidConfigurationError

from .tree import check_tree


class CompositeBase(StageBase):
    """Owns child stages; validates the tree on construction."""

    name = "composite"
    min_children: int = 1

    def __init__(self, *stages: StageBase, name: str | None = None, **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        if len(stages) == 1 and isinstance(stages[0], (list, tuple)):
            stages = tuple(stages[0])
        for s in stages:
            if not isinstance(s, StageBase):
                raise InvalidConfigurationError(
                    f"{type(self).__name__} children must be stages, got {type(s).__name__}", stage=self.name
                )
        if len(stages) < self.min_children:
            raise InvalidConfigurationError(
                f"{type(self).__name__} needs at least {self.min_children} stages, got {len(stages)}",
                stage=self.name,
            )
        self.stages: list[StageBase] = list(stages)
        self._from_operator = False
        check_tree(self)

    def children(self) -> list[StageBase]:
        return list(self.stages)

    @classmethod
    def _combine(cls, left: StageBase, right: StageBase) -> "CompositeBase":
        """Build cls(left, right), flattening operands that are operator-built cls instances."""
        if not isinstance(right, StageBase):
            raise TypeError(f"Cannot combine {type(left).__name__} with {type(right).__name__}")
        stages: list[StageBase] = []
        for operand in (left, right):
            if type(operand) is cls and getattr(operand, "_from_operator", False):
                stages.extend(operand.stages)
            else:
                stages.append(operand)
        combined = cls(*stages)
        combined._from_operator = True
        return combined

    def __len__(self) -> int:
        return len(self.stages)

    def __getitem__(self, idx: int) -> StageBase:
        return self.stages[idx]
