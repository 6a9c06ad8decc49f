"""Stage-tree utilities: construction sanity check and human-readable explain()."""

from __future__ import annotations

from typing import Any

from automl_framework.base import StageBase
from automl_framework.errors import InvalidConfigurationError

MAX_TREE_DEPTH = 64
MAX_TREE_NODES = 10_000


def check_tree(root: StageBase, max_depth: int = MAX_TREE_DEPTH, max_nodes: int = MAX_TREE_NODES) -> int:
    """
    Validate a stage tree built from an expression. Returns the node count.
    Rejects trees deeper than max_depth, larger than max_nodes, and trees in which
    the same stage instance appears twice (two owners would share fitted state).
    """
    seen: set[int] = set()
    stack: list[tuple[StageBase, int]] = [(root, 1)]
    while stack:
        stage, depth = stack.pop()
        if depth > max_depth:
            raise InvalidConfigurationError(
                f"Stage tree deeper than {max_depth} levels at '{stage.name}'", stage=root.name
            )
        if id(stage) in seen:
            raise InvalidConfigurationError(
                f"Stage '{stage.name}' appears more than once in the tree; use separate instances",
                stage=root.name,
            )
        seen.add(id(stage))
        if len(seen) > max_nodes:
            raise InvalidConfigurationError(f"Stage tree has more than {max_nodes} nodes", stage=root.name)
        for child in stage.children():
            stack.append((child, depth + 1))
    return len(seen)


def explain(stage: StageBase, indent: str = "  ") -> str:
    """Render the stage tree as nested text, one node per line:

    Pipeline 'pipeline' [fitted]
      FeatureUnion 'union' [fitted]
        ZScore 'zscore' [fitted]
        PCA 'pca' [fitted]
      RandomForest 'rf' [fitted]
    """
    lines: list[str] = []
    _render(stage.describe(), 0, indent, lines)
    return "\n".join(lines)


def _render(node: dict[str, Any], level: int, indent: str, lines: list[str]) -> None:
    state = "fitted" if node.get("fitted") else "unfit"
    extra = node.get("detail")
    suffix = f" {extra}" if extra else ""
    lines.append(f"{indent * level}{node['type']} {node['name']!r} [{state}]{suffix}")
    for child in node.get("children", []):
        _render(child, level + 1, indent, lines)
