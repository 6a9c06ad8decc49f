"""
Pipeline expressions: a small text grammar that builds the same stage tree as the operators.

    parse_pipeline("(catf >> ohe) + (numf >> zscore) >> rf | ada | prunedtree")

Grammar (all operators left-associative, loosest first):

    select := chain ("|" chain)*             Selection
    chain  := union ((">>" | "|>") union)*   Pipeline
    union  := atom ("+" atom)*               FeatureUnion
    atom   := NAME ["(" args ")"] | "(" select ")"

Precedence matches Python's for the operators ``+``, ``>>`` and ``|``, so an expression
and its operator spelling build identical trees. ``args`` are Python literals, e.g.
``pca(n_components=2)`` or ``vote(n_folds=3)``.
"""

from __future__ import annotations

import ast
import logging
import re
from typing import Any, Callable, Mapping

from automl_framework.base import StageBase
from automl_framework.errors import InvalidConfigurationError
from automl_framework.utils.registry import Registry

from .pipeline import Pipeline
from .registry import default_registry
from .selection import Selection
from .tree import check_tree
from .union import FeatureUnion

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"\s*(?:(?P<op>\|>|>>|\||\+)|(?P<lp>\()|(?P<rp>\))|(?P<name>[A-Za-z_][A-Za-z0-9_]*))")


class _Parser:
    def __init__(
        self,
        text: str,
        namespace: Mapping[str, Any],
        registry: Registry,
        options: Mapping[str, dict[str, Any]],
    ) -> None:
        self.text = text
        self.pos = 0
        self.namespace = namespace
        self.registry = registry
        self.options = options

    def error(self, message: str) -> InvalidConfigurationError:
        return InvalidConfigurationError(f"{message} at position {self.pos} in {self.text!r}")

    def peek(self) -> tuple[str, str] | None:
        m = _TOKEN.match(self.text, self.pos)
        if m is None or m.lastgroup is None:
            return None
        return m.lastgroup, m.group(m.lastgroup)

    def advance(self) -> tuple[str, str]:
        m = _TOKEN.match(self.text, self.pos)
        if m is None or m.lastgroup is None:
            raise self.error("Unexpected character")
        self.pos = m.end()
        return m.lastgroup, m.group(m.lastgroup)

    def at_end(self) -> bool:
        return self.text[self.pos:].strip() == ""

    def parse(self) -> StageBase:
        if self.at_end():
            raise self.error("Empty pipeline expression")
        stage = self.select()
        if not self.at_end():
            raise self.error("Unexpected trailing input")
        return stage

    def _binary(self, operand: Callable[[], StageBase], ops: tuple[str, ...], combine: Callable[[StageBase, StageBase], StageBase]) -> StageBase:
        left = operand()
        while True:
            tok = self.peek()
            if tok is None or tok[0] != "op" or tok[1] not in ops:
                return left
            self.advance()
            left = combine(left, operand())

    def select(self) -> StageBase:
        return self._binary(self.chain, ("|",), Selection._combine)

    def chain(self) -> StageBase:
        return self._binary(self.union, (">>", "|>"), Pipeline._combine)

    def union(self) -> StageBase:
        return self._binary(self.atom, ("+",), FeatureUnion._combine)

    def atom(self) -> StageBase:
        if self.at_end():
            raise self.error("Expected a stage name or '('")
        kind, value = self.advance()
        if kind == "lp":
            stage = self.select()
            tok = self.peek()
            if tok is None or tok[0] != "rp":
                raise self.error("Missing ')'")
            self.advance()
            return stage
        if kind != "name":
            raise self.error(f"Unexpected {value!r}")
        args: tuple[Any, ...] = ()
        kwargs: dict[str, Any] = {}
        if self.text.startswith("(", self.pos):
            args, kwargs = self.call_args()
        return self.resolve(value, args, kwargs)

    def call_args(self) -> tuple[tuple[Any, ...], dict[str, Any]]:
        """Consume '( ... )' right after a name and evaluate its literal arguments."""
        depth, i, quote = 0, self.pos, None
        while i < len(self.text):
            ch = self.text[i]
            if quote:
                if ch == quote:
                    quote = None
            elif ch in "'\"":
                quote = ch
            elif ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    break
            i += 1
        else:
            raise self.error("Unclosed argument list")
        raw = self.text[self.pos + 1:i]
        self.pos = i + 1
        try:
            call = ast.parse(f"_({raw})", mode="eval").body
            args = tuple(ast.literal_eval(a) for a in call.args)
            kwargs = {kw.arg: ast.literal_eval(kw.value) for kw in call.keywords}
        except (SyntaxError, ValueError) as e:
            raise self.error(f"Arguments must be Python literals ({e})") from e
        return args, kwargs

    def resolve(self, name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> StageBase:
        if name in self.namespace:
            obj = self.namespace[name]
            if isinstance(obj, StageBase):
                if args or kwargs:
                    raise self.error(f"'{name}' is a stage instance and takes no arguments")
                return obj
            return obj(*args, **kwargs)
        merged = dict(self.options.get(name, {}))
        merged.update(kwargs)
        return self.registry.get(name)(*args, **merged)


def parse_pipeline(
    expression: str,
    namespace: Mapping[str, Any] | None = None,
    registry: Registry | None = None,
    options: Mapping[str, dict[str, Any]] | None = None,
) -> StageBase:
    """
    Build a stage tree from an expression.
    Names resolve from namespace first (stage instances or factories), then from the
    stage catalogue; options supplies per-name constructor defaults (e.g. from YAML).
    """
    parser = _Parser(expression, namespace or {}, registry or default_registry(), options or {})
    stage = parser.parse()
    check_tree(stage)
    logger.debug("Parsed pipeline expression %r -> %r", expression, stage)
    return stage
