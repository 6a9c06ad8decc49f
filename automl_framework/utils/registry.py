"""Name -> stage factory catalogue used by the expression parser and YAML configs."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from automl_framework.errors import InvalidConfigurationError


class Registry:
    """Registry that maps short names to stage classes or factories."""

    def __init__(self, name: str = "registry", entries: Mapping[str, Callable[..., Any]] | None = None) -> None:
        self._name = name
        self._store: dict[str, Callable[..., Any]] = dict(entries or {})

    def register(self, name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator to register a class or factory."""

        def decorator(obj: Callable[..., Any]) -> Callable[..., Any]:
            key = name if name is not None else getattr(obj, "name", None) or obj.__name__
            self._store[key] = obj
            return obj

        return decorator

    def update(self, entries: Mapping[str, Callable[..., Any]]) -> "Registry":
        self._store.update(entries)
        return self

    def get(self, name: str) -> Callable[..., Any]:
        if name not in self._store:
            raise InvalidConfigurationError(
                f"Unknown {self._name} '{name}'. Available: {sorted(self._store.keys())}"
            )
        return self._store[name]

    def create(self, name: str, **kwargs: Any) -> Any:
        """Instantiate a fresh stage by name."""
        return self.get(name)(**kwargs)

    def list_names(self) -> list[str]:
        return list(self._store.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._store
