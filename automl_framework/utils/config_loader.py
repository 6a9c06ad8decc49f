"""Configuration loader for YAML-based pipeline config. No module-level cache."""

from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load config from YAML file. Uses the packaged default if none given."""
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path, "r") as f:
        config = yaml.safe_load(f)
    return config or {}


def section(config: dict[str, Any] | None, name: str) -> dict[str, Any]:
    """Return config[name] as a dict (empty if missing or null)."""
    value = (config or {}).get(name)
    return dict(value) if isinstance(value, dict) else {}
