"""YAML config loader and dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from weatherapi.config.schema import ServiceConfig


def load_config(path: str | Path) -> ServiceConfig:
    """Load and validate config from a YAML file. An empty file yields defaults."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return ServiceConfig(**raw)


def load_config_or_default(path: str | Path | None) -> ServiceConfig:
    """Load ``path`` if it exists, otherwise return the default config."""
    if path is None or not Path(path).exists():
        return ServiceConfig()
    return load_config(path)


def get_config_value(config: ServiceConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cache.ttl_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
