from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from anystore.config.models import StoreConfig


class ConfigError(ValueError):
    # Raised for invalid store config (fail fast).
    pass


def load_yaml_config(path: Path) -> dict[str, object]:
    # Returns the raw mapping; an empty file is treated as an empty mapping.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def parse_store_config(raw: dict[str, object]) -> StoreConfig:
    try:
        return StoreConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid store config: {exc}") from exc


def load_store_config(path: Path) -> StoreConfig:
    return parse_store_config(load_yaml_config(path))
