"""Config loading and normalization for the slot registry."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from voiceslots.config.model import SlotRegistryConfig
from voiceslots.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    GAP_CONFIG_KEYS,
    STRING_CONFIG_KEYS,
)
from voiceslots.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SlotRegistryConfig:
    """Load and validate registry config from ``voiceslots.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SlotRegistryConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {unknown}")

    values: dict[str, Any] = {}
    for key in STRING_CONFIG_KEYS:
        if key in raw:
            values[key] = _ensure_identifier(raw[key], key)
    for key in GAP_CONFIG_KEYS:
        if key in raw:
            values[key] = _ensure_positive_int(raw[key], key)

    return SlotRegistryConfig(**values)


def _ensure_identifier(value: Any, key_name: str) -> str:
    """Require a non-empty string, returned without surrounding whitespace."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value
