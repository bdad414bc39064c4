"""Configuration loading and validation for the slot registry."""

from __future__ import annotations

from voiceslots.config.loader import load_config
from voiceslots.config.model import SlotRegistryConfig
from voiceslots.config.validator import _suggest_key, validate_config_file

__all__ = [
    "SlotRegistryConfig",
    "_suggest_key",
    "load_config",
    "validate_config_file",
]
