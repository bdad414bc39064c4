"""Configuration-related exceptions."""

from __future__ import annotations

from voiceslots.exceptions.base import VoiceSlotsError


class ConfigError(VoiceSlotsError, ValueError):
    """Raised when registry configuration is invalid."""
