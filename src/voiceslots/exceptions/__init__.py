"""Shared exception hierarchy for voiceslots."""

from __future__ import annotations

from .base import VoiceSlotsError
from .config import ConfigError
from .snapshot import SnapshotError

__all__ = [
    "ConfigError",
    "SnapshotError",
    "VoiceSlotsError",
]
