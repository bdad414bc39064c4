"""Snapshot loading exceptions."""

from __future__ import annotations

from voiceslots.exceptions.base import VoiceSlotsError


class SnapshotError(VoiceSlotsError, ValueError):
    """Raised when a workspace snapshot cannot be read or fails schema checks."""
