"""Root exception type."""

from __future__ import annotations


class VoiceSlotsError(Exception):
    """Base class for all errors raised by voiceslots."""
