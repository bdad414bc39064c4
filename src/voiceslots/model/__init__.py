"""Core data models for voiceslots."""

from .templates import BlockTemplate

__all__ = ["BlockTemplate"]
