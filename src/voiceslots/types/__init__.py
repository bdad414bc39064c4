"""Shared type aliases and capability protocols for voiceslots."""

from .capabilities import (
    BlockCatalog,
    HasRenameParticipant,
    HasSlotDefinition,
    HasSlotReference,
    IsInPalettePreview,
    SlotBlock,
    SlotWorkspace,
)
from .common import JsonObject, JsonScalar, JsonValue, Slot

__all__ = [
    "BlockCatalog",
    "HasRenameParticipant",
    "HasSlotDefinition",
    "HasSlotReference",
    "IsInPalettePreview",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Slot",
    "SlotBlock",
    "SlotWorkspace",
]
