"""In-memory workspace implementing the slot capability protocols."""

from __future__ import annotations

from voiceslots.workspace.blocks import Block, SlotDefinitionBlock, SlotGetterBlock
from voiceslots.workspace.catalog import BlockTypeCatalog
from voiceslots.workspace.fields import SlotNameField
from voiceslots.workspace.workspace import Workspace

__all__ = [
    "Block",
    "BlockTypeCatalog",
    "SlotDefinitionBlock",
    "SlotGetterBlock",
    "SlotNameField",
    "Workspace",
]
