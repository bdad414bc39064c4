"""Editable slot name label for definition blocks."""

from __future__ import annotations

from voiceslots.slots.rename import rename_slot
from voiceslots.workspace.blocks import SlotDefinitionBlock


class SlotNameField:
    """The label on a slot definition block.

    Committing a value runs it through :func:`rename_slot`, then stores the
    accepted name on the block.
    """

    def __init__(self, source_block: SlotDefinitionBlock) -> None:
        self.source_block = source_block

    @property
    def text(self) -> str:
        return self.source_block.slot_name or ""

    def set_value(self, proposed: str) -> str:
        """Commit ``proposed`` and return the name actually stored."""
        accepted = rename_slot(proposed, self.source_block, self.text)
        self.source_block.slot_name = accepted
        return accepted
