"""Slot renames triggered from an editable label."""

from __future__ import annotations

import logging

from voiceslots.slots.disambiguate import find_legal_slot_name
from voiceslots.slots.names import trim_name
from voiceslots.types.capabilities import HasRenameParticipant, SlotBlock

logger = logging.getLogger(__name__)


def rename_slot(name: str, block: SlotBlock, old_name: str) -> str:
    """Rename the slot defined by ``block`` and update every block that follows it.

    Args:
        name: Proposed new name, as typed into the label.
        block: The slot definition block owning the label.
        old_name: The label text before the edit.

    Returns:
        The accepted name. The caller commits it to the label; ``block``
        itself is only touched if it participates in renames.
    """
    name = trim_name(name)
    legal_name = find_legal_slot_name(name, block)
    if old_name == name or old_name == legal_name:
        return legal_name

    participants = [b for b in block.workspace.get_all_blocks() if isinstance(b, HasRenameParticipant)]
    for participant in participants:
        participant.rename_slot(old_name, legal_name)
    logger.debug("Renamed slot %s to %s across %d blocks", old_name, legal_name, len(participants))
    return legal_name
