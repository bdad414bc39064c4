"""Slot discovery over a workspace."""

from __future__ import annotations

from voiceslots.slots.names import slot_sort_key
from voiceslots.types.capabilities import HasSlotDefinition, SlotWorkspace
from voiceslots.types.common import Slot


def all_slots(workspace: SlotWorkspace) -> list[Slot]:
    """Find all user-created slot definitions in a workspace.

    Blocks that report no tuple are still being built and are skipped.
    The result is sorted case-insensitively by slot name; ties keep the
    workspace's block order.
    """
    slots: list[Slot] = []
    for block in workspace.get_all_blocks():
        if not isinstance(block, HasSlotDefinition):
            continue
        slot = block.get_slot_def()
        if slot:
            slots.append(slot)
    slots.sort(key=slot_sort_key)
    return slots
