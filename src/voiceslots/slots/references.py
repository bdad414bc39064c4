"""Lookups for slot getters and slot definitions."""

from __future__ import annotations

from voiceslots.slots.names import names_equal
from voiceslots.types.capabilities import HasSlotDefinition, HasSlotReference, SlotWorkspace


def find_references(name: str, workspace: SlotWorkspace) -> list[object]:
    """Find every getter block bound to the named slot."""
    getters: list[object] = []
    for block in workspace.get_all_blocks():
        if not isinstance(block, HasSlotReference):
            continue
        # Unbound getters report no name.
        slot_name = block.get_slot_getter()
        if slot_name and names_equal(slot_name, name):
            getters.append(block)
    return getters


def find_definition(name: str, workspace: SlotWorkspace) -> object | None:
    """Find the definition block for the named slot, or ``None``.

    Definitions are top-level blocks, so nested blocks are not searched.
    """
    for block in workspace.get_top_blocks():
        if not isinstance(block, HasSlotDefinition):
            continue
        slot = block.get_slot_def()
        if slot and names_equal(slot[0], name):
            return block
    return None
