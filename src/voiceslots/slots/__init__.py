"""Slot registry: discovery, naming, renames and flyout contents."""

from __future__ import annotations

from voiceslots.slots.collector import all_slots
from voiceslots.slots.consistency import validate_workspace_slots
from voiceslots.slots.disambiguate import find_legal_slot_name
from voiceslots.slots.flyout import flyout_category
from voiceslots.slots.legality import check_slot_name_format, is_in_flyout, is_legal_name
from voiceslots.slots.names import names_equal, strip_whitespace, trim_name
from voiceslots.slots.references import find_definition, find_references
from voiceslots.slots.rename import rename_slot
from voiceslots.slots.service import SlotRegistryService

__all__ = [
    "SlotRegistryService",
    "all_slots",
    "check_slot_name_format",
    "find_definition",
    "find_legal_slot_name",
    "find_references",
    "flyout_category",
    "is_in_flyout",
    "is_legal_name",
    "names_equal",
    "rename_slot",
    "strip_whitespace",
    "trim_name",
    "validate_workspace_slots",
]
