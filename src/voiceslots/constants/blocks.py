"""Block type names and flyout layout defaults."""

from __future__ import annotations

DEFINE_SLOT_BLOCK_TYPE: str = "voice_define_any_slot"
GET_SLOT_BLOCK_TYPE: str = "voice_get_slot"

SLOT_NAME_FIELD: str = "SLOT_NAME"
DEFINE_FIELD_ATTRIBUTE: str = "slotName"
DEFAULT_SLOT_NAME: str = "SLOT_NAME"

DEFAULT_BLOCK_GAP: int = 16
DEFAULT_SECTION_GAP: int = 24
