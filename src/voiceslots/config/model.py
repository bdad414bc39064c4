"""Config data model for the slot registry."""

from __future__ import annotations

from dataclasses import dataclass

from voiceslots.constants.blocks import (
    DEFAULT_BLOCK_GAP,
    DEFAULT_SECTION_GAP,
    DEFAULT_SLOT_NAME,
    DEFINE_FIELD_ATTRIBUTE,
    DEFINE_SLOT_BLOCK_TYPE,
    GET_SLOT_BLOCK_TYPE,
    SLOT_NAME_FIELD,
)


@dataclass(frozen=True)
class SlotRegistryConfig:
    """Resolved registry config."""

    define_block_type: str = DEFINE_SLOT_BLOCK_TYPE
    getter_block_type: str = GET_SLOT_BLOCK_TYPE
    slot_name_field: str = SLOT_NAME_FIELD
    define_field_attribute: str = DEFINE_FIELD_ATTRIBUTE
    default_slot_name: str = DEFAULT_SLOT_NAME
    block_gap: int = DEFAULT_BLOCK_GAP
    section_gap: int = DEFAULT_SECTION_GAP
