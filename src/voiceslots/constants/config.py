"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "voiceslots.yaml"

STRING_CONFIG_KEYS: tuple[str, ...] = (
    "define_block_type",
    "getter_block_type",
    "slot_name_field",
    "define_field_attribute",
    "default_slot_name",
)

GAP_CONFIG_KEYS: tuple[str, ...] = ("block_gap", "section_gap")

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(STRING_CONFIG_KEYS + GAP_CONFIG_KEYS)
