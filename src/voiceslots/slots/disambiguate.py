"""Derivation of non-colliding slot names."""

from __future__ import annotations

import logging

from voiceslots.constants.naming import COLLISION_SUFFIX, NUMERIC_SUFFIX_PATTERN
from voiceslots.slots.legality import is_in_flyout, is_legal_name
from voiceslots.slots.names import strip_whitespace
from voiceslots.types.capabilities import SlotBlock

logger = logging.getLogger(__name__)


def find_legal_slot_name(name: str, block: SlotBlock) -> str:
    """Ensure two identically-named slots don't exist.

    Whitespace is removed from ``name``; on collision a trailing number is
    incremented (``Slot2`` becomes ``Slot3``) or ``2`` is appended.
    """
    if is_in_flyout(block):
        # Flyouts can hold several slots with the same name.
        return name
    name = strip_whitespace(name)
    while not is_legal_name(name, block.workspace, block):
        name = _next_candidate(name)
        logger.debug("Slot name collision, trying %s", name)
    return name


def _next_candidate(name: str) -> str:
    match = NUMERIC_SUFFIX_PATTERN.match(name)
    if match is None:
        return name + COLLISION_SUFFIX
    return f"{match.group(1)}{int(match.group(2)) + 1}"
