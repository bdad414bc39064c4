"""Collision checks for proposed slot names."""

from __future__ import annotations

from voiceslots.constants.naming import SLOT_NAME_FORMAT_HINT, SLOT_NAME_FORMAT_PATTERN
from voiceslots.constants.validation import SLOT001
from voiceslots.exceptions.validation import ValidationError
from voiceslots.slots.names import names_equal
from voiceslots.types.capabilities import HasSlotDefinition, SlotWorkspace


def is_legal_name(name: str, workspace: SlotWorkspace, exclude: object | None = None) -> bool:
    """Return True when no other live definition in ``workspace`` uses ``name``.

    ``exclude`` is the block being renamed, so it never collides with itself.
    Flyout blocks are ignored: they neither need unique names nor make a
    live name illegal.
    """
    for block in workspace.get_all_blocks():
        if block is exclude or is_in_flyout(block):
            continue
        if not isinstance(block, HasSlotDefinition):
            continue
        slot = block.get_slot_def()
        if slot and names_equal(slot[0], name):
            return False
    return True


def is_in_flyout(block: object) -> bool:
    """Whether ``block`` lives in a palette preview rather than the live program."""
    return bool(getattr(block, "is_in_flyout", False))


def check_slot_name_format(name: str, *, source: str = "", field: str = "") -> list[ValidationError]:
    """Report names that break the custom slot type naming rule.

    The rule is advisory: legality and disambiguation never consult it.
    """
    if SLOT_NAME_FORMAT_PATTERN.match(name):
        return []
    return [
        ValidationError(
            code=SLOT001,
            path=source,
            field=field or name,
            message=f"slot name {name!r} does not follow the naming rule",
            hint=SLOT_NAME_FORMAT_HINT,
            advisory=True,
        )
    ]
