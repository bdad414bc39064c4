"""Collect-all consistency report over a workspace's slots."""

from __future__ import annotations

from voiceslots.constants.validation import SLOT002, SLOT003
from voiceslots.exceptions.validation import ValidationError, sort_errors
from voiceslots.slots.legality import check_slot_name_format, is_in_flyout
from voiceslots.slots.names import names_equal
from voiceslots.types.capabilities import HasSlotDefinition, HasSlotReference, SlotWorkspace


def validate_workspace_slots(workspace: SlotWorkspace, *, source: str = "") -> list[ValidationError]:
    """Report naming-rule misses, duplicate definitions and dangling getters.

    Flyout blocks are skipped. Nothing is modified.
    """
    errors: list[ValidationError] = []
    seen: list[str] = []
    getters: list[str] = []

    for block in workspace.get_all_blocks():
        if is_in_flyout(block):
            continue
        if isinstance(block, HasSlotDefinition):
            slot = block.get_slot_def()
            if slot:
                name = slot[0]
                errors.extend(check_slot_name_format(name, source=source))
                if any(names_equal(name, other) for other in seen):
                    errors.append(
                        ValidationError(
                            code=SLOT002,
                            path=source,
                            field=name,
                            message=f"slot name {name!r} is already defined",
                            hint="rename one of the definitions",
                        )
                    )
                seen.append(name)
        if isinstance(block, HasSlotReference):
            ref = block.get_slot_getter()
            if ref:
                getters.append(ref)

    for ref in getters:
        if not any(names_equal(ref, name) for name in seen):
            errors.append(
                ValidationError(
                    code=SLOT003,
                    path=source,
                    field=ref,
                    message=f"getter refers to undefined slot {ref!r}",
                )
            )

    return sort_errors(errors)
