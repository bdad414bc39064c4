"""Flyout (palette drawer) contents for the slot category."""

from __future__ import annotations

from voiceslots.config.model import SlotRegistryConfig
from voiceslots.model.templates import BlockTemplate
from voiceslots.slots.collector import all_slots
from voiceslots.types.capabilities import BlockCatalog, SlotWorkspace


def flyout_category(
    workspace: SlotWorkspace,
    catalog: BlockCatalog,
    config: SlotRegistryConfig | None = None,
) -> list[BlockTemplate]:
    """Construct the block templates offered by the slot flyout.

    The optional "define a slot" template comes first, followed by one
    "get slot" template per slot in :func:`all_slots` order.
    """
    config = config or SlotRegistryConfig()
    templates: list[BlockTemplate] = []
    if catalog.has_block_type(config.define_block_type):
        templates.append(
            BlockTemplate(
                type=config.define_block_type,
                gap=config.block_gap,
                fields={config.define_field_attribute: config.default_slot_name},
            )
        )
    if templates:
        # Wider gap between the definition block and the getters.
        templates[-1] = templates[-1].with_gap(config.section_gap)

    for name, _slot_type in all_slots(workspace):
        templates.append(
            BlockTemplate(
                type=config.getter_block_type,
                gap=config.block_gap,
                mutation={config.slot_name_field: name},
            )
        )
    return templates
