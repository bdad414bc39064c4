"""Facade binding the slot operations to one registry configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from voiceslots.config.model import SlotRegistryConfig
from voiceslots.exceptions.validation import ValidationError
from voiceslots.model.templates import BlockTemplate
from voiceslots.slots.collector import all_slots
from voiceslots.slots.consistency import validate_workspace_slots
from voiceslots.slots.disambiguate import find_legal_slot_name
from voiceslots.slots.flyout import flyout_category
from voiceslots.slots.legality import is_legal_name
from voiceslots.slots.references import find_definition, find_references
from voiceslots.slots.rename import rename_slot
from voiceslots.types.capabilities import BlockCatalog, SlotBlock, SlotWorkspace
from voiceslots.types.common import Slot


@dataclass(frozen=True)
class SlotRegistryService:
    """Slot registry operations for editors configured with ``config``.

    The service keeps no workspace state; every call takes the workspace
    (or a block that knows its workspace) and rescans it.
    """

    config: SlotRegistryConfig = field(default_factory=SlotRegistryConfig)

    def all_slots(self, workspace: SlotWorkspace) -> list[Slot]:
        return all_slots(workspace)

    def is_legal_name(self, name: str, workspace: SlotWorkspace, exclude: object | None = None) -> bool:
        return is_legal_name(name, workspace, exclude)

    def find_legal_slot_name(self, name: str, block: SlotBlock) -> str:
        return find_legal_slot_name(name, block)

    def rename(self, name: str, block: SlotBlock, old_name: str) -> str:
        return rename_slot(name, block, old_name)

    def flyout_category(self, workspace: SlotWorkspace, catalog: BlockCatalog) -> list[BlockTemplate]:
        return flyout_category(workspace, catalog, self.config)

    def find_references(self, name: str, workspace: SlotWorkspace) -> list[object]:
        return find_references(name, workspace)

    def find_definition(self, name: str, workspace: SlotWorkspace) -> object | None:
        return find_definition(name, workspace)

    def validate(self, workspace: SlotWorkspace, *, source: str = "") -> list[ValidationError]:
        return validate_workspace_slots(workspace, source=source)
