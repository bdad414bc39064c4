"""Block classes for the in-memory workspace."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from voiceslots.constants.blocks import DEFINE_SLOT_BLOCK_TYPE, GET_SLOT_BLOCK_TYPE
from voiceslots.slots.names import names_equal
from voiceslots.types.common import Slot

if TYPE_CHECKING:
    from voiceslots.workspace.workspace import Workspace

_block_ids = itertools.count(1)


class Block:
    """A block with no slot behavior."""

    def __init__(self, block_type: str, *, block_id: str | None = None, in_flyout: bool = False) -> None:
        self.type = block_type
        self.id = block_id or f"b{next(_block_ids)}"
        self.is_in_flyout = in_flyout
        self.workspace: Workspace | None = None
        self.parent: Block | None = None
        self.children: list[Block] = []

    def append_child(self, child: Block) -> Block:
        """Nest ``child`` under this block and return it."""
        child.parent = self
        self.children.append(child)
        if self.workspace is not None:
            self.workspace.attach(child)
        return child

    def descendants(self) -> list[Block]:
        """This block followed by its children, depth-first."""
        blocks: list[Block] = [self]
        for child in self.children:
            blocks.extend(child.descendants())
        return blocks

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r}, id={self.id!r})"


class SlotDefinitionBlock(Block):
    """Block that defines a slot. The name is ``None`` until configured."""

    def __init__(
        self,
        slot_name: str | None = None,
        slot_type: str = "",
        *,
        block_type: str = DEFINE_SLOT_BLOCK_TYPE,
        block_id: str | None = None,
        in_flyout: bool = False,
    ) -> None:
        super().__init__(block_type, block_id=block_id, in_flyout=in_flyout)
        self.slot_name = slot_name
        self.slot_type = slot_type

    def get_slot_def(self) -> Slot | None:
        if self.slot_name is None:
            return None
        return (self.slot_name, self.slot_type)


class SlotGetterBlock(Block):
    """Block that reads a slot by name. The name is ``None`` while unbound."""

    def __init__(
        self,
        slot_name: str | None = None,
        *,
        block_type: str = GET_SLOT_BLOCK_TYPE,
        block_id: str | None = None,
        in_flyout: bool = False,
    ) -> None:
        super().__init__(block_type, block_id=block_id, in_flyout=in_flyout)
        self.slot_name = slot_name

    def get_slot_getter(self) -> str | None:
        return self.slot_name

    def rename_slot(self, old_name: str, new_name: str) -> None:
        if self.slot_name is not None and names_equal(old_name, self.slot_name):
            self.slot_name = new_name
