"""Ordered, in-memory block workspace."""

from __future__ import annotations

from voiceslots.workspace.blocks import Block


class Workspace:
    """Holds top-level blocks in insertion order.

    ``get_all_blocks`` walks each top block depth-first, so nested blocks
    follow their parent.
    """

    def __init__(self) -> None:
        self._top_blocks: list[Block] = []

    def add_top_block(self, block: Block) -> Block:
        """Add ``block`` (and its children) at the top level and return it."""
        if block.parent is not None:
            raise ValueError(f"{block!r} is nested and cannot be a top block")
        self._top_blocks.append(block)
        self.attach(block)
        return block

    def attach(self, block: Block) -> None:
        """Point ``block`` and its descendants at this workspace."""
        for member in block.descendants():
            member.workspace = self

    def remove_block(self, block: Block) -> None:
        """Detach ``block`` from its parent or from the top level."""
        if block.parent is not None:
            block.parent.children.remove(block)
            block.parent = None
        else:
            self._top_blocks.remove(block)
        for member in block.descendants():
            member.workspace = None

    def get_top_blocks(self) -> list[Block]:
        return list(self._top_blocks)

    def get_all_blocks(self) -> list[Block]:
        blocks: list[Block] = []
        for top in self._top_blocks:
            blocks.extend(top.descendants())
        return blocks

    def get_block_by_id(self, block_id: str) -> Block | None:
        for block in self.get_all_blocks():
            if block.id == block_id:
                return block
        return None

    def __len__(self) -> int:
        return len(self.get_all_blocks())
