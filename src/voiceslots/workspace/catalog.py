"""Registry of block types known to the editor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from voiceslots.constants.blocks import DEFINE_SLOT_BLOCK_TYPE, GET_SLOT_BLOCK_TYPE


@dataclass(frozen=True)
class BlockTypeCatalog:
    """Set of registered block type names."""

    types: frozenset[str] = frozenset({DEFINE_SLOT_BLOCK_TYPE, GET_SLOT_BLOCK_TYPE})

    @classmethod
    def of(cls, types: Iterable[str]) -> BlockTypeCatalog:
        return cls(types=frozenset(types))

    def has_block_type(self, type_name: str) -> bool:
        return type_name in self.types
