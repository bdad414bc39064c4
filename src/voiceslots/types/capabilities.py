"""Capability protocols that editor blocks and workspaces may implement.

Blocks opt into slot behavior by exposing the methods below; registry code
checks each capability with ``isinstance`` before calling it. A block may
implement none, one, or several of them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from voiceslots.types.common import Slot


@runtime_checkable
class HasSlotDefinition(Protocol):
    """Block that originates a slot."""

    def get_slot_def(self) -> Slot | None:
        """Return the ``(name, type)`` tuple, or ``None`` while half-built."""
        ...


@runtime_checkable
class HasSlotReference(Protocol):
    """Block that reads a previously defined slot by name."""

    def get_slot_getter(self) -> str | None:
        """Return the referenced slot name, or ``None`` when unbound."""
        ...


@runtime_checkable
class HasRenameParticipant(Protocol):
    """Block that follows slot renames."""

    def rename_slot(self, old_name: str, new_name: str) -> None:
        """Update the stored reference if it names ``old_name``."""
        ...


@runtime_checkable
class IsInPalettePreview(Protocol):
    """Block that may live in a flyout instead of the live program."""

    is_in_flyout: bool


@runtime_checkable
class SlotWorkspace(Protocol):
    """Workspace query capability."""

    def get_all_blocks(self) -> Sequence[object]: ...

    def get_top_blocks(self) -> Sequence[object]: ...


@runtime_checkable
class SlotBlock(Protocol):
    """Any block that knows which workspace it lives in."""

    workspace: SlotWorkspace


@runtime_checkable
class BlockCatalog(Protocol):
    """Lookup over the block types registered with the editor."""

    def has_block_type(self, type_name: str) -> bool: ...
