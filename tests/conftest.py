"""Shared pytest fixtures for workspace-based tests."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable

import pytest

from voiceslots.workspace import Block, SlotDefinitionBlock, SlotGetterBlock, Workspace

WorkspaceFactory: TypeAlias = Callable[..., Workspace]


def build_workspace(*blocks: Block) -> Workspace:
    """Return a workspace holding ``blocks`` as top-level blocks."""
    workspace = Workspace()
    for block in blocks:
        workspace.add_top_block(block)
    return workspace


@pytest.fixture
def make_workspace() -> WorkspaceFactory:
    """Return a factory building a workspace from top-level blocks."""
    return build_workspace


@pytest.fixture
def color_workspace() -> Workspace:
    """Workspace with a ``Color`` slot, two getters and an unrelated slot."""
    return build_workspace(
        SlotDefinitionBlock("Color", "AMAZON.Color", block_id="def-color"),
        SlotDefinitionBlock("size", "AMAZON.Number", block_id="def-size"),
        SlotGetterBlock("Color", block_id="get-color-1"),
        SlotGetterBlock("Color", block_id="get-color-2"),
        SlotGetterBlock("size", block_id="get-size"),
    )
