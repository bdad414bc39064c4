"""Tests for getter and definition lookups."""

from __future__ import annotations

from voiceslots.slots import find_definition, find_references
from voiceslots.workspace import Block, SlotDefinitionBlock, SlotGetterBlock


def test_find_references_matches_case_and_whitespace_insensitively(color_workspace) -> None:
    ids = [block.id for block in find_references(" color", color_workspace)]

    assert ids == ["get-color-1", "get-color-2"]


def test_find_references_skips_unbound_getters(make_workspace) -> None:
    workspace = make_workspace(SlotGetterBlock(None), SlotGetterBlock(""), SlotGetterBlock("City"))

    assert len(find_references("City", workspace)) == 1


def test_find_references_includes_nested_getters(make_workspace) -> None:
    parent = Block("voice_intent")
    nested = parent.append_child(SlotGetterBlock("City"))
    workspace = make_workspace(parent)

    assert find_references("City", workspace) == [nested]


def test_find_references_ignores_definitions(color_workspace) -> None:
    assert all(isinstance(b, SlotGetterBlock) for b in find_references("Color", color_workspace))


def test_find_definition_returns_top_level_match(color_workspace) -> None:
    block = find_definition("COLOR", color_workspace)

    assert block is not None
    assert block.id == "def-color"


def test_find_definition_ignores_nested_blocks(make_workspace) -> None:
    parent = Block("voice_intent")
    parent.append_child(SlotDefinitionBlock("City", "t"))
    workspace = make_workspace(parent)

    assert find_definition("City", workspace) is None


def test_find_definition_returns_none_when_missing(color_workspace) -> None:
    assert find_definition("Weather", color_workspace) is None


def test_find_definition_skips_half_built_blocks(make_workspace) -> None:
    target = SlotDefinitionBlock("City", "t")
    workspace = make_workspace(SlotDefinitionBlock(None, "t"), target)

    assert find_definition("city", workspace) is target
