"""Tests for slot discovery."""

from __future__ import annotations

from voiceslots.slots import all_slots
from voiceslots.workspace import Block, SlotDefinitionBlock, SlotGetterBlock


def test_all_slots_sorted_case_insensitively(make_workspace) -> None:
    workspace = make_workspace(
        SlotDefinitionBlock("Zeta", "x"),
        SlotDefinitionBlock("alpha", "y"),
        SlotDefinitionBlock("Beta", "z"),
    )

    assert all_slots(workspace) == [("alpha", "y"), ("Beta", "z"), ("Zeta", "x")]


def test_all_slots_skips_half_built_definitions(make_workspace) -> None:
    workspace = make_workspace(
        SlotDefinitionBlock(None, "x"),
        SlotDefinitionBlock("City", "AMAZON.City"),
    )

    assert all_slots(workspace) == [("City", "AMAZON.City")]


def test_all_slots_ignores_blocks_without_definitions(make_workspace) -> None:
    workspace = make_workspace(Block("controls_if"), SlotGetterBlock("City"))

    assert all_slots(workspace) == []


def test_all_slots_includes_nested_definitions(make_workspace) -> None:
    parent = Block("voice_intent")
    parent.append_child(SlotDefinitionBlock("Nested", "t"))
    workspace = make_workspace(parent, SlotDefinitionBlock("Top", "t"))

    assert [name for name, _ in all_slots(workspace)] == ["Nested", "Top"]


def test_all_slots_ties_keep_block_order(make_workspace) -> None:
    workspace = make_workspace(
        SlotDefinitionBlock("item", "first"),
        SlotDefinitionBlock("Item", "second"),
    )

    assert all_slots(workspace) == [("item", "first"), ("Item", "second")]


def test_all_slots_reflects_live_workspace(make_workspace) -> None:
    block = SlotDefinitionBlock("Old", "t")
    workspace = make_workspace(block)
    assert all_slots(workspace) == [("Old", "t")]

    block.slot_name = "New"
    workspace.add_top_block(SlotDefinitionBlock("Another", "t"))

    assert all_slots(workspace) == [("Another", "t"), ("New", "t")]


def test_all_slots_tolerates_nul_in_names(make_workspace) -> None:
    workspace = make_workspace(SlotDefinitionBlock("Zed", "t"), SlotDefinitionBlock("a\x00b", "t"))

    assert all_slots(workspace) == [("a\x00b", "t"), ("Zed", "t")]
