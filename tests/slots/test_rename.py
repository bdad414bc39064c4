"""Tests for slot renames and propagation to getters."""

from __future__ import annotations

import logging

import pytest

from voiceslots.slots import find_references, rename_slot
from voiceslots.workspace import SlotDefinitionBlock, SlotGetterBlock


class RecordingParticipant:
    """Block stub that records every rename it is told about."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def rename_slot(self, old_name: str, new_name: str) -> None:
        self.calls.append((old_name, new_name))


def _definition(color_workspace) -> SlotDefinitionBlock:
    block = color_workspace.get_block_by_id("def-color")
    assert isinstance(block, SlotDefinitionBlock)
    return block


def test_rename_propagates_to_getters(color_workspace) -> None:
    block = _definition(color_workspace)

    accepted = rename_slot("Hue", block, "Color")

    assert accepted == "Hue"
    assert len(find_references("Hue", color_workspace)) == 2
    assert find_references("Color", color_workspace) == []


def test_rename_leaves_other_getters_alone(color_workspace) -> None:
    rename_slot("Hue", _definition(color_workspace), "Color")

    getter = color_workspace.get_block_by_id("get-size")
    assert isinstance(getter, SlotGetterBlock)
    assert getter.slot_name == "size"


def test_rename_does_not_touch_definition_block(color_workspace) -> None:
    block = _definition(color_workspace)

    rename_slot("Hue", block, "Color")

    assert block.slot_name == "Color"


def test_rename_to_same_name_skips_participants(make_workspace) -> None:
    block = SlotDefinitionBlock("Color", "t")
    participant = RecordingParticipant()
    workspace = make_workspace(block)
    workspace.add_top_block(SlotGetterBlock("Color"))
    workspace.get_top_blocks()[-1].append_child(_as_block(participant))

    assert rename_slot("Color", block, "Color") == "Color"
    assert participant.calls == []


def test_rename_when_legal_name_matches_old_skips_participants(make_workspace) -> None:
    block = SlotDefinitionBlock("Color", "t")
    participant = RecordingParticipant()
    workspace = make_workspace(block)
    workspace.get_top_blocks()[0].append_child(_as_block(participant))

    assert rename_slot("Co lor", block, "Color") == "Color"
    assert participant.calls == []


def test_rename_trims_edges_including_nbsp(color_workspace) -> None:
    accepted = rename_slot("\xa0 Hue \t", _definition(color_workspace), "Color")

    assert accepted == "Hue"


def test_rename_collision_resolves_to_new_name(color_workspace) -> None:
    accepted = rename_slot("size", _definition(color_workspace), "Color")

    assert accepted == "size2"
    assert len(find_references("size2", color_workspace)) == 2
    assert len(find_references("size", color_workspace)) == 1


def test_rename_calls_every_participant_with_old_and_new(make_workspace) -> None:
    block = SlotDefinitionBlock("Color", "t")
    first, second = RecordingParticipant(), RecordingParticipant()
    workspace = make_workspace(block)
    block.append_child(_as_block(first))
    block.append_child(_as_block(second))

    rename_slot("Hue", block, "Color")

    assert first.calls == [("Color", "Hue")]
    assert second.calls == [("Color", "Hue")]
    assert workspace.get_all_blocks()[0] is block


def test_rename_logs_propagation(color_workspace, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="voiceslots.slots.rename"):
        rename_slot("Hue", _definition(color_workspace), "Color")

    assert "Renamed slot Color to Hue" in caplog.text


def _as_block(participant: RecordingParticipant):
    """Wrap a recording stub in a workspace block that forwards renames."""
    return _ParticipantBlock(participant)


class _ParticipantBlock(SlotGetterBlock):
    def __init__(self, participant: RecordingParticipant) -> None:
        super().__init__(None, block_type="recording_block")
        self.participant = participant

    def rename_slot(self, old_name: str, new_name: str) -> None:
        self.participant.rename_slot(old_name, new_name)
