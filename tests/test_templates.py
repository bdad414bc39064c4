"""Tests for flyout block template descriptors."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from voiceslots.model import BlockTemplate


def test_to_xml_renders_field_and_mutation() -> None:
    template = BlockTemplate(type="voice_get_slot", gap=16, mutation={"SLOT_NAME": "City"})

    xml = ET.tostring(template.to_xml(), encoding="unicode")

    assert xml == '<block type="voice_get_slot" gap="16"><mutation SLOT_NAME="City" /></block>'


def test_to_xml_define_block_uses_field_element() -> None:
    element = BlockTemplate(type="voice_define_any_slot", gap=24, fields={"slotName": "SLOT_NAME"}).to_xml()

    field = element.find("field")
    assert field is not None
    assert field.get("slotName") == "SLOT_NAME"
    assert element.find("mutation") is None


def test_with_gap_returns_copy() -> None:
    template = BlockTemplate(type="t", gap=16)

    widened = template.with_gap(24)

    assert widened.gap == 24
    assert template.gap == 16


def test_to_dict_omits_empty_sections() -> None:
    assert BlockTemplate(type="t", gap=16).to_dict() == {"type": "t", "gap": 16}
