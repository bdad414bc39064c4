"""Palette entry descriptors produced by the flyout builder."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field, replace

from voiceslots.types.common import JsonObject


@dataclass(frozen=True)
class BlockTemplate:
    """One block offered in a flyout drawer.

    ``fields`` become ``<field>`` attributes and ``mutation`` becomes the
    ``<mutation>`` element when rendered as editor XML.
    """

    type: str
    gap: int
    fields: dict[str, str] = field(default_factory=dict)
    mutation: dict[str, str] = field(default_factory=dict)

    def with_gap(self, gap: int) -> BlockTemplate:
        """Return a copy with a different spacing hint."""
        return replace(self, gap=gap)

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible dictionary."""
        payload: JsonObject = {"type": self.type, "gap": self.gap}
        if self.fields:
            payload["fields"] = dict(self.fields)
        if self.mutation:
            payload["mutation"] = dict(self.mutation)
        return payload

    def to_xml(self) -> ET.Element:
        """Render as a ``<block>`` element in the editor's toolbox format."""
        element = ET.Element("block", {"type": self.type, "gap": str(self.gap)})
        if self.fields:
            ET.SubElement(element, "field", dict(self.fields))
        if self.mutation:
            ET.SubElement(element, "mutation", dict(self.mutation))
        return element
