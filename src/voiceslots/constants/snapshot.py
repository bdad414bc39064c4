"""JSON schema for workspace snapshot files."""

from __future__ import annotations

from typing import Any

SNAPSHOT_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml", ".json"})

WORKSPACE_SNAPSHOT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Workspace snapshot",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "blocks": {"type": "array", "items": {"$ref": "#/$defs/block"}},
    },
    "required": ["blocks"],
    "$defs": {
        "block": {
            "type": "object",
            "additionalProperties": False,
            "required": ["type"],
            "properties": {
                "type": {"type": "string", "minLength": 1},
                "id": {"type": "string"},
                "slot_name": {"type": ["string", "null"]},
                "slot_type": {"type": "string"},
                "in_flyout": {"type": "boolean"},
                "children": {"type": "array", "items": {"$ref": "#/$defs/block"}},
            },
        },
    },
}
