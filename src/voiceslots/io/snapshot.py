"""Workspace snapshot loading and dumping.

A snapshot is a YAML or JSON document with a ``blocks`` list. Each block has
a ``type`` and may carry ``id``, ``slot_name``, ``slot_type``, ``in_flyout``
and nested ``children``. Blocks whose type matches the configured define or
getter type become slot blocks; everything else is a plain block.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from voiceslots.config.model import SlotRegistryConfig
from voiceslots.constants.snapshot import SNAPSHOT_SUFFIXES, WORKSPACE_SNAPSHOT_SCHEMA
from voiceslots.exceptions import SnapshotError
from voiceslots.types.common import JsonObject
from voiceslots.workspace import Block, SlotDefinitionBlock, SlotGetterBlock, Workspace

logger = logging.getLogger(__name__)


def load_workspace_snapshot(path: Path, config: SlotRegistryConfig | None = None) -> Workspace:
    """Read a snapshot file and build an in-memory workspace from it."""
    if path.suffix.lower() not in SNAPSHOT_SUFFIXES:
        raise SnapshotError(f"Unsupported snapshot extension {path.suffix!r}: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SnapshotError(f"Invalid snapshot file {path}: {exc}") from exc

    workspace = workspace_from_payload(raw, config, source=str(path))
    logger.debug("Loaded %d blocks from %s", len(workspace), path)
    return workspace


def workspace_from_payload(
    payload: Any,
    config: SlotRegistryConfig | None = None,
    *,
    source: str = "<payload>",
) -> Workspace:
    """Validate a parsed snapshot document and build a workspace."""
    try:
        jsonschema.validate(instance=payload, schema=WORKSPACE_SNAPSHOT_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise SnapshotError(f"Snapshot {source} failed schema validation at {location}: {exc.message}") from exc

    config = config or SlotRegistryConfig()
    workspace = Workspace()
    for entry in payload["blocks"]:
        workspace.add_top_block(_build_block(entry, config))
    return workspace


def dump_workspace_snapshot(workspace: Workspace) -> JsonObject:
    """Serialize a workspace to the snapshot document shape."""
    return {"blocks": [_dump_block(block) for block in workspace.get_top_blocks()]}


def _build_block(entry: dict[str, Any], config: SlotRegistryConfig) -> Block:
    block_type = entry["type"]
    common: dict[str, Any] = {
        "block_type": block_type,
        "block_id": entry.get("id"),
        "in_flyout": entry.get("in_flyout", False),
    }
    block: Block
    if block_type == config.define_block_type:
        block = SlotDefinitionBlock(entry.get("slot_name"), entry.get("slot_type", ""), **common)
    elif block_type == config.getter_block_type:
        block = SlotGetterBlock(entry.get("slot_name"), **common)
    else:
        block = Block(block_type, block_id=common["block_id"], in_flyout=common["in_flyout"])
    for child in entry.get("children", []):
        block.append_child(_build_block(child, config))
    return block


def _dump_block(block: Block) -> JsonObject:
    payload: JsonObject = {"type": block.type, "id": block.id}
    if isinstance(block, (SlotDefinitionBlock, SlotGetterBlock)):
        payload["slot_name"] = block.slot_name
    if isinstance(block, SlotDefinitionBlock) and block.slot_type:
        payload["slot_type"] = block.slot_type
    if block.is_in_flyout:
        payload["in_flyout"] = True
    if block.children:
        payload["children"] = [_dump_block(child) for child in block.children]
    return payload
