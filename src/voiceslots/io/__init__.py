"""I/O helpers for workspace snapshots and CLI output."""

from __future__ import annotations

from voiceslots.io.atomic import write_json_atomic, write_snapshot_atomic, write_text_atomic
from voiceslots.io.snapshot import dump_workspace_snapshot, load_workspace_snapshot, workspace_from_payload

__all__ = [
    "dump_workspace_snapshot",
    "load_workspace_snapshot",
    "workspace_from_payload",
    "write_json_atomic",
    "write_snapshot_atomic",
    "write_text_atomic",
]
