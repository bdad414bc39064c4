"""Atomic writers for CLI output and rewritten snapshots.

Text goes to a temp file in the target directory, then replaces the target,
so an interrupted run leaves the old file intact.
"""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

import yaml

from voiceslots.constants.reporting import TEMP_FILE_PREFIX, YAML_SUFFIXES


def write_text_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=TEMP_FILE_PREFIX,
            suffix=f"{path.suffix}.tmp",
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


def write_json_atomic(path: Path, payload: object) -> None:
    """Serialize ``payload`` as indented JSON; serialization errors leave ``path`` untouched."""
    write_text_atomic(path, json.dumps(payload, indent=2) + "\n")


def write_snapshot_atomic(path: Path, payload: object) -> None:
    """Write a snapshot document as YAML or JSON depending on the suffix of ``path``."""
    if path.suffix.lower() in YAML_SUFFIXES:
        write_text_atomic(path, yaml.safe_dump(payload, sort_keys=False))
    else:
        write_json_atomic(path, payload)
