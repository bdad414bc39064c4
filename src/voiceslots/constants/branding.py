"""CLI text."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "Inspect slot definitions in a block workspace snapshot.\n"
    "\n"
    "Lists slots, builds the slot flyout, checks names and applies renames."
)
