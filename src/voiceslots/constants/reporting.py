"""Output format names for CLI commands."""

from __future__ import annotations

VALID_FLYOUT_FORMATS: frozenset[str] = frozenset({"json", "xml"})
YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})
TEMP_FILE_PREFIX: str = ".voiceslots-"
