"""Regex patterns for slot name normalization and disambiguation."""

from __future__ import annotations

import re

WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"\s+")
EDGE_WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"^[\s\xa0]+|[\s\xa0]+$")
NUMERIC_SUFFIX_PATTERN: re.Pattern[str] = re.compile(r"^(.*?)([0-9]+)$")

COLLISION_SUFFIX: str = "2"

# Custom slot types must begin with a letter and contain only letters or underscores.
SLOT_NAME_FORMAT_PATTERN: re.Pattern[str] = re.compile(r"^[^\W\d_][^\W\d]*$")
SLOT_NAME_FORMAT_HINT: str = "start with a letter and use only letters or underscores"
