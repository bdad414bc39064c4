"""Name comparison and normalization helpers for slot names."""

from __future__ import annotations

import locale

from voiceslots.constants.naming import EDGE_WHITESPACE_PATTERN, WHITESPACE_PATTERN
from voiceslots.types.common import Slot


def names_equal(name1: str, name2: str) -> bool:
    """Compare two slot names ignoring case and whitespace."""
    return _comparable(name1) == _comparable(name2)


def strip_whitespace(name: str) -> str:
    """Remove every whitespace character, including interior runs."""
    return WHITESPACE_PATTERN.sub("", name)


def trim_name(name: str) -> str:
    """Strip leading and trailing whitespace, non-breaking spaces included."""
    return EDGE_WHITESPACE_PATTERN.sub("", name)


def slot_sort_key(slot: Slot) -> str:
    """Case-insensitive, locale-aware sort key for a slot tuple."""
    # strxfrm rejects NUL characters.
    return locale.strxfrm(slot[0].lower().replace("\x00", ""))


def _comparable(name: str) -> str:
    return strip_whitespace(name).casefold()
