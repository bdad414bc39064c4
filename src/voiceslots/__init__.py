"""voiceslots package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from voiceslots.slots import (
    SlotRegistryService,
    all_slots,
    find_definition,
    find_legal_slot_name,
    find_references,
    flyout_category,
    is_legal_name,
    rename_slot,
)

__all__ = [
    "SlotRegistryService",
    "__version__",
    "all_slots",
    "find_definition",
    "find_legal_slot_name",
    "find_references",
    "flyout_category",
    "is_legal_name",
    "rename_slot",
]

try:
    __version__ = version("voiceslots")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
