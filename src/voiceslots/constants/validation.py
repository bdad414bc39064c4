"""Stable validation error codes for config and workspace checks."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range

SLOT001: str = "SLOT001"  # slot name does not follow the naming rule (advisory)
SLOT002: str = "SLOT002"  # slot name collides with an earlier definition
SLOT003: str = "SLOT003"  # getter bound to a slot with no definition

ALL_CFG_CODES: tuple[str, ...] = (CFG001, CFG002, CFG003, CFG004, CFG005, CFG007)
ALL_SLOT_CODES: tuple[str, ...] = (SLOT001, SLOT002, SLOT003)
