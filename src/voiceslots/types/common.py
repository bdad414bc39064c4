"""Cross-module type aliases."""

from __future__ import annotations

from typing import TypeAlias

Slot: TypeAlias = tuple[str, str]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
