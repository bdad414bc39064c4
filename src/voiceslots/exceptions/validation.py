"""Findings reported by config validation and workspace slot checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One finding with a stable code.

    ``path`` is the config or snapshot file, ``field`` the offending key or
    slot name. Advisory findings are reported but do not fail a check.
    """

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    advisory: bool = False

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.code}]", self.path or "<workspace>"]
        if self.advisory:
            parts.append("advisory:")
        parts.append(self.message)
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort findings deterministically by code, path, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def blocking_errors(errors: list[ValidationError], *, strict: bool = False) -> list[ValidationError]:
    """Findings that should fail a check; advisory ones count only when ``strict``."""
    return [e for e in errors if strict or not e.advisory]


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of findings as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))
