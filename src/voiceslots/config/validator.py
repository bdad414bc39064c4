"""Config file validation for the slot registry."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from voiceslots.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    GAP_CONFIG_KEYS,
    STRING_CONFIG_KEYS,
)
from voiceslots.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG007
from voiceslots.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a voiceslots.yaml file and return all validation errors.

    Unlike :func:`voiceslots.config.load_config` this never raises; every
    problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in STRING_CONFIG_KEYS:
        if key not in raw:
            continue
        val = raw[key]
        if not isinstance(val, str) or not val.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must be a non-empty string",
                    hint=f"got: {val!r}",
                )
            )

    for key in GAP_CONFIG_KEYS:
        if key not in raw:
            continue
        val = raw[key]
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must be an integer",
                    hint=f"got: {type(val).__name__}",
                )
            )
        elif val <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must be positive",
                    hint=f"got: {val}",
                )
            )

    return errors


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
