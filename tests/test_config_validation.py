"""Tests for collect-all config validation."""

from __future__ import annotations

from pathlib import Path

from voiceslots.config import _suggest_key, validate_config_file
from voiceslots.constants.validation import ALL_CFG_CODES, CFG001, CFG002, CFG003, CFG004, CFG005, CFG007
from voiceslots.exceptions.validation import format_errors


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "voiceslots.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    _write(tmp_path, "block_gap: 12\ngetter_block_type: voice_get_slot\n")

    assert validate_config_file(tmp_path) == []


def test_missing_default_config_is_fine(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config_reported(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "nope.yaml", config_explicit=True)

    assert [e.code for e in errors] == [CFG001]


def test_collects_every_problem(tmp_path: Path) -> None:
    _write(tmp_path, "blok_gap: 3\nsection_gap: -1\nblock_gap: '16'\ndefault_slot_name: ''\n")

    errors = validate_config_file(tmp_path)

    assert sorted(e.code for e in errors) == [CFG004, CFG005, CFG005, CFG007]
    unknown = next(e for e in errors if e.code == CFG004)
    assert unknown.hint == "did you mean `block_gap`?"


def test_reports_yaml_and_shape_errors(tmp_path: Path) -> None:
    _write(tmp_path, "block_gap: [\n")
    assert [e.code for e in validate_config_file(tmp_path)] == [CFG002]

    _write(tmp_path, "- one\n")
    assert [e.code for e in validate_config_file(tmp_path)] == [CFG003]


def test_format_errors_is_sorted(tmp_path: Path) -> None:
    _write(tmp_path, "zzz: 1\nblock_gap: 0\n")

    lines = format_errors(validate_config_file(tmp_path)).splitlines()

    assert lines[0].startswith("[CFG004]")
    assert lines[1].startswith("[CFG007]")


def test_suggest_key_without_close_match() -> None:
    assert _suggest_key("completely_different", frozenset({"block_gap"})) == ""


def test_emitted_codes_are_registered(tmp_path: Path) -> None:
    _write(tmp_path, "blok_gap: 3\nsection_gap: -1\nblock_gap: '16'\n")
    codes = {e.code for e in validate_config_file(tmp_path)}

    _write(tmp_path, "- one\n")
    codes |= {e.code for e in validate_config_file(tmp_path)}

    assert codes <= set(ALL_CFG_CODES)
    assert {e.code for e in validate_config_file(tmp_path, tmp_path / "x.yaml", config_explicit=True)} <= set(
        ALL_CFG_CODES
    )


def test_define_field_attribute_is_a_known_key(tmp_path: Path) -> None:
    _write(tmp_path, "define_field_attribute: label\n")

    assert validate_config_file(tmp_path) == []
