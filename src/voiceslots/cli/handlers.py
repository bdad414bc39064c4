"""CLI subcommand handlers."""

from __future__ import annotations

from typing import TypeAlias

import argparse
import json
import sys
import xml.etree.ElementTree as ET
from collections.abc import Callable
from pathlib import Path

from voiceslots.config import SlotRegistryConfig, load_config, validate_config_file
from voiceslots.exceptions import ConfigError, VoiceSlotsError
from voiceslots.exceptions.validation import blocking_errors, format_errors
from voiceslots.io import (
    dump_workspace_snapshot,
    load_workspace_snapshot,
    write_json_atomic,
    write_snapshot_atomic,
    write_text_atomic,
)
from voiceslots.slots import SlotRegistryService
from voiceslots.workspace import BlockTypeCatalog, SlotDefinitionBlock, SlotNameField, Workspace

_Command: TypeAlias = Callable[[argparse.Namespace, SlotRegistryService, Workspace], int]


def handle_slots(args: argparse.Namespace) -> int:
    return _run_with_workspace(args, _list_slots)


def handle_flyout(args: argparse.Namespace) -> int:
    return _run_with_workspace(args, _build_flyout)


def handle_check(args: argparse.Namespace) -> int:
    return _run_with_workspace(args, _check_workspace)


def handle_rename(args: argparse.Namespace) -> int:
    return _run_with_workspace(args, _rename)


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate the config file and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _run_with_workspace(args: argparse.Namespace, command: _Command) -> int:
    """Load config and snapshot, then run ``command``; map errors to exit code 2."""
    try:
        config = load_config(args.workspace.parent, args.config)
        workspace = load_workspace_snapshot(args.workspace, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except VoiceSlotsError as exc:
        print(f"Snapshot error: {exc}", file=sys.stderr)
        return 2
    return command(args, SlotRegistryService(config), workspace)


def _list_slots(args: argparse.Namespace, service: SlotRegistryService, workspace: Workspace) -> int:
    for name, slot_type in service.all_slots(workspace):
        print(f"{name}\t{slot_type}" if slot_type else name)
    return 0


def _build_flyout(args: argparse.Namespace, service: SlotRegistryService, workspace: Workspace) -> int:
    catalog = _catalog_for(service.config, include_define=not args.no_define_block)
    templates = service.flyout_category(workspace, catalog)

    if args.format == "xml":
        root = ET.Element("xml")
        root.extend(template.to_xml() for template in templates)
        ET.indent(root)
        text = ET.tostring(root, encoding="unicode")
        if args.output is None:
            print(text)
        else:
            write_text_atomic(args.output, text + "\n")
        return 0

    payload = [template.to_dict() for template in templates]
    if args.output is None:
        print(json.dumps(payload, indent=2))
    else:
        write_json_atomic(args.output, payload)
    return 0


def _check_workspace(args: argparse.Namespace, service: SlotRegistryService, workspace: Workspace) -> int:
    errors = service.validate(workspace, source=str(args.workspace))
    if not errors:
        print("No slot issues found.")
        return 0

    print(format_errors(errors))
    return 1 if blocking_errors(errors, strict=args.strict_names) else 0


def _rename(args: argparse.Namespace, service: SlotRegistryService, workspace: Workspace) -> int:
    block = service.find_definition(args.old_name, workspace)
    if not isinstance(block, SlotDefinitionBlock):
        print(f"Slot not found: {args.old_name}", file=sys.stderr)
        return 2

    label = SlotNameField(block)
    previous = label.text
    accepted = label.set_value(args.new_name)
    references = service.find_references(accepted, workspace)
    print(f"{previous} -> {accepted} ({len(references)} getters)")

    output: Path = args.output or args.workspace
    write_snapshot_atomic(output, dump_workspace_snapshot(workspace))
    return 0


def _catalog_for(config: SlotRegistryConfig, *, include_define: bool) -> BlockTypeCatalog:
    types = {config.getter_block_type}
    if include_define:
        types.add(config.define_block_type)
    return BlockTypeCatalog.of(types)
