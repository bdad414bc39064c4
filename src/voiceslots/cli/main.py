"""CLI entrypoint for voiceslots."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from voiceslots import __version__
from voiceslots.cli.handlers import (
    handle_check,
    handle_flyout,
    handle_rename,
    handle_slots,
    handle_validate_config,
)
from voiceslots.constants.branding import CLI_DESCRIPTION
from voiceslots.constants.reporting import VALID_FLYOUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="voiceslots",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    slots = subparsers.add_parser("slots", help="List slot definitions in sorted order")
    _add_snapshot_args(slots)

    flyout = subparsers.add_parser("flyout", help="Build the slot flyout for a workspace")
    _add_snapshot_args(flyout)
    flyout.add_argument(
        "--format",
        choices=sorted(VALID_FLYOUT_FORMATS),
        default="json",
        help="Output format (default: json)",
    )
    flyout.add_argument(
        "--no-define-block",
        action="store_true",
        help="Treat the define-slot block type as unregistered",
    )
    flyout.add_argument("-o", "--output", type=Path, default=None, help="Write output to a file")

    check = subparsers.add_parser("check", help="Check slot names and references")
    _add_snapshot_args(check)
    check.add_argument(
        "--strict-names",
        action="store_true",
        help="Fail on naming rule findings instead of only reporting them",
    )

    rename = subparsers.add_parser("rename", help="Rename a slot and update its getters")
    _add_snapshot_args(rename)
    rename.add_argument("old_name", help="Current slot name")
    rename.add_argument("new_name", help="Proposed slot name")
    rename.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Snapshot path to write (defaults to overwriting the input)",
    )

    validate = subparsers.add_parser("validate-config", help="Validate configuration file")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Directory holding voiceslots.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_snapshot_args(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("-w", "--workspace", type=Path, required=True, help="Workspace snapshot (YAML or JSON)")
    subparser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handlers = {
        "slots": handle_slots,
        "flyout": handle_flyout,
        "check": handle_check,
        "rename": handle_rename,
        "validate-config": handle_validate_config,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
