"""
BeamMM CLI - Thin entrypoint for mod and preset commands.

Design Principles:
==================
- CLI is a dispatcher only; command logic lives in beammm.cli
- Every command ends by reconciling enabled presets and saving db.json
- Surface errors verbatim from the command layer
- Exit non-zero on failure

Exit Codes:
===========
- 0: Success, or the user declined a confirmation prompt. A declined
     prompt stops the command before presets are reconciled, so db.json
     and the preset files are left exactly as they were.
- 1: User error (missing mods, unknown preset, bad arguments)
- 3: Completed, but one or more presets had to be force-disabled
- 4: System error (game not found, version unknown, load/save failure)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, NoReturn, Optional

from . import __version__
from .cli import (
    CLIError,
    ConfirmationDenied,
    Workspace,
    add_to_preset,
    create_preset,
    delete_preset,
    disable_preset,
    enable_preset,
    finish,
    list_mods,
    list_presets,
    open_workspace,
    remove_from_preset,
    set_mods,
)
from .discovery import DiscoveryError
from .mods import ModError
from .persistence import PersistenceError
from .presets import PresetError

EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_PRESETS_DISABLED = 3
EXIT_SYSTEM_ERROR = 4

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def _run(args: argparse.Namespace, action: Callable[[Workspace], None]) -> int:
    """
    Load the workspace, run one command, then reconcile and save.

    Returns:
        Exit code
    """
    workspace = open_workspace(args.data_dir, assume_yes=args.yes)
    action(workspace)
    failed = finish(workspace)
    return EXIT_PRESETS_DISABLED if failed else EXIT_OK


def cmd_list_mods(args: argparse.Namespace) -> int:
    return _run(args, list_mods)


def cmd_enable(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: set_mods(ws, args.mods, True))


def cmd_disable(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: set_mods(ws, args.mods, False))


def cmd_list_presets(args: argparse.Namespace) -> int:
    return _run(args, list_presets)


def cmd_create_preset(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: create_preset(ws, args.name, args.mods))


def cmd_delete_preset(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: delete_preset(ws, args.name))


def cmd_preset_add(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: add_to_preset(ws, args.name, args.mods))


def cmd_preset_remove(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: remove_from_preset(ws, args.name, args.mods))


def cmd_enable_preset(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: enable_preset(ws, args.name))


def cmd_disable_preset(args: argparse.Namespace) -> int:
    return _run(args, lambda ws: disable_preset(ws, args.name))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="beammm",
        description="BeamMM - mod and preset manager for BeamNG.drive",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Custom BeamNG.drive data directory",
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Answer yes to all confirmation prompts",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to execute")

    # Mod commands
    parser_list_mods = subparsers.add_parser("list-mods", help="List installed mods")
    parser_list_mods.set_defaults(func=cmd_list_mods)

    parser_enable = subparsers.add_parser("enable", help='Enable mods ("all" for every mod)')
    parser_enable.add_argument("mods", nargs="+", help="Mod IDs")
    parser_enable.set_defaults(func=cmd_enable)

    parser_disable = subparsers.add_parser("disable", help='Disable mods ("all" for every mod)')
    parser_disable.add_argument("mods", nargs="+", help="Mod IDs")
    parser_disable.set_defaults(func=cmd_disable)

    # Preset commands
    parser_list_presets = subparsers.add_parser("list-presets", help="List presets")
    parser_list_presets.set_defaults(func=cmd_list_presets)

    parser_create = subparsers.add_parser("create-preset", help="Create a mod preset")
    parser_create.add_argument("name", help="Preset name")
    parser_create.add_argument("mods", nargs="*", help="Initial mod IDs")
    parser_create.set_defaults(func=cmd_create_preset)

    parser_delete = subparsers.add_parser("delete-preset", help="Permanently delete a preset")
    parser_delete.add_argument("name", help="Preset name")
    parser_delete.set_defaults(func=cmd_delete_preset)

    parser_add = subparsers.add_parser("preset-add", help="Add mods to a preset")
    parser_add.add_argument("name", help="Preset name")
    parser_add.add_argument("mods", nargs="+", help="Mod IDs")
    parser_add.set_defaults(func=cmd_preset_add)

    parser_remove = subparsers.add_parser("preset-remove", help="Remove mods from a preset")
    parser_remove.add_argument("name", help="Preset name")
    parser_remove.add_argument("mods", nargs="+", help="Mod IDs")
    parser_remove.set_defaults(func=cmd_preset_remove)

    parser_enable_preset = subparsers.add_parser("enable-preset", help="Enable a preset")
    parser_enable_preset.add_argument("name", help="Preset name")
    parser_enable_preset.set_defaults(func=cmd_enable_preset)

    parser_disable_preset = subparsers.add_parser("disable-preset", help="Disable a preset")
    parser_disable_preset.add_argument("name", help="Preset name")
    parser_disable_preset.set_defaults(func=cmd_disable_preset)

    return parser


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """
    Main CLI entrypoint.

    Parses arguments, dispatches to the subcommand and maps errors to
    exit codes.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        exit_code = args.func(args)
    except ConfirmationDenied as e:
        print(str(e))
        exit_code = EXIT_OK
    except (ModError, PresetError, CLIError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        exit_code = EXIT_USER_ERROR
    except (DiscoveryError, PersistenceError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        exit_code = EXIT_SYSTEM_ERROR

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
