"""Command-line interface for tagshift.

This package provides the 'tagshift' command-line tool with these subcommands:
    show: Display the tag of an audio file
    convert: Copy the common fields of one file's tag into another file
    keys: Print the canonical to native key mapping table

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from ..tag import TagType
from .commands import cmd_convert, cmd_keys, cmd_show
from .utils import ExitCode, setup_logging

__all__ = [
    "main",
    "cmd_convert",
    "cmd_keys",
    "cmd_show",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""

    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default=None,
        help="Set logging level (default: [logging] level from the config file)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file (default: ~/.tagshift/config.toml)",
    )

    parser = argparse.ArgumentParser(
        prog="tagshift",
        usage="tagshift <command> [options]",
        description="tagshift - Read and convert audio tags across formats",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # show
    # ──────────────────────────────
    show_parser = subparsers.add_parser(
        "show",
        help="Show the tag of an audio file",
        usage="tagshift show <file> [options]",
        description="Read an audio file and display its common fields and items",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    show_parser.add_argument("file", help="Path to the audio file")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")
    show_parser.set_defaults(func=cmd_show)

    # ──────────────────────────────
    # convert
    # ──────────────────────────────
    convert_parser = subparsers.add_parser(
        "convert",
        help="Copy tag fields from one file to another",
        usage="tagshift convert <source> <destination> [options]",
        description=(
            "Copy the common fields (title, artists, album, year, numbers, cover) "
            "from the source file into the destination file's tag, whatever the "
            "two formats are. Fields the source does not set are left alone."
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    convert_parser.add_argument("source", help="File to copy the tag from")
    convert_parser.add_argument("destination", help="File to write the tag into")
    convert_parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would be copied without writing anything",
    )
    convert_parser.add_argument("--json", action="store_true", help="Output as JSON")
    convert_parser.set_defaults(func=cmd_convert)

    # ──────────────────────────────
    # keys
    # ──────────────────────────────
    keys_parser = subparsers.add_parser(
        "keys",
        help="Show the item key mapping table",
        usage="tagshift keys [tag_type] [options]",
        description="Print the native key each canonical item key maps to",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    keys_parser.add_argument(
        "tag_type",
        nargs="?",
        choices=[tag_type.value for tag_type in TagType],
        help="Only show this tag type",
    )
    keys_parser.add_argument("--json", action="store_true", help="Output as JSON")
    keys_parser.set_defaults(func=cmd_keys)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.ERROR)

    # Logging setup
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging(Config(args.config).get_log_level())

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("Operation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(ExitCode.ERROR)


if __name__ == "__main__":
    main()
