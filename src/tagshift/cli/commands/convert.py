"""Convert command - Copy the common fields of one file's tag into another's."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn

from mutagen import MutagenError
from rich.console import Console

from ...formats import AudioTag
from ...tag import AnyTag, TagError
from ..schemas import ConvertResponse, ErrorResponse
from ..utils import ExitCode, json_output, load_config, read_tag


def cmd_convert(args: argparse.Namespace) -> None:
    """Convert a tag between two files through AnyTag.

    The destination keeps every field the source does not set.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        1: Reading or writing failed
        2: Invalid input (missing file, unsupported or disabled format)
    """
    source = Path(args.source)
    destination = Path(args.destination)
    use_json = getattr(args, "json", False)

    for path in (source, destination):
        if not path.is_file():
            _fail(use_json, "invalid_input", f"File does not exist: {path}", ExitCode.INVALID_INPUT)

    config = load_config(args)
    try:
        source_tag = read_tag(source, config)
        destination_tag = read_tag(destination, config)
    except TagError as e:
        _fail(use_json, "unsupported_format", str(e), ExitCode.INVALID_INPUT)
    except (MutagenError, OSError) as e:
        _fail(use_json, "read_failed", f"Failed to read tags: {e}", ExitCode.ERROR)

    anytag = source_tag.to_anytag()
    copied = anytag.present_fields()
    dropped = _dropped_fields(anytag, destination_tag)
    logging.info(
        "Converting %s (%s) to %s (%s): %s",
        source,
        source_tag.tag_type.value,
        destination,
        destination_tag.tag_type.value,
        ", ".join(copied) or "nothing to copy",
    )

    source_tag.convert(type(destination_tag), into=destination_tag)

    if not args.dry_run:
        try:
            destination_tag.write_to_path(destination)
        except (MutagenError, OSError) as e:
            _fail(use_json, "write_failed", f"Failed to write {destination}: {e}", ExitCode.ERROR)

    if use_json:
        json_output(
            ConvertResponse(
                source=str(source),
                destination=str(destination),
                source_type=source_tag.tag_type.value,
                destination_type=destination_tag.tag_type.value,
                copied=[name for name in copied if name not in dropped],
                dropped=dropped,
                dry_run=args.dry_run,
            )
        )

    console = Console()
    verb = "Would copy" if args.dry_run else "Copied"
    console.print(
        f"\n[green]✓[/green] {verb} {len(copied) - len(dropped)} field(s) "
        f"from [cyan]{source.name}[/cyan] to [cyan]{destination.name}[/cyan]"
    )
    if dropped:
        console.print(
            f"[yellow]  {destination_tag.tag_type.value} cannot store: {', '.join(dropped)}[/yellow]"
        )


def _dropped_fields(anytag: AnyTag, destination: AudioTag) -> List[str]:
    """Names of the set fields the destination has no storage for."""
    trial = type(destination).from_anytag(anytag)
    written = trial.to_anytag()
    return [name for name in anytag.present_fields() if getattr(written, name) is None]


def _fail(use_json: bool, error: str, message: str, exit_code: ExitCode) -> NoReturn:
    if use_json:
        json_output(ErrorResponse(error=error, message=message), exit_code)
    logging.error(message)
    sys.exit(exit_code)
