"""Show command - Display the tag of an audio file."""

import argparse
import logging
import sys
from pathlib import Path

from mutagen import MutagenError
from rich.console import Console
from rich.table import Table

from ...tag import ItemKey, TagError
from ..schemas import CoverInfo, ErrorResponse, ShowResponse, TagFields
from ..utils import ExitCode, json_output, load_config, read_tag

# Canonical keys already shown as common fields
COMMON_KEYS = {
    ItemKey.TITLE,
    ItemKey.ARTIST,
    ItemKey.ALBUM,
    ItemKey.ALBUM_ARTIST,
    ItemKey.RECORDING_DATE,
    ItemKey.YEAR,
    ItemKey.TRACK_NUMBER,
    ItemKey.TRACK_TOTAL,
    ItemKey.DISC_NUMBER,
    ItemKey.DISC_TOTAL,
}


def cmd_show(args: argparse.Namespace) -> None:
    """Read a file's tag and print its fields.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        1: The file could not be parsed
        2: Invalid input (missing file, unsupported or disabled format)
    """
    path = Path(args.file)
    use_json = getattr(args, "json", False)

    if not path.is_file():
        message = f"File does not exist: {path}"
        if use_json:
            json_output(ErrorResponse(error="invalid_input", message=message), ExitCode.INVALID_INPUT)
        logging.error(message)
        sys.exit(ExitCode.INVALID_INPUT)

    config = load_config(args)
    try:
        tag = read_tag(path, config)
    except TagError as e:
        if use_json:
            json_output(ErrorResponse(error="unsupported_format", message=str(e)), ExitCode.INVALID_INPUT)
        logging.error("%s", e)
        sys.exit(ExitCode.INVALID_INPUT)
    except (MutagenError, OSError) as e:
        if use_json:
            json_output(ErrorResponse(error="read_failed", message=f"Failed to read {path}: {e}"), ExitCode.ERROR)
        logging.error("Failed to read %s: %s", path, e)
        sys.exit(ExitCode.ERROR)

    anytag = tag.to_anytag()
    native = tag.to_tag()
    items = {
        item.key.name: item.text
        for item in native.items()
        if item.text is not None and item.key not in COMMON_KEYS
    }
    pictures = native.pictures()

    if use_json:
        json_output(
            ShowResponse(
                path=str(path),
                tag_type=tag.tag_type.value,
                fields=TagFields.from_anytag(anytag),
                items=items,
                pictures=[CoverInfo.from_picture(p) for p in pictures],
            )
        )

    sep = config.get_artist_separator()
    console = Console()
    table = Table(title=f"{path.name} ({tag.tag_type.value})", show_header=False)
    table.add_column("Field", style="cyan", width=15)
    table.add_column("Value", style="magenta")

    rows = [
        ("Title", anytag.title),
        ("Artists", anytag.artists_as_string(sep)),
        ("Album", anytag.album),
        ("Album artists", anytag.album_artists_as_string(sep)),
        ("Year", anytag.year),
        ("Track", _number_pair(anytag.track_number, anytag.total_tracks)),
        ("Disc", _number_pair(anytag.disc_number, anytag.total_discs)),
    ]
    for name, value in rows:
        table.add_row(name, "" if value is None else str(value))
    for name, value in items.items():
        table.add_row(name.replace("_", " ").capitalize(), value)
    for picture in pictures:
        table.add_row(
            "Picture",
            f"{picture.pic_type.name} {picture.mime_type.value} ({len(picture.data):,} bytes)",
        )

    console.print(table)
    if anytag.is_empty() and not items:
        console.print("[yellow]No tag fields found[/yellow]")


def _number_pair(number, total) -> str:
    if number is None and total is None:
        return ""
    return f"{'' if number is None else number}/{'' if total is None else total}".rstrip("/")
