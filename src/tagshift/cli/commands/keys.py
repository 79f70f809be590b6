"""Keys command - Print the canonical to native key mapping table."""

import argparse

from rich.console import Console
from rich.table import Table

from ...tag import ItemKey, TagType
from ..schemas import KeysResponse
from ..utils import json_output


def cmd_keys(args: argparse.Namespace) -> None:
    """Print which native key each canonical key maps to.

    Args:
        args: Parsed command-line arguments
    """
    if args.tag_type:
        tag_types = [TagType(args.tag_type)]
    else:
        tag_types = list(TagType)

    if getattr(args, "json", False):
        json_output(
            KeysResponse(
                mappings={
                    tag_type.value: {
                        item_key.name: native for item_key, native in ItemKey.mapping(tag_type).items()
                    }
                    for tag_type in tag_types
                }
            )
        )

    table = Table(title="Item keys")
    table.add_column("Key", style="cyan")
    for tag_type in tag_types:
        table.add_column(tag_type.value, style="magenta")

    for item_key in ItemKey:
        natives = [item_key.map_key(tag_type) for tag_type in tag_types]
        if all(native is None for native in natives):
            continue
        table.add_row(item_key.name, *(repr(n) if n else "[dim]-[/dim]" for n in natives))

    Console().print(table)
