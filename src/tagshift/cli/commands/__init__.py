"""CLI command implementations.

Each module in this package implements a specific tagshift subcommand:
    show.py: Display the tag of an audio file
    convert.py: Copy common fields from one file's tag into another's
    keys.py: Print the item key mapping table
"""

from .convert import cmd_convert
from .keys import cmd_keys
from .show import cmd_show

__all__ = [
    "cmd_convert",
    "cmd_keys",
    "cmd_show",
]
