"""Native key tables for every tag type."""

from .xiph import setup_xiph_mappings
from .format_specific import setup_format_specific_mappings
from .id3 import setup_id3_mappings


def setup_all_mappings():
    """Register the native keys of every tag type."""
    setup_xiph_mappings()
    setup_format_specific_mappings()
    setup_id3_mappings()


__all__ = [
    "setup_xiph_mappings",
    "setup_format_specific_mappings",
    "setup_id3_mappings",
    "setup_all_mappings",
]
