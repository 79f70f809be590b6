"""Exceptions raised by the tag layer.

Unmapped fields and malformed stored values are *not* errors: they are
reported as absence. Errors from mutagen while reading or writing files are
propagated unchanged.
"""


class TagError(Exception):
    """Base error for tag operations."""


class UnsupportedOperationError(TagError):
    """Raised when a format cannot perform an operation at all (e.g. cover art
    in a RIFF INFO chunk), as opposed to the data simply being absent."""


class UnsupportedFormatError(TagError):
    """Raised when a file's format is unknown or disabled in the configuration."""
