"""The format-independent pivot used to convert between tag formats."""

from dataclasses import dataclass, field, fields
from typing import List, Optional

from ..constants import SEP_ARTIST
from .picture import Picture
from .utils import join_artists


@dataclass
class AnyTag:
    """
    Snapshot of the fields every format adapter understands.

    Fields a source format could not provide are None. Fields the destination
    cannot represent are dropped when converting back, so a round trip through
    two different formats is not guaranteed to be lossless.
    """

    title: Optional[str] = None
    # Formats with a single artist field store the list joined with the
    # artist separator and split it again on read, stripping each name. A name
    # that contains the separator or has surrounding spaces does not survive
    # that round trip.
    artists: Optional[List[str]] = field(default=None)
    year: Optional[int] = None
    album: Optional[str] = None
    album_artists: Optional[List[str]] = field(default=None)
    track_number: Optional[int] = None
    total_tracks: Optional[int] = None
    disc_number: Optional[int] = None
    total_discs: Optional[int] = None
    cover: Optional[Picture] = None

    def artists_as_string(self, sep: str = SEP_ARTIST) -> Optional[str]:
        if not self.artists:
            return None
        return join_artists(self.artists, sep)

    def album_artists_as_string(self, sep: str = SEP_ARTIST) -> Optional[str]:
        if not self.album_artists:
            return None
        return join_artists(self.album_artists, sep)

    def is_empty(self) -> bool:
        """True if no field is set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def present_fields(self) -> List[str]:
        """Names of the fields that are set."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]
