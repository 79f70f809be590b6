"""Canonical tag vocabulary.

:class:`TagType` enumerates the concrete tag formats, :class:`ItemKey` the
format-independent fields. Every ``ItemKey`` owns a per-``TagType`` mapping to
the native key representation (a Vorbis comment name, an ID3 frame id, an MP4
atom name, an APE item key or an IFF chunk id). The table is filled by the
``mappings`` package and is the single source the format adapters read their
native keys from.
"""

from enum import Enum
from typing import Dict, Optional


class TagType(str, Enum):
    """Supported concrete tag formats."""

    #: Common file extensions: ``.ape``, ``.wv``, ``.mpc``
    APE = "ape"
    #: Common file extensions: ``.mp3``
    ID3V2 = "id3v2"
    #: Common file extensions: ``.mp4``, ``.m4a``, ``.m4b``, ``.m4p``, ``.m4r``, ``.m4v``
    MP4 = "mp4"
    #: Metadata stored in an Opus comment header (``.opus``)
    OPUS = "opus"
    #: Metadata stored in an Ogg Vorbis file (``.ogg``)
    VORBIS = "vorbis"
    #: Metadata stored in FLAC VORBISCOMMENT/PICTURE blocks (``.flac``)
    FLAC = "flac"
    #: Metadata stored in a RIFF INFO chunk (``.wav``, ``.wave``)
    RIFF_INFO = "riff_info"
    #: Metadata stored in AIFF text chunks (``.aiff``, ``.aif``)
    AIFF_TEXT = "aiff_text"

    @property
    def case_insensitive(self) -> bool:
        """Whether native keys of this format compare case-insensitively."""
        return self in (TagType.APE, TagType.OPUS, TagType.VORBIS, TagType.FLAC)


class ItemKey(Enum):
    """Format-independent metadata fields."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    ALBUM_ARTIST = "album artist"
    RECORDING_DATE = "date"
    YEAR = "year"
    TRACK_NUMBER = "tracknumber"
    TRACK_TOTAL = "totaltracks"
    DISC_NUMBER = "discnumber"
    DISC_TOTAL = "totaldiscs"
    GENRE = "genre"
    COMPOSER = "composer"
    COMMENT = "comment"
    LYRICS = "lyrics"
    COPYRIGHT = "copyright"
    ENCODER = "encoder"
    ISRC = "isrc"
    BPM = "bpm"

    def map_key(self, tag_type: TagType) -> Optional[str]:
        """Return the native key for ``tag_type``, or None if it has none."""
        return _KEY_MAP.get(tag_type, {}).get(self)

    @classmethod
    def from_native(cls, tag_type: TagType, native: str) -> Optional["ItemKey"]:
        """Reverse lookup of :meth:`map_key`.

        Case-insensitive for the formats where native keys are. Adapters walk
        the table forward instead, see :meth:`AudioTag.to_tag`.
        """
        table = _NATIVE_MAP.get(tag_type, {})
        return table.get(_fold(tag_type, native))

    @classmethod
    def register(cls, tag_type: TagType, mapping: Dict["ItemKey", str]) -> None:
        """Register native keys for ``tag_type``.

        Raises ValueError if a native key is already claimed by a different
        canonical key of the same tag type. Re-registering the same pair is
        allowed so the mappings can be set up more than once.
        """
        keys = _KEY_MAP.setdefault(tag_type, {})
        natives = _NATIVE_MAP.setdefault(tag_type, {})

        for item_key, native in mapping.items():
            folded = _fold(tag_type, native)
            owner = natives.get(folded)
            if owner is not None and owner is not item_key:
                raise ValueError(
                    f"{tag_type.value}: native key {native!r} already mapped "
                    f"to {owner.name}, cannot map it to {item_key.name}"
                )

            previous = keys.get(item_key)
            if previous is not None:
                natives.pop(_fold(tag_type, previous), None)

            keys[item_key] = native
            natives[folded] = item_key

    @classmethod
    def mapping(cls, tag_type: TagType) -> Dict["ItemKey", str]:
        """Return a copy of the registered table for ``tag_type``."""
        return dict(_KEY_MAP.get(tag_type, {}))


def _fold(tag_type: TagType, native: str) -> str:
    return native.lower() if tag_type.case_insensitive else native


_KEY_MAP: Dict[TagType, Dict[ItemKey, str]] = {}
_NATIVE_MAP: Dict[TagType, Dict[str, ItemKey]] = {}
