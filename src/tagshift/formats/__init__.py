"""Format adapters and file-extension dispatch."""

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, Type, Union

from ..constants import DEFAULT_ID3V2_VERSION, SEP_ARTIST
from ..tag import TagType, UnsupportedFormatError
from .ape import ApeTag
from .base import AudioTag
from .id3 import Id3v2Tag
from .iff import AiffTextTag, RiffInfoTag
from .mp4 import Mp4Tag
from .xiph import FlacTag, OpusTag, VorbisTag

logger = logging.getLogger(__name__)

ADAPTERS: Dict[TagType, Type[AudioTag]] = {
    TagType.APE: ApeTag,
    TagType.ID3V2: Id3v2Tag,
    TagType.MP4: Mp4Tag,
    TagType.OPUS: OpusTag,
    TagType.VORBIS: VorbisTag,
    TagType.FLAC: FlacTag,
    TagType.RIFF_INFO: RiffInfoTag,
    TagType.AIFF_TEXT: AiffTextTag,
}

FORMAT_MAPPING: Dict[str, TagType] = {
    # MPEG / Apple
    ".mp3": TagType.ID3V2,
    ".m4a": TagType.MP4,
    ".mp4": TagType.MP4,
    ".m4b": TagType.MP4,
    ".aiff": TagType.AIFF_TEXT,
    ".aif": TagType.AIFF_TEXT,
    # Microsoft / Windows
    ".wav": TagType.RIFF_INFO,
    ".wave": TagType.RIFF_INFO,
    # Xiph.Org
    ".opus": TagType.OPUS,
    ".ogg": TagType.VORBIS,
    ".flac": TagType.FLAC,
    # APEv2 carriers
    ".ape": TagType.APE,
    ".wv": TagType.APE,
    ".mpc": TagType.APE,
}

SUPPORTED_EXTENSIONS = set(FORMAT_MAPPING.keys())


def tag_type_for(path: Union[str, os.PathLike]) -> TagType:
    """Return the tag type used for ``path``, judging by its extension."""
    suffix = Path(path).suffix.lower()
    try:
        return FORMAT_MAPPING[suffix]
    except KeyError:
        raise UnsupportedFormatError(f"Unsupported file extension: {suffix or path}") from None


def adapter_for(
    tag_type: TagType, enabled: Optional[Iterable[TagType]] = None
) -> Type[AudioTag]:
    """Return the adapter class for ``tag_type``.

    Raises:
        UnsupportedFormatError: if ``enabled`` is given and does not include it
    """
    if enabled is not None and tag_type not in set(enabled):
        raise UnsupportedFormatError(f"Support for {tag_type.value} tags is disabled")
    return ADAPTERS[tag_type]


def read(
    path: Union[str, os.PathLike],
    enabled: Optional[Iterable[TagType]] = None,
    artist_separator: str = SEP_ARTIST,
    id3v2_version: int = DEFAULT_ID3V2_VERSION,
) -> AudioTag:
    """
    Read the tag of an audio file into the matching adapter.

    Args:
        path: Path to the audio file
        enabled: Tag types allowed to be read (all if None)
        artist_separator: Separator for multi-valued artist fields
        id3v2_version: ID3v2 revision used when the tag is saved again

    Returns:
        An adapter wrapping the file's tag (empty if the file has none)

    Raises:
        UnsupportedFormatError: for unknown extensions and disabled tag types
    """
    adapter = adapter_for(tag_type_for(path), enabled)
    logger.debug("Reading %s as %s", path, adapter.tag_type.value)
    kwargs = {"artist_separator": artist_separator}
    if adapter is Id3v2Tag:
        kwargs["v2_version"] = id3v2_version
    return adapter.read_from_path(path, **kwargs)


def enabled_tag_types(flags: Dict[str, bool]) -> Set[TagType]:
    """Resolve ``{tag_type_value: enabled}`` flags; missing flags count as enabled."""
    return {tag_type for tag_type in TagType if flags.get(tag_type.value, True)}


__all__ = [
    "ADAPTERS",
    "FORMAT_MAPPING",
    "SUPPORTED_EXTENSIONS",
    "AiffTextTag",
    "ApeTag",
    "AudioTag",
    "FlacTag",
    "Id3v2Tag",
    "Mp4Tag",
    "OpusTag",
    "RiffInfoTag",
    "VorbisTag",
    "adapter_for",
    "enabled_tag_types",
    "read",
    "tag_type_for",
]
