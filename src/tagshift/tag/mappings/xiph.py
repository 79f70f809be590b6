"""Vorbis comment field names, shared by Opus, Ogg Vorbis and FLAC."""

from ..keys import ItemKey, TagType


XIPH_KEYS = {
    ItemKey.TITLE: "TITLE",
    ItemKey.ARTIST: "ARTIST",
    ItemKey.ALBUM: "ALBUM",
    ItemKey.ALBUM_ARTIST: "ALBUMARTIST",
    ItemKey.RECORDING_DATE: "DATE",
    ItemKey.YEAR: "YEAR",
    ItemKey.TRACK_NUMBER: "TRACKNUMBER",
    # Not standard, there is no agreed-upon name for the totals.
    ItemKey.TRACK_TOTAL: "TOTALTRACKS",
    ItemKey.DISC_NUMBER: "DISCNUMBER",
    ItemKey.DISC_TOTAL: "TOTALDISCS",
    ItemKey.GENRE: "GENRE",
    ItemKey.COMPOSER: "COMPOSER",
    ItemKey.COMMENT: "COMMENT",
    ItemKey.LYRICS: "LYRICS",
    ItemKey.COPYRIGHT: "COPYRIGHT",
    ItemKey.ENCODER: "ENCODER",
    ItemKey.ISRC: "ISRC",
    ItemKey.BPM: "BPM",
}


def setup_xiph_mappings():
    """Register the Vorbis comment names for all Xiph based tag types."""
    for tag_type in (TagType.OPUS, TagType.VORBIS, TagType.FLAC):
        ItemKey.register(tag_type, XIPH_KEYS)
