"""ID3v2 frame ids.

Track and disc totals have no frame of their own: they are stored after the
number in TRCK/TPOS (``number/total``) and are handled by the ID3 adapter.
"""

from ..keys import ItemKey, TagType


ID3_FRAMES = {
    ItemKey.TITLE: "TIT2",
    ItemKey.ARTIST: "TPE1",
    ItemKey.ALBUM: "TALB",
    ItemKey.ALBUM_ARTIST: "TPE2",
    ItemKey.RECORDING_DATE: "TDRC",
    ItemKey.YEAR: "TYER",
    ItemKey.TRACK_NUMBER: "TRCK",
    ItemKey.DISC_NUMBER: "TPOS",
    ItemKey.GENRE: "TCON",
    ItemKey.COMPOSER: "TCOM",
    ItemKey.COMMENT: "COMM",
    ItemKey.LYRICS: "USLT",
    ItemKey.COPYRIGHT: "TCOP",
    ItemKey.ENCODER: "TSSE",
    ItemKey.ISRC: "TSRC",
    ItemKey.BPM: "TBPM",
}


def setup_id3_mappings():
    """Register ID3v2 frame ids."""
    ItemKey.register(TagType.ID3V2, ID3_FRAMES)
