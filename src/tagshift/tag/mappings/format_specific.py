"""Native keys for MP4, APEv2, RIFF INFO and AIFF text chunks."""

from ..keys import ItemKey, TagType


def setup_format_specific_mappings():
    """Register format-specific native keys."""

    for tag_type, tag_dict in {
        # iTunes atoms. Totals share trkn/disk with the numbers and there is
        # no dedicated year atom.
        TagType.MP4: {
            ItemKey.TITLE: "\xa9nam",
            ItemKey.ARTIST: "\xa9ART",
            ItemKey.ALBUM: "\xa9alb",
            ItemKey.ALBUM_ARTIST: "aART",
            ItemKey.RECORDING_DATE: "\xa9day",
            ItemKey.TRACK_NUMBER: "trkn",
            ItemKey.DISC_NUMBER: "disk",
            ItemKey.GENRE: "\xa9gen",
            ItemKey.COMPOSER: "\xa9wrt",
            ItemKey.COMMENT: "\xa9cmt",
            ItemKey.LYRICS: "\xa9lyr",
            ItemKey.COPYRIGHT: "cprt",
            ItemKey.ENCODER: "\xa9too",
            ItemKey.ISRC: "----:com.apple.iTunes:ISRC",
            ItemKey.BPM: "tmpo",
        },
        # Totals are stored as "number/total" in Track and Disc.
        TagType.APE: {
            ItemKey.TITLE: "Title",
            ItemKey.ARTIST: "Artist",
            ItemKey.ALBUM: "Album",
            ItemKey.ALBUM_ARTIST: "Album Artist",
            ItemKey.RECORDING_DATE: "Record Date",
            ItemKey.YEAR: "Year",
            ItemKey.TRACK_NUMBER: "Track",
            ItemKey.DISC_NUMBER: "Disc",
            ItemKey.GENRE: "Genre",
            ItemKey.COMPOSER: "Composer",
            ItemKey.COMMENT: "Comment",
            ItemKey.LYRICS: "Lyrics",
            ItemKey.COPYRIGHT: "Copyright",
            ItemKey.ENCODER: "Tool Name",
            ItemKey.ISRC: "ISRC",
            ItemKey.BPM: "BPM",
        },
        TagType.RIFF_INFO: {
            ItemKey.TITLE: "INAM",
            ItemKey.ARTIST: "IART",
            ItemKey.ALBUM: "IPRD",
            ItemKey.RECORDING_DATE: "ICRD",
            ItemKey.TRACK_NUMBER: "ITRK",
            ItemKey.GENRE: "IGNR",
            ItemKey.COMPOSER: "IMUS",
            ItemKey.COMMENT: "ICMT",
            ItemKey.COPYRIGHT: "ICOP",
            ItemKey.ENCODER: "ISFT",
        },
        TagType.AIFF_TEXT: {
            ItemKey.TITLE: "NAME",
            ItemKey.ARTIST: "AUTH",
            ItemKey.COPYRIGHT: "(c) ",
            ItemKey.COMMENT: "ANNO",
        },
    }.items():
        ItemKey.register(tag_type, tag_dict)
