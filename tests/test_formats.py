"""Tests for the format adapters other than Opus, on in-memory tags."""

import dataclasses

import pytest
from mutagen.apev2 import BINARY, EXTERNAL
from mutagen.id3 import TXXX
from mutagen.mp4 import MP4Cover, MP4FreeForm

from tagshift.formats import (
    ADAPTERS,
    AiffTextTag,
    ApeTag,
    FlacTag,
    Id3v2Tag,
    Mp4Tag,
    OpusTag,
    RiffInfoTag,
    VorbisTag,
    adapter_for,
    enabled_tag_types,
    read,
    tag_type_for,
)
from tagshift.tag import (
    AnyTag,
    Binary,
    ItemKey,
    Locator,
    Picture,
    PictureType,
    Tag,
    TagType,
    Text,
    UnsupportedFormatError,
    UnsupportedOperationError,
)

FULL = AnyTag(
    title="Song",
    artists=["A", "B"],
    year=2001,
    album="Album",
    album_artists=["AA"],
    track_number=3,
    total_tracks=12,
    disc_number=1,
    total_discs=2,
)


class TestRoundTrip:
    """Test AnyTag -> adapter -> AnyTag for every format."""

    @pytest.mark.parametrize("adapter", [OpusTag, VorbisTag, FlacTag, Id3v2Tag, Mp4Tag, ApeTag])
    def test_full_round_trip(self, adapter, jpeg_cover):
        anytag = dataclasses.replace(FULL, cover=jpeg_cover)
        assert adapter.from_anytag(anytag).to_anytag() == anytag

    def test_riff_keeps_what_it_can(self):
        result = RiffInfoTag.from_anytag(FULL).to_anytag()
        assert result == AnyTag(title="Song", artists=["A", "B"], year=2001, album="Album", track_number=3)

    def test_aiff_keeps_what_it_can(self):
        result = AiffTextTag.from_anytag(FULL).to_anytag()
        assert result == AnyTag(title="Song", artists=["A", "B"])

    def test_cover_dropped_for_iff(self, png_cover):
        """Converting into a format without pictures drops the cover quietly."""
        tag = RiffInfoTag.from_anytag(AnyTag(title="Song", cover=png_cover))
        assert tag.to_anytag() == AnyTag(title="Song")


NUMBERED = [OpusTag, VorbisTag, FlacTag, Id3v2Tag, Mp4Tag, ApeTag]
TEXT_NUMBERED = [OpusTag, VorbisTag, FlacTag, Id3v2Tag, ApeTag, RiffInfoTag]


class TestNumberRange:
    """Test track/disc numbers at and beyond what can be stored."""

    @pytest.mark.parametrize("adapter", NUMBERED)
    def test_largest_number_round_trips(self, adapter):
        anytag = AnyTag(track_number=65535, total_tracks=65535, disc_number=65535, total_discs=65535)
        assert adapter.from_anytag(anytag).to_anytag() == anytag

    @pytest.mark.parametrize("value", [70000, -1])
    @pytest.mark.parametrize("adapter", NUMBERED + [RiffInfoTag])
    def test_out_of_range_numbers_are_ignored(self, adapter, value):
        anytag = AnyTag(
            title="Song",
            track_number=value,
            total_tracks=value,
            disc_number=value,
            total_discs=value,
        )
        assert adapter.from_anytag(anytag).to_anytag() == AnyTag(title="Song")

    @pytest.mark.parametrize("adapter", NUMBERED)
    def test_out_of_range_keeps_existing_number(self, adapter):
        tag = adapter()
        tag.set_track_number(3)
        tag.set_track_number(70000)
        assert tag.track_number() == 3

    @pytest.mark.parametrize("adapter", TEXT_NUMBERED)
    def test_non_ascii_digits_read_as_absent(self, adapter):
        tag = adapter()
        tag.set_title("Song")
        tag.set_item(ItemKey.TRACK_NUMBER, "²")
        assert tag.track_number() is None
        assert tag.to_anytag() == AnyTag(title="Song")
        assert tag.to_tag().get_text(ItemKey.TRACK_NUMBER) == "²"


class TestId3v2:
    """Test ID3v2 specifics."""

    def test_frames(self):
        tag = Id3v2Tag()
        tag.set_title("Song")
        tag.set_year(2001)
        assert str(tag.inner["TIT2"]) == "Song"
        assert str(tag.inner["TDRC"]) == "2001"
        assert str(tag.inner["TYER"]) == "2001"

    def test_number_and_total_share_trck(self):
        tag = Id3v2Tag()
        tag.set_track_number(3)
        tag.set_total_tracks(12)
        assert tag.inner["TRCK"].text == ["3/12"]
        tag.set_track_number(4)
        assert tag.inner["TRCK"].text == ["4/12"]

    def test_total_without_number_is_parked(self):
        tag = Id3v2Tag()
        tag.set_total_discs(2)
        assert "TPOS" not in tag.inner
        assert tag.inner["TXXX:TOTALDISCS"].text == ["2"]
        assert tag.total_discs() == 2

        tag.set_disc_number(1)
        assert tag.inner["TPOS"].text == ["1/2"]
        assert "TXXX:TOTALDISCS" not in tag.inner

    def test_remove_number_keeps_total(self):
        tag = Id3v2Tag()
        tag.set_track_number(3)
        tag.set_total_tracks(12)
        tag.remove_track_number()
        assert tag.track_number() is None
        assert tag.total_tracks() == 12

    def test_remove_total_keeps_number(self):
        tag = Id3v2Tag()
        tag.set_track_number(3)
        tag.set_total_tracks(12)
        tag.remove_total_tracks()
        assert tag.inner["TRCK"].text == ["3"]
        assert tag.total_tracks() is None

    def test_user_text_frame(self):
        tag = Id3v2Tag()
        tag.inner.add(TXXX(encoding=3, desc="TOTALTRACKS", text=["9"]))
        assert tag.total_tracks() == 9

    def test_comment_and_lyrics(self):
        tag = Id3v2Tag()
        tag.set_item(ItemKey.COMMENT, "Nice")
        tag.set_item(ItemKey.LYRICS, "La la")
        assert tag.get_item(ItemKey.COMMENT) == "Nice"
        assert tag.get_item(ItemKey.LYRICS) == "La la"
        assert tag.inner.getall("COMM")[0].lang == "eng"

    def test_genre(self):
        tag = Id3v2Tag()
        tag.set_item(ItemKey.GENRE, "(13)")
        assert tag.get_item(ItemKey.GENRE) == "Pop"

    def test_pictures_by_type(self, png_cover):
        tag = Id3v2Tag()
        back = Picture(b"\xff\xd8\xffback", pic_type=PictureType.COVER_BACK, description="back")
        tag.set_picture(back)
        tag.set_album_cover(png_cover)
        assert tag.pictures() == [back, png_cover] or tag.pictures() == [png_cover, back]
        tag.remove_album_cover()
        assert tag.pictures() == [back]


class TestMp4:
    """Test MP4 specifics."""

    def test_pairs(self):
        tag = Mp4Tag()
        tag.set_total_tracks(12)
        assert tag.inner["trkn"] == [(0, 12)]
        assert tag.track_number() is None
        tag.set_track_number(3)
        assert tag.inner["trkn"] == [(3, 12)]
        tag.remove_total_tracks()
        assert tag.inner["trkn"] == [(3, 0)]
        tag.remove_track_number()
        assert "trkn" not in tag.inner

    def test_no_year_atom(self):
        tag = Mp4Tag()
        tag.set_year(2001)
        assert tag.inner["\xa9day"] == ["2001"]
        assert tag.year() == 2001
        assert not tag.set_item(ItemKey.YEAR, "2001")

    def test_integer_and_freeform_atoms(self):
        tag = Mp4Tag()
        tag.set_item(ItemKey.BPM, "120")
        tag.set_item(ItemKey.ISRC, "USRC17607839")
        assert tag.inner["tmpo"] == [120]
        assert isinstance(tag.inner["----:com.apple.iTunes:ISRC"][0], MP4FreeForm)
        assert tag.get_item(ItemKey.BPM) == "120"
        assert tag.get_item(ItemKey.ISRC) == "USRC17607839"

    def test_non_numeric_bpm_is_dropped(self):
        tag = Mp4Tag()
        tag.set_item(ItemKey.BPM, "fast")
        assert "tmpo" not in tag.inner

    def test_generic_track_item_keeps_total(self):
        tag = Mp4Tag()
        tag.set_total_tracks(12)
        tag.set_item(ItemKey.TRACK_NUMBER, "5")
        assert tag.inner["trkn"] == [(5, 12)]
        assert tag.get_item(ItemKey.TRACK_NUMBER) == "5"

    def test_cover_format(self, png_cover, jpeg_cover):
        tag = Mp4Tag()
        tag.set_album_cover(png_cover)
        assert tag.inner["covr"][0].imageformat == MP4Cover.FORMAT_PNG
        tag.set_album_cover(jpeg_cover)
        assert tag.inner["covr"][0].imageformat == MP4Cover.FORMAT_JPEG
        assert tag.album_cover() == jpeg_cover

    def test_only_front_cover(self):
        tag = Mp4Tag()
        tag.set_picture(Picture(b"x", pic_type=PictureType.COVER_BACK))
        assert "covr" not in tag.inner


class TestApe:
    """Test APEv2 specifics."""

    def test_packed_numbers(self):
        tag = ApeTag()
        tag.set_disc_number(1)
        tag.set_total_discs(2)
        assert str(tag.inner["Disc"]) == "1/2"
        assert tag.disc_number() == 1
        assert tag.total_discs() == 2

    def test_orphan_total(self):
        tag = ApeTag()
        tag.set_total_tracks(12)
        assert str(tag.inner["TotalTracks"]) == "12"
        assert tag.total_tracks() == 12

    def test_keys_are_case_insensitive(self):
        tag = ApeTag()
        tag.set_first("TITLE", "Song")
        assert tag.title() == "Song"

    def test_cover_layout(self, png_cover):
        tag = ApeTag()
        tag.set_album_cover(png_cover)
        value = tag.inner["Cover Art (Front)"]
        assert value.kind == BINARY
        assert bytes(value) == b"front\x00" + png_cover.data
        assert tag.album_cover() == png_cover

    def test_unsupported_picture_type_is_dropped(self):
        tag = ApeTag()
        tag.set_picture(Picture(b"x", pic_type=PictureType.MEDIA))
        assert tag.pictures() == []

    def test_locator_and_binary_items(self):
        native = Tag(TagType.APE)
        native.insert_value(ItemKey.TITLE, Text("Song"))
        native.insert_value(ItemKey.COMMENT, Locator("http://example.org"))
        native.insert_value(ItemKey.LYRICS, Binary(b"\x00\x01"))

        tag = ApeTag()
        tag.apply_tag(native)
        assert tag.inner["Comment"].kind == EXTERNAL
        assert tag.inner["Lyrics"].kind == BINARY
        assert tag.to_tag() == native

    def test_binary_items_are_skipped_elsewhere(self):
        native = Tag(TagType.APE)
        native.insert_value(ItemKey.LYRICS, Binary(b"\x00\x01"))
        native.insert_value(ItemKey.COMMENT, Locator("http://example.org"))
        tag = VorbisTag()
        tag.apply_tag(native)
        assert len(tag.comments) == 0


class TestFlac:
    """Test FLAC picture blocks."""

    def test_pictures_are_blocks(self, png_cover):
        tag = FlacTag()
        tag.set_album_cover(png_cover)
        assert len(tag.inner.pictures) == 1
        assert "METADATA_BLOCK_PICTURE" not in tag.comments
        assert tag.album_cover() == png_cover

    def test_remove_by_type(self, png_cover):
        tag = FlacTag()
        tag.set_picture(Picture(b"x", pic_type=PictureType.COVER_BACK))
        tag.set_album_cover(png_cover)
        tag.remove_pictures(PictureType.COVER_BACK)
        assert tag.pictures() == [png_cover]


class TestIff:
    """Test RIFF INFO and AIFF text adapters."""

    def test_riff_keys(self):
        tag = RiffInfoTag()
        tag.set_title("Song")
        tag.set_year(2001)
        tag.set_track_number(3)
        assert list(tag.inner) == [("INAM", "Song"), ("ICRD", "2001"), ("ITRK", "3")]

    def test_riff_has_no_totals(self):
        tag = RiffInfoTag()
        tag.set_total_tracks(12)
        assert tag.total_tracks() is None
        assert len(tag.inner) == 0

    def test_aiff_copyright_chunk(self):
        tag = AiffTextTag()
        tag.set_item(ItemKey.COPYRIGHT, "(c) me")
        assert list(tag.inner) == [("(c) ", "(c) me")]

    @pytest.mark.parametrize("adapter", [RiffInfoTag, AiffTextTag])
    def test_cover_is_unsupported(self, adapter, png_cover):
        tag = adapter()
        assert not tag.supports_cover
        with pytest.raises(UnsupportedOperationError):
            tag.album_cover()
        with pytest.raises(UnsupportedOperationError):
            tag.set_album_cover(png_cover)
        with pytest.raises(UnsupportedOperationError):
            tag.remove_album_cover()

    def test_to_tag_without_pictures(self):
        tag = AiffTextTag()
        tag.set_title("Song")
        native = tag.to_tag()
        assert native.get_text(ItemKey.TITLE) == "Song"
        assert native.picture_count() == 0


class TestDispatch:
    """Test picking an adapter for a file."""

    def test_every_tag_type_has_an_adapter(self):
        for tag_type in TagType:
            assert ADAPTERS[tag_type].tag_type is tag_type

    @pytest.mark.parametrize(
        "name,tag_type",
        [
            ("a.mp3", TagType.ID3V2),
            ("a.M4A", TagType.MP4),
            ("a.opus", TagType.OPUS),
            ("a.ogg", TagType.VORBIS),
            ("a.flac", TagType.FLAC),
            ("a.wv", TagType.APE),
            ("a.wav", TagType.RIFF_INFO),
            ("a.aif", TagType.AIFF_TEXT),
        ],
    )
    def test_tag_type_for(self, name, tag_type):
        assert tag_type_for(name) is tag_type

    def test_unknown_extension(self):
        with pytest.raises(UnsupportedFormatError):
            tag_type_for("notes.txt")

    def test_disabled_type(self):
        enabled = enabled_tag_types({"id3v2": False})
        assert TagType.ID3V2 not in enabled
        assert TagType.OPUS in enabled
        with pytest.raises(UnsupportedFormatError, match="disabled"):
            adapter_for(TagType.ID3V2, enabled)
        assert adapter_for(TagType.OPUS, enabled) is OpusTag

    def test_read_refuses_disabled_type(self, mp3_file):
        with pytest.raises(UnsupportedFormatError):
            read(mp3_file, enabled={TagType.OPUS})
