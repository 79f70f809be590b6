"""
Vorbis comment based adapters: Opus, Ogg Vorbis and FLAC.

All three store text as Vorbis comments (case-insensitive keys, any number of
values per key). Opus and Ogg Vorbis keep pictures inside the comments, as
base64-encoded FLAC picture blocks under ``METADATA_BLOCK_PICTURE``. FLAC has
real PICTURE metadata blocks for that.
"""

import base64
import binascii
import logging
import struct
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Type

import mutagen.flac
# mutagen._vorbis is private. Checked against mutagen 1.48, the upper bound
# pinned in pyproject.toml
from mutagen._vorbis import VCommentDict
from mutagen.flac import FLAC, VCFLACDict
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from ..constants import XIPH_PICTURE_KEY
from ..tag import MimeType, Picture, PictureType, TagType
from .base import AudioTag

logger = logging.getLogger(__name__)


def to_flac_picture(picture: Picture) -> mutagen.flac.Picture:
    block = mutagen.flac.Picture()
    block.type = int(picture.pic_type)
    block.mime = picture.mime_type.value
    block.desc = picture.description
    block.data = picture.data
    return block


def from_flac_picture(block: mutagen.flac.Picture) -> Picture:
    mime_type = MimeType.from_str(block.mime) or MimeType.sniff(block.data) or MimeType.JPEG
    return Picture(
        data=block.data,
        mime_type=mime_type,
        pic_type=PictureType.from_code(block.type),
        description=block.desc,
    )


def decode_picture_comment(value: str) -> Optional[Picture]:
    """Decode one ``METADATA_BLOCK_PICTURE`` value. Malformed values give None."""
    try:
        block = mutagen.flac.Picture(base64.b64decode(value))
    except (binascii.Error, struct.error, ValueError, mutagen.flac.error) as e:
        logger.debug("Ignoring malformed %s value: %s", XIPH_PICTURE_KEY, e)
        return None
    return from_flac_picture(block)


def encode_picture_comment(picture: Picture) -> str:
    return base64.b64encode(to_flac_picture(picture).write()).decode("ascii")


class XiphCommentTag(AudioTag):
    """Shared Vorbis comment handling. ``comments`` is the native comment list."""

    #: mutagen file type used to read and write the comments
    file_class: ClassVar[Type]

    @property
    def comments(self) -> VCommentDict:
        return self.inner

    @classmethod
    def default_inner(cls):
        return VCommentDict()

    @classmethod
    def read_inner(cls, path):
        audio = cls.file_class(path)
        if audio.tags is None:
            return cls.default_inner()
        return audio.tags

    def write_to(self, filething) -> None:
        comments = list(self.comments)
        audio = self.file_class(filething)
        audio.tags.clear()
        audio.tags.extend(comments)
        audio.save(filething)

    # ---------------------------------------------------------------------------
    # Native primitives
    # ---------------------------------------------------------------------------
    def get_first(self, key: str) -> Optional[str]:
        if key not in self.comments:
            return None
        for value in self.comments[key]:
            if value:
                return value
        return None

    def set_first(self, key: str, value: str) -> None:
        self.comments[key] = [value]

    def remove(self, key: str) -> None:
        if key in self.comments:
            del self.comments[key]

    # ---------------------------------------------------------------------------
    # Pictures
    # ---------------------------------------------------------------------------
    def pictures(self) -> List[Picture]:
        if XIPH_PICTURE_KEY not in self.comments:
            return []
        pictures = []
        for value in self.comments[XIPH_PICTURE_KEY]:
            picture = decode_picture_comment(value)
            if picture is not None:
                pictures.append(picture)
        return pictures

    def set_picture(self, picture: Picture) -> None:
        self.remove_pictures(picture.pic_type)
        values = self._picture_values()
        values.append(encode_picture_comment(picture))
        self.comments[XIPH_PICTURE_KEY] = values

    def remove_pictures(self, pic_type: PictureType) -> None:
        kept = []
        for value in self._picture_values():
            picture = decode_picture_comment(value)
            # undecodable values are left alone
            if picture is None or picture.pic_type != pic_type:
                kept.append(value)
        if kept:
            self.comments[XIPH_PICTURE_KEY] = kept
        else:
            self.remove(XIPH_PICTURE_KEY)

    def _picture_values(self) -> List[str]:
        if XIPH_PICTURE_KEY not in self.comments:
            return []
        return list(self.comments[XIPH_PICTURE_KEY])


class OpusTag(XiphCommentTag):
    """Opus comment header (RFC 7845)."""

    tag_type = TagType.OPUS
    file_class = OggOpus


class VorbisTag(XiphCommentTag):
    """Ogg Vorbis comment header."""

    tag_type = TagType.VORBIS
    file_class = OggVorbis


@dataclass
class FlacMetadata:
    """The two metadata block kinds a FLAC tag is made of."""

    comments: VCFLACDict = field(default_factory=VCFLACDict)
    pictures: List[mutagen.flac.Picture] = field(default_factory=list)


class FlacTag(XiphCommentTag):
    """FLAC VORBIS_COMMENT and PICTURE blocks."""

    tag_type = TagType.FLAC
    file_class = FLAC

    @property
    def comments(self) -> VCFLACDict:
        return self.inner.comments

    @classmethod
    def default_inner(cls):
        return FlacMetadata()

    @classmethod
    def read_inner(cls, path):
        audio = FLAC(path)
        comments = audio.tags if audio.tags is not None else VCFLACDict()
        return FlacMetadata(comments=comments, pictures=list(audio.pictures))

    def write_to(self, filething) -> None:
        comments = list(self.comments)
        blocks = list(self.inner.pictures)
        audio = FLAC(filething)
        if audio.tags is None:
            audio.add_tags()
        audio.tags.clear()
        audio.tags.extend(comments)
        audio.clear_pictures()
        for block in blocks:
            audio.add_picture(block)
        audio.save(filething)

    def pictures(self) -> List[Picture]:
        return [from_flac_picture(block) for block in self.inner.pictures]

    def set_picture(self, picture: Picture) -> None:
        self.remove_pictures(picture.pic_type)
        self.inner.pictures.append(to_flac_picture(picture))

    def remove_pictures(self, pic_type: PictureType) -> None:
        self.inner.pictures = [
            block for block in self.inner.pictures if block.type != int(pic_type)
        ]
