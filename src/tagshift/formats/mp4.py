"""MP4 adapter (iTunes-style ilst atoms in .m4a/.mp4/.m4b)."""

import logging
from typing import List, Optional, Tuple

from mutagen.mp4 import MP4, MP4Cover, MP4FreeForm, MP4Tags

from ..tag import ItemKey, MimeType, Picture, PictureType, TagType
from ..tag.utils import parse_number, parse_total
from .base import AudioTag

logger = logging.getLogger(__name__)

FREEFORM_PREFIX = "----:"
NUMBER_ATOMS = ("trkn", "disk")
# canonical key -> (atom, position in the (number, total) pair)
NUMBER_SLOTS = {
    ItemKey.TRACK_NUMBER: ("trkn", 0),
    ItemKey.TRACK_TOTAL: ("trkn", 1),
    ItemKey.DISC_NUMBER: ("disk", 0),
    ItemKey.DISC_TOTAL: ("disk", 1),
}


class Mp4Tag(AudioTag):
    """
    ilst atoms held in a :class:`mutagen.mp4.MP4Tags`.

    Track and disc are ``(number, total)`` pairs where 0 means unset, so each
    half can be set or removed on its own. ``tmpo`` is an integer atom and
    ``----`` atoms hold UTF-8 bytes. Only a single front cover is kept.
    """

    tag_type = TagType.MP4

    @classmethod
    def default_inner(cls):
        return MP4Tags()

    @classmethod
    def read_inner(cls, path):
        audio = MP4(path)
        if audio.tags is None:
            return MP4Tags()
        return audio.tags

    def write_to(self, filething) -> None:
        self.inner.save(filething)

    # ---------------------------------------------------------------------------
    # Native primitives
    # ---------------------------------------------------------------------------
    def get_first(self, key: str) -> Optional[str]:
        if key in NUMBER_ATOMS:
            number, _ = self._read_pair(key)
            return str(number) if number is not None else None
        for value in self.inner.get(key, []):
            if isinstance(value, bytes):
                value = value.decode("utf-8", "replace")
            else:
                value = str(value)
            if value:
                return value
        return None

    def set_first(self, key: str, value: str) -> None:
        if key in NUMBER_ATOMS:
            number = parse_number(value)
            if number is None:
                logger.debug("Ignoring non-numeric %s value %r", key, value)
                return
            total = parse_total(value)
            if total is None:
                total = self._read_pair(key)[1]
            self._write_pair(key, number, total)
        elif key == "tmpo":
            bpm = parse_number(value)
            if bpm is None:
                logger.debug("Ignoring non-numeric tmpo value %r", value)
                return
            self.inner[key] = [bpm]
        elif key.startswith(FREEFORM_PREFIX):
            self.inner[key] = [MP4FreeForm(value.encode("utf-8"))]
        else:
            self.inner[key] = [value]

    def remove(self, key: str) -> None:
        if key in self.inner:
            del self.inner[key]

    # ---------------------------------------------------------------------------
    # Track and disc pairs
    # ---------------------------------------------------------------------------
    def _read_pair(self, atom: str) -> Tuple[Optional[int], Optional[int]]:
        values = self.inner.get(atom)
        if not values:
            return None, None
        pair = tuple(values[0]) + (0, 0)
        return pair[0] or None, pair[1] or None

    def _write_pair(self, atom: str, number: Optional[int], total: Optional[int]) -> None:
        if not number and not total:
            self.remove(atom)
        else:
            self.inner[atom] = [(number or 0, total or 0)]

    def _get_number(self, item_key):
        atom, index = NUMBER_SLOTS[item_key]
        return self._read_pair(atom)[index]

    def _set_number(self, item_key, value):
        atom, index = NUMBER_SLOTS[item_key]
        pair = list(self._read_pair(atom))
        pair[index] = value
        self._write_pair(atom, *pair)

    def _remove_number(self, item_key):
        atom, index = NUMBER_SLOTS[item_key]
        pair = list(self._read_pair(atom))
        pair[index] = None
        self._write_pair(atom, *pair)

    # ---------------------------------------------------------------------------
    # Pictures
    # ---------------------------------------------------------------------------
    def pictures(self) -> List[Picture]:
        covers = self.inner.get("covr")
        if not covers:
            return []
        cover = covers[0]
        if cover.imageformat == MP4Cover.FORMAT_PNG:
            mime_type = MimeType.PNG
        else:
            mime_type = MimeType.JPEG
        return [Picture(data=bytes(cover), mime_type=mime_type, pic_type=PictureType.COVER_FRONT)]

    def set_picture(self, picture: Picture) -> None:
        if picture.pic_type != PictureType.COVER_FRONT:
            logger.debug("MP4 only stores a front cover, dropping %s picture", picture.pic_type.name)
            return
        if picture.mime_type == MimeType.PNG:
            imageformat = MP4Cover.FORMAT_PNG
        else:
            imageformat = MP4Cover.FORMAT_JPEG
        self.inner["covr"] = [MP4Cover(picture.data, imageformat=imageformat)]

    def remove_pictures(self, pic_type: PictureType) -> None:
        if pic_type == PictureType.COVER_FRONT:
            self.remove("covr")
