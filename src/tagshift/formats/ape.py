"""APEv2 adapter (Monkey's Audio, WavPack, Musepack)."""

import logging
from typing import List, Optional

from mutagen.apev2 import APEv2, APENoHeaderError, APEValue, BINARY, EXTERNAL, TEXT

from ..constants import APE_COVER_BACK_KEY, APE_COVER_FRONT_KEY, APE_TOTAL_DISCS_KEY, APE_TOTAL_TRACKS_KEY
from ..tag import Binary, ItemKey, ItemValue, Locator, MimeType, Picture, PictureType, TagType, Text
from .base import AudioTag, PackedNumbersMixin

logger = logging.getLogger(__name__)

COVER_KEYS = {
    PictureType.COVER_FRONT: APE_COVER_FRONT_KEY,
    PictureType.COVER_BACK: APE_COVER_BACK_KEY,
}


class ApeTag(PackedNumbersMixin, AudioTag):
    """
    APEv2 items held in a :class:`mutagen.apev2.APEv2`.

    Keys are case-insensitive. Besides text, an item can hold an external
    locator or binary data. Only the front and back covers have a standard
    item, stored as ``<description>\\0<image data>``.
    """

    tag_type = TagType.APE
    ORPHAN_TOTAL_KEYS = {
        ItemKey.TRACK_TOTAL: APE_TOTAL_TRACKS_KEY,
        ItemKey.DISC_TOTAL: APE_TOTAL_DISCS_KEY,
    }

    @classmethod
    def default_inner(cls):
        return APEv2()

    @classmethod
    def read_inner(cls, path):
        try:
            return APEv2(path)
        except APENoHeaderError:
            logger.debug("No APEv2 tag in %s, starting from an empty tag", path)
            return APEv2()

    def write_to(self, filething) -> None:
        self.inner.save(filething)

    # ---------------------------------------------------------------------------
    # Native primitives
    # ---------------------------------------------------------------------------
    def get_first(self, key: str) -> Optional[str]:
        if key not in self.inner:
            return None
        value = self.inner[key]
        if value.kind == BINARY:
            return None
        if value.kind == EXTERNAL:
            return value.value or None
        for text in value:
            if text:
                return text
        return None

    def set_first(self, key: str, value: str) -> None:
        self.inner[key] = APEValue(value, TEXT)

    def remove(self, key: str) -> None:
        if key in self.inner:
            del self.inner[key]

    def _item_value(self, item_key: ItemKey) -> Optional[ItemValue]:
        key = self.native_key(item_key)
        if key is None or key not in self.inner:
            return None
        value = self.inner[key]
        if value.kind == BINARY:
            return Binary(bytes(value))
        if value.kind == EXTERNAL:
            return Locator(value.value)
        text = self.get_first(key)
        return Text(text) if text is not None else None

    def _set_special_value(self, item_key: ItemKey, value: ItemValue) -> None:
        key = self.native_key(item_key)
        if key is None:
            return
        if isinstance(value, Locator):
            self.inner[key] = APEValue(value.value, EXTERNAL)
        elif isinstance(value, Binary):
            self.inner[key] = APEValue(value.value, BINARY)

    # ---------------------------------------------------------------------------
    # Pictures
    # ---------------------------------------------------------------------------
    def pictures(self) -> List[Picture]:
        pictures = []
        for pic_type, key in COVER_KEYS.items():
            if key not in self.inner:
                continue
            value = self.inner[key]
            if value.kind != BINARY:
                continue
            desc, sep, data = bytes(value).partition(b"\x00")
            if not sep:
                logger.debug("Ignoring %s without a description terminator", key)
                continue
            pictures.append(
                Picture(
                    data=data,
                    mime_type=MimeType.sniff(data) or MimeType.JPEG,
                    pic_type=pic_type,
                    description=desc.decode("utf-8", "replace"),
                )
            )
        return pictures

    def set_picture(self, picture: Picture) -> None:
        key = COVER_KEYS.get(picture.pic_type)
        if key is None:
            logger.debug("APEv2 has no item for %s pictures, dropping it", picture.pic_type.name)
            return
        data = picture.description.encode("utf-8") + b"\x00" + picture.data
        self.inner[key] = APEValue(data, BINARY)

    def remove_pictures(self, pic_type: PictureType) -> None:
        key = COVER_KEYS.get(pic_type)
        if key is not None:
            self.remove(key)
