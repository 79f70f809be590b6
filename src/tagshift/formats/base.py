"""Base class shared by all format adapters.

An adapter wraps one native structure (usually a mutagen tag object, kept in
``self.inner``) and exposes every canonical field through a getter, a setter
and a remover. Subclasses only have to provide three primitives over their
native key/value store (:meth:`AudioTag.get_first`, :meth:`AudioTag.set_first`
and :meth:`AudioTag.remove`) plus reading and writing the native structure.
Native keys always come from the :class:`ItemKey` mapping table, so the table
and the adapters cannot disagree.
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from os import PathLike
from typing import Any, ClassVar, Dict, List, Optional, Type, TypeVar, Union

from ..constants import MAX_NUMBER, SEP_ARTIST
from ..tag import (
    AnyTag,
    ItemKey,
    ItemValue,
    Picture,
    PictureType,
    Tag,
    TagType,
    Text,
    UnsupportedOperationError,
)
from ..tag.utils import join_artists, pack_pair, parse_number, parse_total, parse_year, split_artists

logger = logging.getLogger(__name__)

A = TypeVar("A", bound="AudioTag")

# total key -> the number key it belongs to
TOTAL_OF = {
    ItemKey.TRACK_TOTAL: ItemKey.TRACK_NUMBER,
    ItemKey.DISC_TOTAL: ItemKey.DISC_NUMBER,
}
NUMBER_OF = {number: total for total, number in TOTAL_OF.items()}


class AudioTag(ABC):
    """
    Canonical field access over one format's native tag structure.

    Unset fields, fields the format has no room for, and stored values that
    fail to parse are all reported as None. Setting a field the format cannot
    represent is a logged no-op, and so is setting a track or disc number
    outside 0..MAX_NUMBER.
    """

    tag_type: ClassVar[TagType]
    #: False for formats that have nowhere to store pictures at all
    supports_cover: ClassVar[bool] = True

    def __init__(self, inner: Any = None, artist_separator: str = SEP_ARTIST):
        self.inner = inner if inner is not None else self.default_inner()
        self.artist_separator = artist_separator

    def __repr__(self):
        return f"<{type(self).__name__} {self.to_anytag()!r}>"

    # ---------------------------------------------------------------------------
    # Native structure
    # ---------------------------------------------------------------------------
    @classmethod
    @abstractmethod
    def default_inner(cls) -> Any:
        """Return an empty native structure."""

    @classmethod
    @abstractmethod
    def read_inner(cls, path: Union[str, PathLike]) -> Any:
        """Read the native structure from a file."""

    @abstractmethod
    def write_to(self, filething: Any) -> None:
        """Write the native structure into an existing file (path or file object)."""

    @classmethod
    def read_from_path(cls: Type[A], path: Union[str, PathLike], **kwargs) -> A:
        return cls(cls.read_inner(path), **kwargs)

    def write_to_path(self, path: Union[str, PathLike]) -> None:
        self.write_to(str(path))

    # ---------------------------------------------------------------------------
    # Native key/value primitives
    # ---------------------------------------------------------------------------
    @abstractmethod
    def get_first(self, key: str) -> Optional[str]:
        """Return the first non-empty value stored under ``key``."""

    @abstractmethod
    def set_first(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing or creating the entry."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete every value stored under ``key``."""

    # ---------------------------------------------------------------------------
    # Generic item access
    # ---------------------------------------------------------------------------
    def native_key(self, item_key: ItemKey) -> Optional[str]:
        return item_key.map_key(self.tag_type)

    def get_item(self, item_key: ItemKey) -> Optional[str]:
        key = self.native_key(item_key)
        if key is None:
            return None
        return self.get_first(key)

    def set_item(self, item_key: ItemKey, value: str) -> bool:
        """Set a field by canonical key. Returns False if the format lacks it."""
        key = self.native_key(item_key)
        if key is None:
            logger.debug("%s has no %s field, dropping it", self.tag_type.value, item_key.name)
            return False
        self.set_first(key, value)
        return True

    def remove_item(self, item_key: ItemKey) -> None:
        key = self.native_key(item_key)
        if key is not None:
            self.remove(key)

    # ---------------------------------------------------------------------------
    # Text fields
    # ---------------------------------------------------------------------------
    def title(self) -> Optional[str]:
        return self.get_item(ItemKey.TITLE)

    def set_title(self, title: str) -> None:
        self.set_item(ItemKey.TITLE, title)

    def remove_title(self) -> None:
        self.remove_item(ItemKey.TITLE)

    def artist(self) -> Optional[str]:
        return self.get_item(ItemKey.ARTIST)

    def artists(self) -> Optional[List[str]]:
        return split_artists(self.artist(), self.artist_separator)

    def set_artist(self, artist: str) -> None:
        self.set_item(ItemKey.ARTIST, artist)

    def remove_artist(self) -> None:
        self.remove_item(ItemKey.ARTIST)

    def album_title(self) -> Optional[str]:
        return self.get_item(ItemKey.ALBUM)

    def set_album_title(self, title: str) -> None:
        self.set_item(ItemKey.ALBUM, title)

    def remove_album_title(self) -> None:
        self.remove_item(ItemKey.ALBUM)

    def album_artist(self) -> Optional[str]:
        return self.get_item(ItemKey.ALBUM_ARTIST)

    def album_artists(self) -> Optional[List[str]]:
        return split_artists(self.album_artist(), self.artist_separator)

    def set_album_artist(self, artist: str) -> None:
        self.set_item(ItemKey.ALBUM_ARTIST, artist)

    def remove_album_artist(self) -> None:
        self.remove_item(ItemKey.ALBUM_ARTIST)

    # ---------------------------------------------------------------------------
    # Year
    # ---------------------------------------------------------------------------
    def year(self) -> Optional[int]:
        """The year from the date field, or from the dedicated year field if the
        date is missing or does not start with a year."""
        year = parse_year(self.get_item(ItemKey.RECORDING_DATE))
        if year is None:
            year = parse_year(self.get_item(ItemKey.YEAR))
        return year

    def set_year(self, year: int) -> None:
        """Write the year to both the date field and the dedicated year field,
        for readers that only understand one of them."""
        self.set_item(ItemKey.RECORDING_DATE, str(year))
        self.set_item(ItemKey.YEAR, str(year))

    def remove_year(self) -> None:
        self.remove_item(ItemKey.YEAR)
        self.remove_item(ItemKey.RECORDING_DATE)

    # ---------------------------------------------------------------------------
    # Track and disc numbers
    # ---------------------------------------------------------------------------
    def track_number(self) -> Optional[int]:
        return self._get_number(ItemKey.TRACK_NUMBER)

    def set_track_number(self, number: int) -> None:
        self._store_number(ItemKey.TRACK_NUMBER, number)

    def remove_track_number(self) -> None:
        self._remove_number(ItemKey.TRACK_NUMBER)

    def total_tracks(self) -> Optional[int]:
        return self._get_number(ItemKey.TRACK_TOTAL)

    def set_total_tracks(self, total: int) -> None:
        self._store_number(ItemKey.TRACK_TOTAL, total)

    def remove_total_tracks(self) -> None:
        self._remove_number(ItemKey.TRACK_TOTAL)

    def disc_number(self) -> Optional[int]:
        return self._get_number(ItemKey.DISC_NUMBER)

    def set_disc_number(self, number: int) -> None:
        self._store_number(ItemKey.DISC_NUMBER, number)

    def remove_disc_number(self) -> None:
        self._remove_number(ItemKey.DISC_NUMBER)

    def total_discs(self) -> Optional[int]:
        return self._get_number(ItemKey.DISC_TOTAL)

    def set_total_discs(self, total: int) -> None:
        self._store_number(ItemKey.DISC_TOTAL, total)

    def remove_total_discs(self) -> None:
        self._remove_number(ItemKey.DISC_TOTAL)

    def _store_number(self, item_key: ItemKey, value: int) -> None:
        # same range the getters accept, so a stored number always reads back
        if not 0 <= value <= MAX_NUMBER:
            logger.debug("%s %r is out of range, ignoring it", item_key.name, value)
            return
        self._set_number(item_key, value)

    def _get_number(self, item_key: ItemKey) -> Optional[int]:
        return parse_number(self.get_item(item_key))

    def _set_number(self, item_key: ItemKey, value: int) -> None:
        self.set_item(item_key, str(value))

    def _remove_number(self, item_key: ItemKey) -> None:
        self.remove_item(item_key)

    # ---------------------------------------------------------------------------
    # Pictures
    # ---------------------------------------------------------------------------
    def pictures(self) -> List[Picture]:
        """All stored pictures."""
        raise UnsupportedOperationError(
            f"{self.tag_type.value} tags cannot store pictures"
        )

    def set_picture(self, picture: Picture) -> None:
        """Store ``picture``, replacing any picture of the same declared type."""
        raise UnsupportedOperationError(
            f"{self.tag_type.value} tags cannot store pictures"
        )

    def remove_pictures(self, pic_type: PictureType) -> None:
        """Remove the pictures declared as ``pic_type``."""
        raise UnsupportedOperationError(
            f"{self.tag_type.value} tags cannot store pictures"
        )

    def album_cover(self) -> Optional[Picture]:
        for picture in self.pictures():
            if picture.pic_type == PictureType.COVER_FRONT:
                return picture
        return None

    def set_album_cover(self, cover: Picture) -> None:
        self.set_picture(dataclasses.replace(cover, pic_type=PictureType.COVER_FRONT))

    def remove_album_cover(self) -> None:
        self.remove_pictures(PictureType.COVER_FRONT)

    # ---------------------------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------------------------
    def to_anytag(self) -> AnyTag:
        """Snapshot the common fields. Does not modify the adapter."""
        return AnyTag(
            title=self.title(),
            artists=self.artists(),
            year=self.year(),
            album=self.album_title(),
            album_artists=self.album_artists(),
            track_number=self.track_number(),
            total_tracks=self.total_tracks(),
            disc_number=self.disc_number(),
            total_discs=self.total_discs(),
            cover=self.album_cover() if self.supports_cover else None,
        )

    @classmethod
    def from_anytag(cls: Type[A], anytag: AnyTag, into: Optional[A] = None) -> A:
        """Write every field set in ``anytag`` into a new adapter, or merge them
        into ``into``. Fields that are None are left untouched."""
        tag = into if into is not None else cls()
        sep = tag.artist_separator

        if anytag.title is not None:
            tag.set_title(anytag.title)
        if anytag.artists:
            tag.set_artist(join_artists(anytag.artists, sep))
        if anytag.year is not None:
            tag.set_year(anytag.year)
        if anytag.album is not None:
            tag.set_album_title(anytag.album)
        if anytag.album_artists:
            tag.set_album_artist(join_artists(anytag.album_artists, sep))
        if anytag.track_number is not None:
            tag.set_track_number(anytag.track_number)
        if anytag.total_tracks is not None:
            tag.set_total_tracks(anytag.total_tracks)
        if anytag.disc_number is not None:
            tag.set_disc_number(anytag.disc_number)
        if anytag.total_discs is not None:
            tag.set_total_discs(anytag.total_discs)
        if anytag.cover is not None:
            if tag.supports_cover:
                tag.set_album_cover(anytag.cover)
            else:
                logger.debug("%s tags cannot store a cover, dropping it", cls.tag_type.value)
        return tag

    def convert(self, target: Type[A], into: Optional[A] = None) -> A:
        """Convert to another format through :class:`AnyTag`."""
        return target.from_anytag(self.to_anytag(), into=into)

    def to_tag(self) -> Tag:
        """Build a :class:`Tag` from every mapped field present in the native
        structure, plus the stored pictures."""
        tag = Tag(self.tag_type)
        for item_key in ItemKey:
            value = self._item_value(item_key)
            if value is not None:
                tag.insert_value(item_key, value)
        if self.supports_cover:
            for picture in self.pictures():
                tag.push_picture(picture)
        return tag

    def apply_tag(self, tag: Tag) -> None:
        """Write the items and pictures of ``tag`` into the native structure.

        Locator and Binary values are ignored by every format but APE.
        """
        if tag.tag_type is not self.tag_type:
            tag = tag.re_map(self.tag_type)
        for item in tag.items():
            if isinstance(item.value, Text):
                self.set_item(item.key, item.value.value)
            else:
                self._set_special_value(item.key, item.value)
        if tag.picture_count():
            if not self.supports_cover:
                logger.debug("%s tags cannot store pictures, dropping them", self.tag_type.value)
                return
            for picture in tag.pictures():
                self.set_picture(picture)

    def _item_value(self, item_key: ItemKey) -> Optional[ItemValue]:
        value = self.get_item(item_key)
        if value is None:
            return None
        return Text(value)

    def _set_special_value(self, item_key: ItemKey, value: ItemValue) -> None:
        logger.debug(
            "%s cannot store %s values, ignoring %s",
            self.tag_type.value,
            type(value).__name__,
            item_key.name,
        )


class PackedNumbersMixin:
    """
    For formats that store a number and its total in one entry, written as
    ``number/total`` (ID3 TRCK/TPOS, APE Track/Disc).

    A total without a number has nothing to attach to, so it is parked in a
    separate entry named by ``ORPHAN_TOTAL_KEYS`` until a number shows up.
    """

    ORPHAN_TOTAL_KEYS: ClassVar[Dict[ItemKey, str]] = {}

    def _get_number(self, item_key):
        if item_key in TOTAL_OF:
            total = parse_total(self.get_item(TOTAL_OF[item_key]))
            if total is None:
                total = parse_number(self.get_first(self.ORPHAN_TOTAL_KEYS[item_key]))
            return total
        return parse_number(self.get_item(item_key))

    def _set_number(self, item_key, value):
        if item_key in TOTAL_OF:
            number = self._get_number(TOTAL_OF[item_key])
            if number is None:
                self.set_first(self.ORPHAN_TOTAL_KEYS[item_key], str(value))
            else:
                self._write_pair(TOTAL_OF[item_key], number, value)
        else:
            self._write_pair(item_key, value, self._get_number(NUMBER_OF[item_key]))

    def _remove_number(self, item_key):
        if item_key in TOTAL_OF:
            number = self._get_number(TOTAL_OF[item_key])
            self.remove(self.ORPHAN_TOTAL_KEYS[item_key])
            if number is None:
                self.remove_item(TOTAL_OF[item_key])
            else:
                self.set_item(TOTAL_OF[item_key], str(number))
        else:
            total = self._get_number(NUMBER_OF[item_key])
            self.remove_item(item_key)
            if total is not None:
                self.set_first(self.ORPHAN_TOTAL_KEYS[NUMBER_OF[item_key]], str(total))

    def _write_pair(self, number_key, number, total):
        self.set_item(number_key, pack_pair(number, total))
        self.remove(self.ORPHAN_TOTAL_KEYS[NUMBER_OF[number_key]])
