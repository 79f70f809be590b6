"""Core Tag container for format-bound metadata."""

from typing import List, Optional

from .item import ItemValue, TagItem
from .keys import ItemKey, TagType
from .picture import Picture, PictureType


class Tag:
    """
    An ordered collection of :class:`TagItem` plus a separate collection of
    :class:`Picture`, bound to a :class:`TagType`.

    Every item held has a native key in the tag's own type, and there is at
    most one item per :class:`ItemKey`. Both hold because items only enter
    through :meth:`insert_item`.
    """

    def __init__(self, tag_type: TagType):
        self._tag_type = tag_type
        self._items: List[TagItem] = []
        self._pictures: List[Picture] = []

    def __repr__(self):
        return (
            f"<Tag type={self._tag_type.value} items={len(self._items)} "
            f"pictures={len(self._pictures)}>"
        )

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return (
            self._tag_type == other._tag_type
            and self._items == other._items
            and self._pictures == other._pictures
        )

    @property
    def tag_type(self) -> TagType:
        return self._tag_type

    def item_count(self) -> int:
        return len(self._items)

    def picture_count(self) -> int:
        return len(self._pictures)

    # ---------------------------------------------------------------------------
    # Items
    # ---------------------------------------------------------------------------
    def items(self) -> List[TagItem]:
        """Return a copy of the stored items, in insertion order."""
        return list(self._items)

    def get_item_ref(self, item_key: ItemKey) -> Optional[TagItem]:
        """Return the item stored under ``item_key``, if any."""
        for item in self._items:
            if item.key is item_key:
                return item
        return None

    def get_text(self, item_key: ItemKey) -> Optional[str]:
        """Return the stored value of ``item_key`` as text, if it has one."""
        item = self.get_item_ref(item_key)
        if item is None:
            return None
        return item.text

    def insert_item(self, item: TagItem) -> bool:
        """Insert ``item``, replacing any existing item with the same key.

        Returns False, leaving the tag untouched, if the item's key cannot be
        mapped to this tag's type.
        """
        item = item.re_map(self._tag_type)
        if item is None:
            return False

        for i, existing in enumerate(self._items):
            if existing.key is item.key:
                self._items[i] = item
                break
        else:
            self._items.append(item)
        return True

    def insert_value(self, item_key: ItemKey, value: ItemValue) -> bool:
        """Shortcut for ``insert_item(TagItem(item_key, value))``."""
        return self.insert_item(TagItem(item_key, value))

    def remove_item(self, item_key: ItemKey) -> bool:
        """Remove the item stored under ``item_key``. Returns True if found."""
        for i, existing in enumerate(self._items):
            if existing.key is item_key:
                del self._items[i]
                return True
        return False

    # ---------------------------------------------------------------------------
    # Pictures
    # ---------------------------------------------------------------------------
    def pictures(self) -> List[Picture]:
        return list(self._pictures)

    def push_picture(self, picture: Picture) -> None:
        self._pictures.append(picture)

    def remove_picture_type(self, pic_type: PictureType) -> None:
        """Remove the first picture declared as ``pic_type``.

        Only one picture per type is expected, but this is not enforced.
        """
        for i, picture in enumerate(self._pictures):
            if picture.pic_type == pic_type:
                del self._pictures[i]
                return

    def remove_picture(self, picture: Picture) -> None:
        """Remove every picture equal to ``picture``."""
        self._pictures = [p for p in self._pictures if p != picture]

    # ---------------------------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------------------------
    def re_map(self, tag_type: TagType) -> "Tag":
        """
        Return a new Tag of ``tag_type`` holding every item that is valid for
        it. Items without a native key there are dropped. Pictures are carried
        over as-is.
        """
        tag = Tag(tag_type)
        for item in self._items:
            tag.insert_item(item)
        for picture in self._pictures:
            tag.push_picture(picture)
        return tag
