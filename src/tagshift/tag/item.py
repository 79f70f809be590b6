"""Tag items: an :class:`ItemKey` paired with an :class:`ItemValue`.

NOTE: The :class:`Locator` and :class:`Binary` values are only meaningful for
APE tags. Writing either to another tag type is not an error, the value is
just ignored.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .keys import ItemKey, TagType


@dataclass(frozen=True)
class Text:
    """Any UTF-8 encoded text."""

    value: str


@dataclass(frozen=True)
class Locator:
    """(APE only) A UTF-8 encoded locator of external information."""

    value: str


@dataclass(frozen=True)
class Binary:
    """(APE only) Binary information, most likely a picture."""

    value: bytes


ItemValue = Union[Text, Locator, Binary]


@dataclass(frozen=True)
class TagItem:
    """A key/value pair stored in a :class:`~tagshift.tag.core.Tag`."""

    key: ItemKey
    value: ItemValue

    @classmethod
    def new_checked(
        cls, tag_type: TagType, key: ItemKey, value: ItemValue
    ) -> Optional["TagItem"]:
        """Create an item only if ``key`` maps to a native key of ``tag_type``.

        It is pointless to do this before :meth:`Tag.insert_item`, which does
        the same check itself.
        """
        if key.map_key(tag_type) is None:
            return None
        return cls(key, value)

    def re_map(self, tag_type: TagType) -> Optional["TagItem"]:
        """Return this item if it is valid for ``tag_type``, otherwise None."""
        if self.key.map_key(tag_type) is None:
            return None
        return self

    @property
    def text(self) -> Optional[str]:
        """The value as a string, or None for binary values."""
        if isinstance(self.value, Binary):
            return None
        return self.value.value
