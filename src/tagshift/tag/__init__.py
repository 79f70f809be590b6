"""
Tag subpackage - the canonical, format-independent metadata model.

This package provides the vocabulary (:class:`ItemKey`, :class:`TagType`),
the format-bound :class:`Tag` container and the :class:`AnyTag` pivot used by
the format adapters in :mod:`tagshift.formats`.
"""

from .anytag import AnyTag
from .core import Tag
from .errors import TagError, UnsupportedFormatError, UnsupportedOperationError
from .item import Binary, ItemValue, Locator, TagItem, Text
from .keys import ItemKey, TagType
from .mappings import setup_all_mappings
from .picture import MimeType, Picture, PictureType

# Initialize all native key tables
setup_all_mappings()

__all__ = [
    "AnyTag",
    "Binary",
    "ItemKey",
    "ItemValue",
    "Locator",
    "MimeType",
    "Picture",
    "PictureType",
    "Tag",
    "TagError",
    "TagItem",
    "TagType",
    "Text",
    "UnsupportedFormatError",
    "UnsupportedOperationError",
]
