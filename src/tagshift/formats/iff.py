"""
Text chunk adapters for IFF containers: RIFF INFO (WAV) and AIFF.

mutagen only exposes ID3 for these containers, so the text chunks are read
and rewritten through its low-level IFF chunk layer. The native structure is
an :class:`TextChunks` list of ``(fourcc, text)`` pairs in file order.
Neither format has anywhere to put a picture.
"""

import logging
import struct
from contextlib import contextmanager
from typing import Iterator, List, Optional

# mutagen._riff is private. RiffFile and the chunk API used here (subchunks,
# delete, insert_chunk, name) are checked against mutagen 1.48, the upper
# bound pinned in pyproject.toml
from mutagen._riff import RiffFile
from mutagen.aiff import AIFFFile

from ..constants import ENCODING
from ..tag import TagType
from .base import AudioTag

logger = logging.getLogger(__name__)

INFO_LIST_NAME = "INFO"
AIFF_TEXT_IDS = ("NAME", "AUTH", "(c) ", "ANNO")


class TextChunks(list):
    """``(fourcc, text)`` pairs. A fourcc may appear more than once."""

    def values_of(self, fourcc: str) -> List[str]:
        return [text for chunk_id, text in self if chunk_id == fourcc]

    def discard(self, fourcc: str) -> None:
        self[:] = [(chunk_id, text) for chunk_id, text in self if chunk_id != fourcc]


def decode_text(data: bytes) -> str:
    """Decode chunk text up to the first NUL. Falls back to latin-1."""
    data = data.split(b"\x00", 1)[0]
    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError:
        return data.decode("latin-1")


@contextmanager
def open_container(filething, mode: str) -> Iterator:
    """Yield a binary file object for a path or an already open file."""
    if hasattr(filething, "read"):
        yield filething
    else:
        with open(filething, mode) as fileobj:
            yield fileobj


class IffTextTag(AudioTag):
    """Shared key/value handling over :class:`TextChunks`."""

    supports_cover = False

    @classmethod
    def default_inner(cls):
        return TextChunks()

    def get_first(self, key: str) -> Optional[str]:
        for value in self.inner.values_of(key):
            if value:
                return value
        return None

    def set_first(self, key: str, value: str) -> None:
        self.inner.discard(key)
        self.inner.append((key, value))

    def remove(self, key: str) -> None:
        self.inner.discard(key)


class RiffInfoTag(IffTextTag):
    """WAV ``LIST``/``INFO`` chunk. Values are NUL-terminated strings."""

    tag_type = TagType.RIFF_INFO

    @classmethod
    def read_inner(cls, path):
        chunks = TextChunks()
        with open_container(path, "rb") as fileobj:
            riff = RiffFile(fileobj)
            for chunk in riff.root.subchunks():
                if chunk.id != "LIST" or chunk.name != INFO_LIST_NAME:
                    continue
                for sub in chunk.subchunks():
                    chunks.append((sub.id.ljust(4), decode_text(sub.read())))
        return chunks

    def write_to(self, filething) -> None:
        with open_container(filething, "r+b") as fileobj:
            riff = RiffFile(fileobj)
            for chunk in list(riff.root.subchunks()):
                if chunk.id == "LIST" and chunk.name == INFO_LIST_NAME:
                    chunk.delete()
            if self.inner:
                riff.insert_chunk("LIST", self._render())

    def _render(self) -> bytes:
        data = INFO_LIST_NAME.encode("ascii")
        for chunk_id, text in self.inner:
            payload = text.encode(ENCODING) + b"\x00"
            data += struct.pack("<4sI", chunk_id.encode("ascii"), len(payload))
            data += payload
            if len(payload) % 2:
                data += b"\x00"
        return data


class AiffTextTag(IffTextTag):
    """AIFF NAME/AUTH/(c)/ANNO chunks. ANNO may repeat."""

    tag_type = TagType.AIFF_TEXT

    @classmethod
    def read_inner(cls, path):
        chunks = TextChunks()
        with open_container(path, "rb") as fileobj:
            aiff = AIFFFile(fileobj)
            for chunk in aiff.root.subchunks():
                # mutagen strips the trailing space from "(c) "
                chunk_id = chunk.id.ljust(4)
                if chunk_id in AIFF_TEXT_IDS:
                    chunks.append((chunk_id, decode_text(chunk.read())))
        return chunks

    def write_to(self, filething) -> None:
        with open_container(filething, "r+b") as fileobj:
            aiff = AIFFFile(fileobj)
            for chunk in list(aiff.root.subchunks()):
                if chunk.id.ljust(4) in AIFF_TEXT_IDS:
                    chunk.delete()
            for chunk_id, text in self.inner:
                aiff.insert_chunk(chunk_id, text.encode(ENCODING))
