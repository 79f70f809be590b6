"""ID3v2 adapter (MP3 and anything else carrying a bare ID3v2 header)."""

import copy
import logging
from typing import List, Optional

import mutagen.id3
from mutagen.id3 import APIC, COMM, ID3, TXXX, USLT, Encoding, Frames, ID3NoHeaderError

from ..constants import DEFAULT_ID3V2_VERSION, ID3_TOTAL_DISCS_DESC, ID3_TOTAL_TRACKS_DESC, SEP_ARTIST
from ..tag import ItemKey, MimeType, Picture, PictureType, TagType
from .base import AudioTag, PackedNumbersMixin

logger = logging.getLogger(__name__)


class Id3v2Tag(PackedNumbersMixin, AudioTag):
    """
    ID3v2 frames held in a :class:`mutagen.id3.ID3`.

    Native keys are frame ids, or ``TXXX:<description>`` for user text frames.
    COMM and USLT are written with an empty description and language ``eng``.
    """

    tag_type = TagType.ID3V2
    ORPHAN_TOTAL_KEYS = {
        ItemKey.TRACK_TOTAL: f"TXXX:{ID3_TOTAL_TRACKS_DESC}",
        ItemKey.DISC_TOTAL: f"TXXX:{ID3_TOTAL_DISCS_DESC}",
    }

    def __init__(self, inner=None, artist_separator: str = SEP_ARTIST, v2_version: int = DEFAULT_ID3V2_VERSION):
        super().__init__(inner, artist_separator)
        self.v2_version = v2_version

    @classmethod
    def default_inner(cls):
        return ID3()

    @classmethod
    def read_inner(cls, path):
        try:
            return ID3(path)
        except ID3NoHeaderError:
            logger.debug("No ID3v2 header in %s, starting from an empty tag", path)
            return ID3()

    def write_to(self, filething) -> None:
        tags = self.inner
        if self.v2_version == 3:
            # mutagen wants 2.3 frames in place before saving as 2.3
            tags = copy.deepcopy(self.inner)
            tags.update_to_v23()
        tags.save(filething, v2_version=self.v2_version)

    # ---------------------------------------------------------------------------
    # Native primitives
    # ---------------------------------------------------------------------------
    def get_first(self, key: str) -> Optional[str]:
        frames = self.inner.getall(key)
        # prefer the unnamed comment/lyrics frame over tool-specific ones
        frames.sort(key=lambda frame: getattr(frame, "desc", "") != "")
        for frame in frames:
            for value in _frame_values(frame):
                if value:
                    return value
        return None

    def set_first(self, key: str, value: str) -> None:
        frame_id, _, desc = key.partition(":")
        if frame_id == "TXXX":
            frame = TXXX(encoding=Encoding.UTF8, desc=desc, text=[value])
        elif frame_id == "COMM":
            frame = COMM(encoding=Encoding.UTF8, lang="eng", desc="", text=[value])
        elif frame_id == "USLT":
            frame = USLT(encoding=Encoding.UTF8, lang="eng", desc="", text=value)
        else:
            frame = Frames[frame_id](encoding=Encoding.UTF8, text=[value])
        self.inner.delall(key)
        self.inner.add(frame)

    def remove(self, key: str) -> None:
        self.inner.delall(key)

    # ---------------------------------------------------------------------------
    # Pictures
    # ---------------------------------------------------------------------------
    def pictures(self) -> List[Picture]:
        pictures = []
        for frame in self.inner.getall("APIC"):
            mime_type = MimeType.from_str(frame.mime) or MimeType.sniff(frame.data) or MimeType.JPEG
            pictures.append(
                Picture(
                    data=frame.data,
                    mime_type=mime_type,
                    pic_type=PictureType.from_code(frame.type),
                    description=frame.desc,
                )
            )
        return pictures

    def set_picture(self, picture: Picture) -> None:
        """Store ``picture`` as an APIC frame.

        ID3 allows one APIC frame per description, so a picture whose
        description is already used by another type replaces it.
        """
        self.remove_pictures(picture.pic_type)
        self.inner.add(
            APIC(
                encoding=Encoding.UTF8,
                mime=picture.mime_type.value,
                type=mutagen.id3.PictureType(int(picture.pic_type)),
                desc=picture.description,
                data=picture.data,
            )
        )

    def remove_pictures(self, pic_type: PictureType) -> None:
        for key, frame in list(self.inner.items()):
            if key.startswith("APIC") and frame.type == pic_type:
                del self.inner[key]


def _frame_values(frame) -> List[str]:
    if isinstance(frame, mutagen.id3.TCON):
        return frame.genres
    text = frame.text
    if isinstance(text, str):
        return [text]
    return [str(value) for value in text]
