"""Format-independent cover art."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class PictureType(IntEnum):
    """Declared picture type, numbered as in ID3 APIC / FLAC PICTURE."""

    OTHER = 0
    ICON = 1
    OTHER_ICON = 2
    COVER_FRONT = 3
    COVER_BACK = 4
    LEAFLET = 5
    MEDIA = 6
    LEAD_ARTIST = 7
    ARTIST = 8
    CONDUCTOR = 9
    BAND = 10
    COMPOSER = 11
    LYRICIST = 12
    RECORDING_LOCATION = 13
    DURING_RECORDING = 14
    DURING_PERFORMANCE = 15
    SCREEN_CAPTURE = 16
    BRIGHT_FISH = 17
    ILLUSTRATION = 18
    BAND_LOGOTYPE = 19
    PUBLISHER_LOGOTYPE = 20

    @classmethod
    def from_code(cls, code: int) -> "PictureType":
        try:
            return cls(code)
        except ValueError:
            return cls.OTHER


class MimeType(str, Enum):
    """Image formats a cover can be stored as."""

    PNG = "image/png"
    JPEG = "image/jpeg"
    TIFF = "image/tiff"
    BMP = "image/bmp"
    GIF = "image/gif"

    @classmethod
    def from_str(cls, mime: str) -> Optional["MimeType"]:
        """Parse a MIME string, tolerating the common ``image/jpg`` spelling."""
        mime = mime.strip().lower()
        if mime == "image/jpg":
            mime = "image/jpeg"
        try:
            return cls(mime)
        except ValueError:
            return None

    @classmethod
    def sniff(cls, data: bytes) -> Optional["MimeType"]:
        """Guess the format from the image's magic bytes."""
        if data.startswith(b"\x89PNG\r\n\x1a\n"):
            return cls.PNG
        if data.startswith(b"\xff\xd8\xff"):
            return cls.JPEG
        if data.startswith((b"II*\x00", b"MM\x00*")):
            return cls.TIFF
        if data.startswith(b"BM"):
            return cls.BMP
        if data.startswith((b"GIF87a", b"GIF89a")):
            return cls.GIF
        return None


@dataclass(frozen=True)
class Picture:
    """Picture data plus its declared type and MIME type."""

    data: bytes
    mime_type: MimeType = MimeType.JPEG
    pic_type: PictureType = PictureType.COVER_FRONT
    description: str = ""

    @classmethod
    def from_data(
        cls,
        data: bytes,
        pic_type: PictureType = PictureType.COVER_FRONT,
        description: str = "",
    ) -> "Picture":
        """Build a picture, detecting the MIME type from the data."""
        return cls(data, MimeType.sniff(data) or MimeType.JPEG, pic_type, description)
