"""Pytest configuration and fixtures.

The file fixtures build the smallest containers mutagen accepts, so every
adapter can be exercised against a real file without shipping audio samples.
"""

import struct
from pathlib import Path

import pytest
from mutagen._vorbis import VComment
from mutagen.ogg import OggPage

from tagshift.tag import MimeType, Picture, PictureType

PNG_DATA = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24
JPEG_DATA = b"\xff\xd8\xff\xe0" + b"\x00" * 24


def build_wav() -> bytes:
    fmt = struct.pack("<HHIIHH", 1, 2, 44100, 44100 * 4, 4, 16)
    body = b"WAVE"
    body += b"fmt " + struct.pack("<I", len(fmt)) + fmt
    body += b"data" + struct.pack("<I", 8) + b"\x00" * 8
    return b"RIFF" + struct.pack("<I", len(body)) + body


def build_aiff() -> bytes:
    # 80-bit extended 44100.0
    sample_rate = b"\x40\x0e\xac\x44\x00\x00\x00\x00\x00\x00"
    comm = struct.pack(">hLh", 2, 0, 16) + sample_rate
    body = b"AIFF"
    body += b"COMM" + struct.pack(">I", len(comm)) + comm
    body += b"SSND" + struct.pack(">I", 8) + b"\x00" * 8
    return b"FORM" + struct.pack(">I", len(body)) + body


def build_flac() -> bytes:
    streaminfo = struct.pack(">HH", 4096, 4096) + b"\x00" * 6
    # 20 bits sample rate, 3 bits channels - 1, 5 bits bps - 1, 36 bits samples
    streaminfo += struct.pack(">Q", (44100 << 44) | (1 << 41) | (15 << 36))
    streaminfo += b"\x00" * 16
    return b"fLaC" + b"\x80" + struct.pack(">I", len(streaminfo))[1:] + streaminfo


def _atom(name: bytes, payload: bytes) -> bytes:
    return struct.pack(">I", 8 + len(payload)) + name + payload


def build_mp4() -> bytes:
    ftyp = _atom(b"ftyp", b"M4A " + struct.pack(">I", 0) + b"M4A isom")
    # version 0 mvhd: created, modified, timescale 1000, duration 0, then the
    # rate/volume/matrix block mutagen skips
    mvhd = _atom(b"mvhd", b"\x00" * 12 + struct.pack(">II", 1000, 0) + b"\x00" * 80)
    return ftyp + _atom(b"moov", mvhd) + _atom(b"mdat", b"\x00" * 8)


def _ogg_stream(packets_per_page, last_position) -> bytes:
    pages = []
    for sequence, packets in enumerate(packets_per_page):
        page = OggPage()
        page.serial = 1
        page.sequence = sequence
        page.packets = list(packets)
        page.first = sequence == 0
        page.last = sequence == len(packets_per_page) - 1
        page.position = last_position if page.last else 0
        pages.append(page)
    return b"".join(page.write() for page in pages)


def build_opus() -> bytes:
    head = b"OpusHead" + struct.pack("<BBHIhB", 1, 2, 312, 48000, 0, 0)
    tags = b"OpusTags" + VComment().write(framing=False)
    return _ogg_stream([[head], [tags], [b"\xf8\xff\xfe"]], 960 + 312)


def build_vorbis() -> bytes:
    ident = b"\x01vorbis" + struct.pack("<IBIiii", 0, 2, 44100, 0, 128000, 0) + b"\xb8\x01"
    comment = b"\x03vorbis" + VComment().write()
    setup = b"\x05vorbis" + b"\x00" * 8
    return _ogg_stream([[ident], [comment, setup], [b"\x00" * 4]], 1024)


def _write(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    return path


@pytest.fixture
def wav_file(tmp_path):
    """A PCM WAV file without an INFO list."""
    return _write(tmp_path / "track.wav", build_wav())


@pytest.fixture
def aiff_file(tmp_path):
    """An AIFF file without text chunks."""
    return _write(tmp_path / "track.aiff", build_aiff())


@pytest.fixture
def flac_file(tmp_path):
    """A FLAC file holding only a STREAMINFO block."""
    return _write(tmp_path / "track.flac", build_flac())


@pytest.fixture
def opus_file(tmp_path):
    """An Ogg Opus stream with an empty comment header."""
    return _write(tmp_path / "track.opus", build_opus())


@pytest.fixture
def ogg_file(tmp_path):
    """An Ogg Vorbis stream with an empty comment header."""
    return _write(tmp_path / "track.ogg", build_vorbis())


@pytest.fixture
def m4a_file(tmp_path):
    """An MP4 file with a movie header and no track or metadata atoms."""
    return _write(tmp_path / "track.m4a", build_mp4())


@pytest.fixture
def mp3_file(tmp_path):
    """An untagged file with an .mp3 extension."""
    return _write(tmp_path / "track.mp3", b"\x00" * 128)


@pytest.fixture
def ape_file(tmp_path):
    """An untagged file with an .ape extension."""
    return _write(tmp_path / "track.ape", b"\x00" * 128)


@pytest.fixture
def png_cover():
    return Picture(PNG_DATA, MimeType.PNG, PictureType.COVER_FRONT, "front")


@pytest.fixture
def jpeg_cover():
    return Picture(JPEG_DATA, MimeType.JPEG, PictureType.COVER_FRONT)


@pytest.fixture
def config_file(tmp_path):
    """Path for a config file that does not exist yet."""
    return tmp_path / "config" / "config.toml"
