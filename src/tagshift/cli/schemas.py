"""Pydantic schemas for JSON output validation.

Every ``--json`` output of the CLI goes through one of these models, so the
documents have a fixed, validated shape:
- show: ShowResponse | ErrorResponse
- convert: ConvertResponse | ErrorResponse
- keys: KeysResponse | ErrorResponse
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..tag import AnyTag, Picture


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input", "read_failed")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "unsupported_format", "read_failed", "write_failed"],
    )
    message: str = Field(description="Human-readable error description")


class CoverInfo(BaseModel):
    """Summary of a cover picture (the image data itself is not dumped)."""

    mime_type: str = Field(description="MIME type of the image")
    picture_type: str = Field(description="Declared picture type", examples=["COVER_FRONT"])
    description: str = Field(default="", description="Picture description")
    size: int = Field(ge=0, description="Image size in bytes")

    @classmethod
    def from_picture(cls, picture: Picture) -> "CoverInfo":
        return cls(
            mime_type=picture.mime_type.value,
            picture_type=picture.pic_type.name,
            description=picture.description,
            size=len(picture.data),
        )


class TagFields(BaseModel):
    """The common fields of a tag."""

    title: Optional[str] = None
    artists: Optional[List[str]] = None
    year: Optional[int] = None
    album: Optional[str] = None
    album_artists: Optional[List[str]] = None
    track_number: Optional[int] = Field(default=None, ge=0)
    total_tracks: Optional[int] = Field(default=None, ge=0)
    disc_number: Optional[int] = Field(default=None, ge=0)
    total_discs: Optional[int] = Field(default=None, ge=0)
    cover: Optional[CoverInfo] = None

    @classmethod
    def from_anytag(cls, anytag: AnyTag) -> "TagFields":
        return cls(
            title=anytag.title,
            artists=anytag.artists,
            year=anytag.year,
            album=anytag.album,
            album_artists=anytag.album_artists,
            track_number=anytag.track_number,
            total_tracks=anytag.total_tracks,
            disc_number=anytag.disc_number,
            total_discs=anytag.total_discs,
            cover=CoverInfo.from_picture(anytag.cover) if anytag.cover else None,
        )


# ============================================================================
# Command Responses
# ============================================================================


class ShowResponse(BaseModel):
    """Response of the show command."""

    status: Literal["success"] = "success"
    path: str = Field(description="Path of the audio file")
    tag_type: str = Field(description="Tag format read from the file", examples=["id3v2", "opus"])
    fields: TagFields = Field(description="Common fields")
    items: Dict[str, str] = Field(
        default_factory=dict,
        description="Every mapped text item, keyed by canonical key name",
    )
    pictures: List[CoverInfo] = Field(default_factory=list, description="All stored pictures")


class ConvertResponse(BaseModel):
    """Response of the convert command."""

    status: Literal["success"] = "success"
    source: str = Field(description="Path of the source file")
    destination: str = Field(description="Path of the destination file")
    source_type: str = Field(description="Tag format of the source")
    destination_type: str = Field(description="Tag format of the destination")
    copied: List[str] = Field(description="Common fields copied from the source")
    dropped: List[str] = Field(
        default_factory=list,
        description="Fields the destination format cannot store",
    )
    dry_run: bool = Field(default=False, description="True if nothing was written")


class KeysResponse(BaseModel):
    """Response of the keys command."""

    status: Literal["success"] = "success"
    mappings: Dict[str, Dict[str, str]] = Field(
        description="Native key per canonical key, for each tag type",
    )
