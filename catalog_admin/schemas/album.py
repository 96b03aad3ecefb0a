"""Album schemas: stored record, write requests and the table row."""

from datetime import datetime
from typing import Any, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from catalog_admin.schemas.common import StoredRecord, coerce_timestamp

AlbumType = Literal["album", "single", "ep"]


class Album(StoredRecord):
    """Stored album record. ``track_ids`` keeps the track order."""

    LEGACY_KEYS = {
        "album_name": "title",
        "artistId": "artist_id",
        "album_imageUrl": "image_url",
        "imageURL": "image_url",
        "songs_id": "track_ids",
        "trackList": "track_ids",
        "releaseDate": "release_date",
        "isActive": "is_active",
        "playCount": "play_count",
        "likeCount": "like_count",
    }

    title: Optional[str] = None
    artist_id: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    genres: list[str] = []
    release_date: Optional[datetime] = None
    track_ids: list[str] = []
    type: AlbumType = "album"
    is_active: Optional[bool] = None
    play_count: int = 0
    like_count: int = 0

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_type_is_album(cls, value: Any) -> Any:
        return value if value in ("album", "single", "ep") else "album"

    @field_validator("release_date", mode="before")
    @classmethod
    def _coerce_release_date(cls, value: Any) -> Any:
        return coerce_timestamp(value)


class AlbumCreate(BaseModel):
    """Schema for creating an album."""
    title: str = Field(..., min_length=1, max_length=255)
    artist_id: str = Field(..., min_length=1)
    description: str = ""
    image_url: str = ""
    genres: list[str] = []
    release_date: Optional[datetime] = None
    track_ids: list[str] = []
    type: AlbumType = "album"
    is_active: bool = True


class AlbumUpdate(BaseModel):
    """Schema for updating an album. Omitted fields are left unchanged."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    artist_id: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    genres: Optional[list[str]] = None
    release_date: Optional[datetime] = None
    track_ids: Optional[list[str]] = None
    type: Optional[AlbumType] = None
    is_active: Optional[bool] = None


class AlbumRow(BaseModel):
    """Album table row joined with its artist name."""
    id: str
    title: str
    artist_id: Optional[str] = None
    artist_name: str
    description: str = ""
    image_url: str = ""
    genres: list[str] = []
    release_date: datetime
    track_ids: list[str] = []
    track_count: int = 0
    type: AlbumType = "album"
    is_active: bool = True
    play_count: int = 0
    like_count: int = 0
