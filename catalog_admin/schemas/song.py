"""Song schemas: stored record, write requests and the table row."""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from catalog_admin.schemas.common import StoredRecord, coerce_timestamp


class Song(StoredRecord):
    """
    Stored song record.

    Older documents hold a single artist id string under ``artist_id``;
    it is read as a one-element ``artist_ids`` list.
    """

    LEGACY_KEYS = {
        "song_name": "title",
        "artist_id": "artist_ids",
        "artistId": "artist_ids",
        "albumId": "album_id",
        "song_imageUrl": "image_url",
        "imageURL": "image_url",
        "audioURL": "audio_url",
        "love_count": "like_count",
        "likeCount": "like_count",
        "playCount": "play_count",
        "releaseDate": "release_date",
        "isActive": "is_active",
        "isExplicit": "is_explicit",
    }

    title: Optional[str] = None
    artist_ids: list[str] = []
    album_id: Optional[str] = None
    duration: Optional[float] = None  # seconds
    audio_url: str = ""
    image_url: str = ""
    genres: list[str] = []
    release_date: Optional[datetime] = None
    year: Optional[int] = None
    country: Optional[str] = None
    lyrics: Optional[str] = None
    is_active: bool = True
    is_explicit: bool = False
    play_count: int = 0
    like_count: int = 0

    @field_validator("artist_ids", mode="before")
    @classmethod
    def _single_artist_to_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value] if value else []
        return value

    @field_validator("release_date", mode="before")
    @classmethod
    def _coerce_release_date(cls, value: Any) -> Any:
        return coerce_timestamp(value)

    @property
    def primary_artist_id(self) -> Optional[str]:
        """The first listed artist; the only one shown in tables."""
        return self.artist_ids[0] if self.artist_ids else None


class SongCreate(BaseModel):
    """Schema for creating a song."""
    title: str = Field(..., min_length=1, max_length=255)
    artist_ids: list[str] = Field(..., min_length=1)
    album_id: Optional[str] = None
    duration: Optional[float] = Field(None, ge=0)
    audio_url: str = ""
    image_url: str = ""
    genres: list[str] = []
    release_date: Optional[datetime] = None
    year: Optional[int] = Field(None, ge=1, le=9999)
    country: Optional[str] = None
    lyrics: Optional[str] = None
    is_active: bool = True
    is_explicit: bool = False


class SongUpdate(BaseModel):
    """Schema for updating a song. Omitted fields are left unchanged."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    artist_ids: Optional[list[str]] = Field(None, min_length=1)
    album_id: Optional[str] = None
    duration: Optional[float] = Field(None, ge=0)
    audio_url: Optional[str] = None
    image_url: Optional[str] = None
    genres: Optional[list[str]] = None
    release_date: Optional[datetime] = None
    year: Optional[int] = Field(None, ge=1, le=9999)
    country: Optional[str] = None
    lyrics: Optional[str] = None
    is_active: Optional[bool] = None
    is_explicit: Optional[bool] = None


class SongRow(BaseModel):
    """Song table row joined with its primary artist and album names."""
    id: str
    title: str
    artist_id: Optional[str] = None
    artist_ids: list[str] = []
    artist_name: str
    album_id: Optional[str] = None
    album_name: Optional[str] = None
    duration: Optional[float] = None
    audio_url: str = ""
    image_url: str = ""
    genres: list[str] = []
    release_date: datetime
    year: Optional[int] = None
    country: Optional[str] = None
    lyrics: Optional[str] = None
    is_active: bool = True
    is_explicit: bool = False
    play_count: int = 0
    like_count: int = 0
