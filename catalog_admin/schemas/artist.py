"""Artist schemas: stored record, write requests and the table row."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from catalog_admin.schemas.common import StoredRecord


class Artist(StoredRecord):
    """Stored artist record. ``love_count`` is the follower counter."""

    LEGACY_KEYS = {
        "artist_name": "name",
        "artist_images": "image_url",
        "imageURL": "image_url",
        "isActive": "is_active",
        "socialLinks": "social_links",
        "loveCount": "love_count",
        "followersCount": "love_count",
    }

    name: str = ""
    bio: str = ""
    image_url: str = ""
    country: Optional[str] = None
    genres: list[str] = []
    social_links: dict[str, str] = {}
    is_active: bool = True
    love_count: int = 0


class ArtistCreate(BaseModel):
    """Schema for creating an artist."""
    name: str = Field(..., min_length=1, max_length=255)
    bio: str = ""
    image_url: str = ""
    country: Optional[str] = None
    genres: list[str] = []
    social_links: dict[str, str] = {}
    is_active: bool = True


class ArtistUpdate(BaseModel):
    """Schema for updating an artist. Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    country: Optional[str] = None
    genres: Optional[list[str]] = None
    social_links: Optional[dict[str, str]] = None
    is_active: Optional[bool] = None


class ArtistRow(BaseModel):
    """Artist table row with counts derived from songs and albums."""
    id: str
    name: str
    bio: str
    image_url: str
    country: Optional[str] = None
    genres: list[str] = []
    social_links: dict[str, str] = {}
    is_active: bool = True
    songs_count: int = 0
    albums_count: int = 0
    followers_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
