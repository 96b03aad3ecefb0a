from datetime import datetime
from typing import Any, Literal, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from catalog_admin.schemas.common import StoredRecord, coerce_timestamp

Role = Literal["admin", "user"]


class User(StoredRecord):
    """Stored user record."""

    LEGACY_KEYS = {
        "username": "display_name",
        "displayName": "display_name",
        "phone": "phone_number",
        "phoneNumber": "phone_number",
        "photoUrl": "photo_url",
        "photoURL": "photo_url",
        "isActive": "is_active",
        "lastLoginAt": "last_login_at",
        "favoriteArtists": "favorite_artists",
        "favoriteSongs": "favorite_songs",
        "favoriteAlbums": "favorite_albums",
    }

    email: str = ""
    display_name: str = ""
    phone_number: Optional[str] = None
    photo_url: Optional[str] = None
    bio: Optional[str] = None
    position: Optional[str] = None
    role: Role = "user"
    is_active: bool = True
    last_login_at: Optional[datetime] = None
    favorite_artists: list[str] = []
    favorite_songs: list[str] = []
    favorite_albums: list[str] = []

    @field_validator("role", mode="before")
    @classmethod
    def _unknown_role_is_user(cls, value: Any) -> Any:
        # Only two roles exist; anything else stored is treated as a plain user
        return value if value in ("admin", "user") else "user"

    @field_validator("last_login_at", mode="before")
    @classmethod
    def _coerce_last_login(cls, value: Any) -> Any:
        return coerce_timestamp(value)


class UserCreate(BaseModel):
    """Schema for creating a user."""
    email: EmailStr
    display_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = ""
    photo_url: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=500)
    position: Optional[str] = None
    role: Role = "user"
    is_active: bool = True


class UserUpdate(BaseModel):
    """Schema for updating a user. Omitted fields are left unchanged."""
    email: Optional[EmailStr] = None
    display_name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone_number: Optional[str] = None
    photo_url: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=500)
    position: Optional[str] = None
    role: Optional[Role] = None
    is_active: Optional[bool] = None
