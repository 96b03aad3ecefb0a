"""Per-collection settings shared by every repository implementation."""

import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from catalog_admin.schemas.album import Album
from catalog_admin.schemas.artist import Artist
from catalog_admin.schemas.common import StoredRecord
from catalog_admin.schemas.song import Song
from catalog_admin.schemas.user import User

RecordT = TypeVar("RecordT", bound=StoredRecord)


def new_record_id() -> str:
    """Opaque identifier for a new document."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class CollectionDefinition(Generic[RecordT]):
    """
    How one collection is stored and read.

    ``search_keys`` are the document keys the prefix lookup matches on,
    canonical key first, then legacy spellings of the same field.
    ``initial_fields`` returns the server-assigned fields a create request
    never carries (counters, empty lists).
    """

    name: str
    record_type: type[RecordT]
    search_keys: tuple[str, ...]
    initial_fields: Callable[[], dict[str, Any]] = field(default=dict)

    @property
    def search_field(self) -> str:
        return self.search_keys[0]

    def to_record(self, record_id: str, data: dict[str, Any]) -> RecordT:
        return self.record_type.from_document(record_id, data)


USERS: CollectionDefinition[User] = CollectionDefinition(
    name="users",
    record_type=User,
    search_keys=("display_name", "displayName", "username"),
    initial_fields=lambda: {
        "favorite_artists": [],
        "favorite_songs": [],
        "favorite_albums": [],
    },
)

ARTISTS: CollectionDefinition[Artist] = CollectionDefinition(
    name="artists",
    record_type=Artist,
    search_keys=("name", "artist_name"),
    initial_fields=lambda: {"love_count": 0},
)

SONGS: CollectionDefinition[Song] = CollectionDefinition(
    name="songs",
    record_type=Song,
    search_keys=("title", "song_name"),
    initial_fields=lambda: {"play_count": 0, "like_count": 0},
)

ALBUMS: CollectionDefinition[Album] = CollectionDefinition(
    name="albums",
    record_type=Album,
    search_keys=("title", "album_name"),
    initial_fields=lambda: {"play_count": 0, "like_count": 0},
)
