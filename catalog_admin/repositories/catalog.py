from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_admin.repositories.base import Repository
from catalog_admin.repositories.collections import ALBUMS, ARTISTS, SONGS, USERS
from catalog_admin.repositories.document_repository import DocumentRepository
from catalog_admin.repositories.memory import MemoryRepository
from catalog_admin.schemas.album import Album
from catalog_admin.schemas.artist import Artist
from catalog_admin.schemas.song import Song
from catalog_admin.schemas.user import User


@dataclass(frozen=True)
class Catalog:
    """The four catalog collections, passed explicitly to whoever needs them."""

    users: Repository[User]
    artists: Repository[Artist]
    songs: Repository[Song]
    albums: Repository[Album]

    @classmethod
    def in_memory(cls, **kwargs) -> "Catalog":
        return cls(
            users=MemoryRepository(USERS, **kwargs),
            artists=MemoryRepository(ARTISTS, **kwargs),
            songs=MemoryRepository(SONGS, **kwargs),
            albums=MemoryRepository(ALBUMS, **kwargs),
        )

    @classmethod
    def from_session_factory(
        cls,
        session_factory: async_sessionmaker[AsyncSession],
        **kwargs,
    ) -> "Catalog":
        return cls(
            users=DocumentRepository(USERS, session_factory, **kwargs),
            artists=DocumentRepository(ARTISTS, session_factory, **kwargs),
            songs=DocumentRepository(SONGS, session_factory, **kwargs),
            albums=DocumentRepository(ALBUMS, session_factory, **kwargs),
        )

    def by_name(self, collection: str) -> Repository:
        return {
            USERS.name: self.users,
            ARTISTS.name: self.artists,
            SONGS.name: self.songs,
            ALBUMS.name: self.albums,
        }[collection]
