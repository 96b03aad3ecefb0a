"""
Read-side aggregation for the admin tables and dashboard.

Every listing reloads the collections it needs (concurrently) and joins
them in memory. Nothing is cached, so counts and names reflect the store
at call time. Store errors propagate to the caller unchanged; a record
missing a field degrades to a default instead of failing the listing.
"""
import asyncio
import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Optional

from catalog_admin.repositories.catalog import Catalog
from catalog_admin.schemas.album import Album, AlbumRow
from catalog_admin.schemas.artist import Artist, ArtistRow
from catalog_admin.schemas.common import EPOCH, UNKNOWN_ALBUM, UNKNOWN_ARTIST, StoredRecord
from catalog_admin.schemas.dashboard import (
    DanglingReference,
    DashboardSummary,
    IntegrityReport,
    LatestEntries,
    TrackMembershipMismatch,
)
from catalog_admin.schemas.song import Song, SongRow
from catalog_admin.schemas.user import User
from catalog_admin.services.search import filter_by_term

logger = logging.getLogger(__name__)


def year_start(year: Optional[int]) -> Optional[datetime]:
    """January 1st (UTC) of ``year``, or None when it is not a usable year."""
    if year is None or not 1 <= year <= 9999:
        return None
    return datetime(year, 1, 1, tzinfo=timezone.utc)


def song_release_date(song: Song) -> datetime:
    """Stored year first, then the explicit release date, else the epoch."""
    return year_start(song.year) or song.release_date or EPOCH


def _latest(records: list, label) -> Optional[str]:
    """Display label of the most recently created record."""
    if not records:
        return None
    newest = max(records, key=lambda record: record.created_at or EPOCH)
    return label(newest)


class CatalogService:
    """Builds denormalized view rows from the catalog repositories."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    # ============== Artists ==============

    async def list_artists(self) -> list[ArtistRow]:
        """Artists with song/album counts recomputed from the current collections."""
        artists, songs, albums = await asyncio.gather(
            self.catalog.artists.list_all(),
            self.catalog.songs.list_all(),
            self.catalog.albums.list_all(),
        )

        songs_per_artist: Counter[str] = Counter()
        for song in songs:
            # A song lists an artist at most once for counting purposes
            songs_per_artist.update(set(song.artist_ids))
        albums_per_artist = Counter(album.artist_id for album in albums if album.artist_id)

        logger.debug(
            f"[CatalogService] Listing {len(artists)} artists "
            f"against {len(songs)} songs and {len(albums)} albums"
        )
        return [
            self._artist_row(artist, songs_per_artist[artist.id], albums_per_artist[artist.id])
            for artist in artists
        ]

    @staticmethod
    def _artist_row(artist: Artist, songs_count: int, albums_count: int) -> ArtistRow:
        return ArtistRow(
            id=artist.id,
            name=artist.name,
            bio=artist.bio,
            image_url=artist.image_url,
            country=artist.country,
            genres=artist.genres,
            social_links=artist.social_links,
            is_active=artist.is_active,
            songs_count=songs_count,
            albums_count=albums_count,
            followers_count=artist.love_count or 0,
            created_at=artist.created_at,
            updated_at=artist.updated_at,
        )

    # ============== Albums ==============

    async def list_albums(self) -> list[AlbumRow]:
        """Albums joined with their artist's name."""
        artists, albums = await asyncio.gather(
            self.catalog.artists.list_all(),
            self.catalog.albums.list_all(),
        )
        artist_names = {artist.id: artist.name for artist in artists}
        return [self._album_row(album, artist_names) for album in albums]

    @staticmethod
    def _album_row(album: Album, artist_names: dict[str, str]) -> AlbumRow:
        return AlbumRow(
            id=album.id,
            title=album.title or UNKNOWN_ALBUM,
            artist_id=album.artist_id,
            artist_name=artist_names.get(album.artist_id) or UNKNOWN_ARTIST,
            description=album.description or "",
            image_url=album.image_url or "",
            genres=album.genres,
            release_date=album.release_date or EPOCH,
            track_ids=album.track_ids,
            track_count=len(album.track_ids),
            type=album.type,
            # Absence of the flag means active
            is_active=album.is_active is not False,
            play_count=album.play_count,
            like_count=album.like_count,
        )

    # ============== Songs ==============

    async def list_songs(self) -> list[SongRow]:
        """
        Songs joined with artist and album names.

        Only the first artist id is shown, even when a song lists several.
        """
        artists, albums, songs = await asyncio.gather(
            self.catalog.artists.list_all(),
            self.catalog.albums.list_all(),
            self.catalog.songs.list_all(),
        )
        artist_names = {artist.id: artist.name for artist in artists}
        album_titles = {album.id: album.title or UNKNOWN_ALBUM for album in albums}
        return [self._song_row(song, artist_names, album_titles) for song in songs]

    @staticmethod
    def _song_row(
        song: Song,
        artist_names: dict[str, str],
        album_titles: dict[str, str],
    ) -> SongRow:
        primary_artist = song.primary_artist_id
        album_name = None
        if song.album_id:
            album_name = album_titles.get(song.album_id, UNKNOWN_ALBUM)

        return SongRow(
            id=song.id,
            title=song.title or "",
            artist_id=primary_artist,
            artist_ids=song.artist_ids,
            artist_name=artist_names.get(primary_artist) or UNKNOWN_ARTIST,
            album_id=song.album_id,
            album_name=album_name,
            duration=song.duration,
            audio_url=song.audio_url,
            image_url=song.image_url,
            genres=song.genres,
            release_date=song_release_date(song),
            year=song.year,
            country=song.country,
            lyrics=song.lyrics,
            is_active=song.is_active,
            is_explicit=song.is_explicit,
            play_count=song.play_count,
            like_count=song.like_count,
        )

    # ============== Search ==============

    async def search_users(self, term: Optional[str]) -> list[User]:
        users = await self.catalog.users.list_all()
        return filter_by_term(users, term, lambda user: (user.display_name, user.email))

    async def search_artists(self, term: Optional[str]) -> list[ArtistRow]:
        return filter_by_term(await self.list_artists(), term, lambda row: (row.name,))

    async def search_songs(self, term: Optional[str]) -> list[SongRow]:
        return filter_by_term(await self.list_songs(), term, lambda row: (row.title,))

    async def search_albums(self, term: Optional[str]) -> list[AlbumRow]:
        return filter_by_term(
            await self.list_albums(),
            term,
            lambda row: (row.title, row.artist_name),
        )

    # ============== Dashboard ==============

    async def dashboard_summary(self) -> DashboardSummary:
        """Totals and newest entries for the dashboard, loaded concurrently."""
        users, artists, songs, albums = await asyncio.gather(
            self.catalog.users.list_all(),
            self.catalog.artists.list_all(),
            self.catalog.songs.list_all(),
            self.catalog.albums.list_all(),
        )
        return DashboardSummary(
            total_users=len(users),
            total_artists=len(artists),
            total_songs=len(songs),
            total_albums=len(albums),
            active_users=sum(1 for user in users if user.is_active),
            admin_users=sum(1 for user in users if user.role == "admin"),
            latest=LatestEntries(
                user=_latest(users, lambda user: user.display_name),
                artist=_latest(artists, lambda artist: artist.name),
                song=_latest(songs, lambda song: song.title or ""),
                album=_latest(albums, lambda album: album.title or UNKNOWN_ALBUM),
            ),
        )

    async def integrity_report(self) -> IntegrityReport:
        """
        List references that do not resolve and song/album membership drift.

        Deletes never cascade, so these accumulate; the report only reads.
        """
        artists, songs, albums = await asyncio.gather(
            self.catalog.artists.list_all(),
            self.catalog.songs.list_all(),
            self.catalog.albums.list_all(),
        )
        artist_ids = _ids(artists)
        song_ids = _ids(songs)
        albums_by_id = {album.id: album for album in albums}

        dangling: list[DanglingReference] = []
        mismatches: list[TrackMembershipMismatch] = []

        for song in songs:
            for artist_id in song.artist_ids:
                if artist_id not in artist_ids:
                    dangling.append(DanglingReference(
                        collection="songs", record_id=song.id,
                        field="artist_ids", missing_id=artist_id,
                    ))
            if not song.album_id:
                continue
            album = albums_by_id.get(song.album_id)
            if album is None:
                dangling.append(DanglingReference(
                    collection="songs", record_id=song.id,
                    field="album_id", missing_id=song.album_id,
                ))
            elif song.id not in album.track_ids:
                mismatches.append(TrackMembershipMismatch(song_id=song.id, album_id=album.id))

        for album in albums:
            if album.artist_id and album.artist_id not in artist_ids:
                dangling.append(DanglingReference(
                    collection="albums", record_id=album.id,
                    field="artist_id", missing_id=album.artist_id,
                ))
            for track_id in album.track_ids:
                if track_id not in song_ids:
                    dangling.append(DanglingReference(
                        collection="albums", record_id=album.id,
                        field="track_ids", missing_id=track_id,
                    ))

        if dangling or mismatches:
            logger.warning(
                f"[CatalogService] Integrity check found {len(dangling)} dangling references "
                f"and {len(mismatches)} track mismatches"
            )
        return IntegrityReport(
            dangling_references=dangling,
            track_mismatches=mismatches,
            total_issues=len(dangling) + len(mismatches),
        )


def _ids(records: list[StoredRecord]) -> set[str]:
    return {record.id for record in records}
