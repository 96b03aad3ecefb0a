"""Tests for reading stored documents in current and legacy shapes."""

from datetime import datetime, timezone

from catalog_admin.schemas.album import Album
from catalog_admin.schemas.artist import Artist
from catalog_admin.schemas.common import rename_legacy_keys
from catalog_admin.schemas.song import Song
from catalog_admin.schemas.user import User


class TestRenameLegacyKeys:

    def test_renames_legacy_key(self):
        assert rename_legacy_keys({"song_name": "A"}, {"song_name": "title"}) == {"title": "A"}

    def test_canonical_key_wins(self):
        data = {"song_name": "Old", "title": "New"}

        assert rename_legacy_keys(data, {"song_name": "title"}) == {"title": "New"}

    def test_null_canonical_is_filled_from_legacy(self):
        data = {"song_name": "Old", "title": None}

        assert rename_legacy_keys(data, {"song_name": "title"}) == {"title": "Old"}

    def test_input_not_mutated(self):
        data = {"song_name": "Old"}
        rename_legacy_keys(data, {"song_name": "title"})

        assert data == {"song_name": "Old"}


class TestSongShapes:

    def test_single_artist_string(self):
        song = Song.from_document("s1", {"artist_id": "a1"})

        assert song.artist_ids == ["a1"]
        assert song.primary_artist_id == "a1"

    def test_artist_list(self):
        song = Song.from_document("s1", {"artistId": ["a1", "a2"]})

        assert song.artist_ids == ["a1", "a2"]

    def test_null_artist_field(self):
        song = Song.from_document("s1", {"artist_id": None, "song_name": "X"})

        assert song.artist_ids == []
        assert song.primary_artist_id is None

    def test_camel_case_fields(self):
        song = Song.from_document("s1", {
            "title": "T",
            "albumId": "al1",
            "imageURL": "i.png",
            "audioURL": "a.mp3",
            "isExplicit": True,
            "playCount": 7,
        })

        assert song.album_id == "al1"
        assert song.image_url == "i.png"
        assert song.audio_url == "a.mp3"
        assert song.is_explicit is True
        assert song.play_count == 7

    def test_store_timestamp_release_date(self):
        song = Song.from_document("s1", {"releaseDate": {"seconds": 0, "nanoseconds": 0}})

        assert song.release_date == datetime(1970, 1, 1, tzinfo=timezone.utc)


class TestOtherShapes:

    def test_artist_legacy(self):
        artist = Artist.from_document("a1", {
            "artist_name": "A",
            "bio": None,
            "artist_images": "a.png",
            "followersCount": 4,
        })

        assert artist.name == "A"
        assert artist.bio == ""
        assert artist.image_url == "a.png"
        assert artist.love_count == 4

    def test_album_legacy(self):
        album = Album.from_document("al1", {
            "album_name": "A",
            "artistId": "a1",
            "trackList": ["s1"],
            "type": "compilation",
        })

        assert album.title == "A"
        assert album.artist_id == "a1"
        assert album.track_ids == ["s1"]
        assert album.type == "album"
        assert album.is_active is None

    def test_user_legacy(self):
        user = User.from_document("u1", {
            "displayName": "Ada",
            "phone": "555",
            "photoUrl": "p.png",
            "isActive": False,
            "role": "superuser",
            "favoriteSongs": ["s1"],
        })

        assert user.display_name == "Ada"
        assert user.phone_number == "555"
        assert user.photo_url == "p.png"
        assert user.is_active is False
        assert user.role == "user"
        assert user.favorite_songs == ["s1"]

    def test_document_id_overrides_body(self):
        artist = Artist.from_document("a1", {"id": "stale", "name": "A"})

        assert artist.id == "a1"


class TestTimestamps:

    def test_naive_iso_string_read_as_utc(self):
        artist = Artist.from_document("a1", {"name": "A", "createdAt": "2023-05-01T10:00:00"})

        assert artist.created_at == datetime(2023, 5, 1, 10, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        user = User.from_document("u1", {"created_at": "2024-01-01T00:00:00Z"})

        assert user.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_offset_is_kept(self):
        album = Album.from_document("al1", {"release_date": "2020-06-01T12:00:00+02:00"})

        assert album.release_date == datetime(2020, 6, 1, 10, tzinfo=timezone.utc)

    def test_naive_datetime_read_as_utc(self):
        song = Song.from_document("s1", {"release_date": datetime(2001, 2, 3)})

        assert song.release_date.tzinfo is not None


class TestInvalidFields:

    def test_invalid_scalars_fall_back_to_defaults(self):
        song = Song.from_document("s1", {
            "title": "Kept",
            "year": "",
            "duration": "3:45",
            "love_count": "lots",
        })

        assert song.title == "Kept"
        assert song.year is None
        assert song.duration is None
        assert song.like_count == 0

    def test_invalid_legacy_value_does_not_leak_back(self):
        artist = Artist.from_document("a1", {"artist_name": "A", "followersCount": "n/a"})

        assert artist.name == "A"
        assert artist.love_count == 0

    def test_unparseable_timestamp_dropped(self):
        user = User.from_document("u1", {"display_name": "Ada", "createdAt": "yesterday"})

        assert user.display_name == "Ada"
        assert user.created_at is None
