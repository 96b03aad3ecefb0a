"""Dashboard schemas: summary counters and the integrity report."""

from typing import Literal, Optional
from pydantic import BaseModel


class LatestEntries(BaseModel):
    """Display name of the most recently created record per collection."""
    user: Optional[str] = None
    artist: Optional[str] = None
    song: Optional[str] = None
    album: Optional[str] = None


class DashboardSummary(BaseModel):
    """Totals shown on the dashboard cards."""
    total_users: int
    total_artists: int
    total_songs: int
    total_albums: int
    active_users: int
    admin_users: int
    latest: LatestEntries


class DanglingReference(BaseModel):
    """A stored id that does not resolve to a record."""
    collection: Literal["songs", "albums"]
    record_id: str
    field: str
    missing_id: str


class TrackMembershipMismatch(BaseModel):
    """A song pointing at an album whose track list does not include it."""
    song_id: str
    album_id: str


class IntegrityReport(BaseModel):
    """Referential problems found across the catalog. Nothing is repaired."""
    dangling_references: list[DanglingReference] = []
    track_mismatches: list[TrackMembershipMismatch] = []
    total_issues: int = 0
