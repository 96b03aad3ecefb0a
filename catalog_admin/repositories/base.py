"""
Repository interface for catalog collections.

Every collection is reached through the same five operations plus a
prefix lookup. References between records (song -> artist, album -> track)
are plain ids and may be dangling: nothing here cascades or validates them.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Generic, Optional

from pydantic import BaseModel

from catalog_admin.repositories.collections import CollectionDefinition, RecordT, new_record_id
from catalog_admin.schemas.common import utc_now

# Upper bound of a prefix range, same trick as a document store range query
PREFIX_RANGE_END = "\uf8ff"


class Repository(ABC, Generic[RecordT]):
    """Async CRUD access to one collection."""

    def __init__(
        self,
        definition: CollectionDefinition[RecordT],
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_record_id,
    ):
        self.definition = definition
        self._clock = clock
        self._id_factory = id_factory

    @property
    def collection(self) -> str:
        return self.definition.name

    @abstractmethod
    async def list_all(self) -> list[RecordT]:
        """Return every record in the collection."""

    @abstractmethod
    async def get(self, record_id: str) -> Optional[RecordT]:
        """Return the record or None when the id does not exist."""

    @abstractmethod
    async def create(self, payload: BaseModel) -> str:
        """Store a new record and return its assigned id."""

    @abstractmethod
    async def update(self, record_id: str, payload: BaseModel) -> None:
        """
        Apply the fields explicitly set on ``payload`` and refresh ``updated_at``.

        Raises:
            RecordNotFoundError: the id does not exist
        """

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Remove the record. Referencing records are left untouched."""

    @abstractmethod
    async def search_prefix(self, term: str, limit: int = 20) -> list[RecordT]:
        """Case-sensitive prefix match on the collection's display field."""

    @abstractmethod
    async def import_document(self, record_id: str, data: dict[str, Any]) -> None:
        """Store a raw document body as-is, replacing any existing one."""

    def _new_document(self, payload: BaseModel) -> tuple[str, datetime, dict[str, Any]]:
        """Build id, timestamp and body for a create request."""
        now = self._clock()
        data = {
            **self.definition.initial_fields(),
            **payload.model_dump(mode="json"),
            "created_at": now.isoformat(),
            "updated_at": now.isoformat(),
        }
        return self._id_factory(), now, data

    def _changes(self, payload: BaseModel) -> tuple[datetime, dict[str, Any]]:
        """Only the fields the caller set; omitted ones must survive the update."""
        now = self._clock()
        changes = payload.model_dump(mode="json", exclude_unset=True)
        changes["updated_at"] = now.isoformat()
        return now, changes
