import copy
import logging
from typing import Any, Optional

from pydantic import BaseModel

from catalog_admin.core.exceptions import RecordNotFoundError
from catalog_admin.repositories.base import PREFIX_RANGE_END, Repository
from catalog_admin.repositories.collections import RecordT

logger = logging.getLogger(__name__)


class MemoryRepository(Repository[RecordT]):
    """Repository keeping document bodies in a dict, in insertion order."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._documents: dict[str, dict[str, Any]] = {}

    async def list_all(self) -> list[RecordT]:
        return [
            self.definition.to_record(record_id, data)
            for record_id, data in self._documents.items()
        ]

    async def get(self, record_id: str) -> Optional[RecordT]:
        data = self._documents.get(record_id)
        if data is None:
            return None
        return self.definition.to_record(record_id, data)

    async def create(self, payload: BaseModel) -> str:
        record_id, _, data = self._new_document(payload)
        self._documents[record_id] = data
        logger.info(f"[MemoryRepository] Created {self.collection}/{record_id}")
        return record_id

    async def update(self, record_id: str, payload: BaseModel) -> None:
        if record_id not in self._documents:
            raise RecordNotFoundError(self.collection, record_id)
        _, changes = self._changes(payload)
        self._documents[record_id].update(changes)
        logger.info(f"[MemoryRepository] Updated {self.collection}/{record_id}: {sorted(changes)}")

    async def delete(self, record_id: str) -> None:
        self._documents.pop(record_id, None)
        logger.info(f"[MemoryRepository] Deleted {self.collection}/{record_id}")

    async def search_prefix(self, term: str, limit: int = 20) -> list[RecordT]:
        upper = term + PREFIX_RANGE_END
        matches = []
        for record_id, data in self._documents.items():
            values = [data.get(key) for key in self.definition.search_keys]
            values = [value for value in values if isinstance(value, str)]
            if any(term <= value <= upper for value in values):
                # Ordered by the first key present, as the SQL backend does
                matches.append((values[0], record_id, data))
        matches.sort(key=lambda item: item[0])
        return [
            self.definition.to_record(record_id, data)
            for _, record_id, data in matches[:limit]
        ]

    async def import_document(self, record_id: str, data: dict[str, Any]) -> None:
        self._documents[record_id] = copy.deepcopy(data)
