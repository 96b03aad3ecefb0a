import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from pydantic import BaseModel
from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_admin.core.exceptions import RecordNotFoundError
from catalog_admin.models.document import Document
from catalog_admin.repositories.base import PREFIX_RANGE_END, Repository
from catalog_admin.repositories.collections import RecordT

logger = logging.getLogger(__name__)


class DocumentRepository(Repository[RecordT]):
    """
    Repository over the ``documents`` table.

    Each operation opens its own session, so several repositories can be
    awaited concurrently with ``asyncio.gather``. Database errors are
    logged and re-raised unchanged; there is no retry.
    """

    def __init__(self, definition, session_factory: async_sessionmaker[AsyncSession], **kwargs):
        super().__init__(definition, **kwargs)
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, action: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"[DocumentRepository] Error {action} {self.collection}: {type(e).__name__}: {e}")
            raise

    def _in_collection(self):
        return Document.collection == self.collection

    async def list_all(self) -> list[RecordT]:
        async with self._session("listing") as session:
            result = await session.execute(
                select(Document)
                .where(self._in_collection())
                .order_by(Document.created_at, Document.id)
            )
            documents = result.scalars().all()
        return [self.definition.to_record(doc.id, doc.data) for doc in documents]

    async def get(self, record_id: str) -> Optional[RecordT]:
        async with self._session("getting") as session:
            document = await session.get(Document, (self.collection, record_id))
        if document is None:
            return None
        return self.definition.to_record(document.id, document.data)

    async def create(self, payload: BaseModel) -> str:
        record_id, now, data = self._new_document(payload)
        async with self._session("creating") as session:
            session.add(
                Document(
                    collection=self.collection,
                    id=record_id,
                    data=data,
                    created_at=now,
                    updated_at=now,
                )
            )
            await session.commit()
        logger.info(f"[DocumentRepository] Created {self.collection}/{record_id}")
        return record_id

    async def update(self, record_id: str, payload: BaseModel) -> None:
        now, changes = self._changes(payload)
        async with self._session("updating") as session:
            document = await session.get(Document, (self.collection, record_id))
            if document is None:
                raise RecordNotFoundError(self.collection, record_id)
            # Reassign the whole body so the JSON column change is flushed
            document.data = {**document.data, **changes}
            document.updated_at = now
            await session.commit()
        logger.info(f"[DocumentRepository] Updated {self.collection}/{record_id}: {sorted(changes)}")

    async def delete(self, record_id: str) -> None:
        async with self._session("deleting") as session:
            await session.execute(
                delete(Document).where(
                    self._in_collection(),
                    Document.id == record_id,
                )
            )
            await session.commit()
        logger.info(f"[DocumentRepository] Deleted {self.collection}/{record_id}")

    async def search_prefix(self, term: str, limit: int = 20) -> list[RecordT]:
        upper = term + PREFIX_RANGE_END
        values = [Document.data[key].as_string() for key in self.definition.search_keys]
        async with self._session("searching") as session:
            result = await session.execute(
                select(Document)
                .where(
                    self._in_collection(),
                    or_(*[and_(value >= term, value <= upper) for value in values]),
                )
                .order_by(func.coalesce(*values))
                .limit(limit)
            )
            documents = result.scalars().all()
        return [self.definition.to_record(doc.id, doc.data) for doc in documents]

    async def import_document(self, record_id: str, data: dict[str, Any]) -> None:
        async with self._session("importing") as session:
            document = await session.get(Document, (self.collection, record_id))
            if document is None:
                session.add(Document(collection=self.collection, id=record_id, data=data))
            else:
                document.data = dict(data)
            await session.commit()
