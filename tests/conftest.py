"""Shared fixtures: in-memory catalog, aggregator and an API client."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_admin.dependencies import get_catalog
from catalog_admin.main import app
from catalog_admin.repositories.catalog import Catalog
from catalog_admin.services.catalog_service import CatalogService


class SteppingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def catalog(clock):
    return Catalog.in_memory(clock=clock)


@pytest.fixture
def service(catalog):
    return CatalogService(catalog)


@pytest.fixture
async def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def seed(catalog):
    """Store raw document bodies under fixed ids."""

    async def _seed(collection: str, documents: dict[str, dict]) -> None:
        repository = catalog.by_name(collection)
        for record_id, body in documents.items():
            await repository.import_document(record_id, body)

    return _seed
