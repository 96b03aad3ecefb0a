"""Tests for settings and backend selection."""

import pytest

from catalog_admin.config import Settings, get_settings
from catalog_admin.dependencies import get_catalog
from catalog_admin.repositories.document_repository import DocumentRepository
from catalog_admin.repositories.memory import MemoryRepository


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings/catalog around a test that changes the environment."""
    get_settings.cache_clear()
    get_catalog.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
    get_catalog.cache_clear()


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.storage_backend == "sql"
        assert settings.is_sqlite
        assert settings.search_prefix_limit == 20

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/catalog")
        monkeypatch.setenv("STORAGE_BACKEND", "memory")

        settings = Settings(_env_file=None)

        assert not settings.is_sqlite
        assert settings.storage_backend == "memory"


class TestCatalogSelection:

    def test_memory_backend(self, fresh_settings):
        fresh_settings.setenv("STORAGE_BACKEND", "memory")

        catalog = get_catalog()

        assert isinstance(catalog.artists, MemoryRepository)
        assert get_catalog() is catalog

    def test_sql_backend(self, fresh_settings):
        fresh_settings.setenv("STORAGE_BACKEND", "sql")

        catalog = get_catalog()

        assert isinstance(catalog.songs, DocumentRepository)
