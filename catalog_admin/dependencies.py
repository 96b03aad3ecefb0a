from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from catalog_admin.config import get_settings
from catalog_admin.database import AsyncSessionLocal
from catalog_admin.repositories.catalog import Catalog
from catalog_admin.services.catalog_service import CatalogService


@lru_cache
def get_catalog() -> Catalog:
    """
    Dependency that provides the catalog repositories.

    The memory backend must be a single instance for the process lifetime,
    hence the cache; the SQL backend opens a session per operation.

    Usage in FastAPI:
        @router.get("/items")
        async def get_items(catalog: CatalogDep):
            ...
    """
    settings = get_settings()
    if settings.storage_backend == "memory":
        return Catalog.in_memory()
    return Catalog.from_session_factory(AsyncSessionLocal)


def get_catalog_service(
    catalog: Annotated[Catalog, Depends(get_catalog)]
) -> CatalogService:
    """Dependency that provides the read aggregator bound to the catalog."""
    return CatalogService(catalog)


# Type aliases for cleaner dependency injection
CatalogDep = Annotated[Catalog, Depends(get_catalog)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
