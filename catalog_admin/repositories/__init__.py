from catalog_admin.repositories.base import Repository
from catalog_admin.repositories.catalog import Catalog
from catalog_admin.repositories.document_repository import DocumentRepository
from catalog_admin.repositories.memory import MemoryRepository

__all__ = [
    "Repository",
    "Catalog",
    "DocumentRepository",
    "MemoryRepository",
]
