# Import all models so Alembic can detect them
from catalog_admin.models.document import Document

__all__ = [
    "Document",
]
