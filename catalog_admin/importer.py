"""
Import a JSON export of the hosted document store into the catalog.

Self-contained command that:
1. Reads an export shaped as {"users": {...}, "artists": {...}, "songs": {...}, "albums": {...}}
   where each collection maps document id -> document body (a list of
   bodies carrying an "id" key is accepted too)
2. Stores every body verbatim, so documents in older shapes are kept as
   they are and normalized only when read
3. Reports how many documents were written per collection

Usage:
  catalog-import export.json
  DATABASE_URL=postgresql+asyncpg://... catalog-import export.json
"""
import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from catalog_admin.config import get_settings
from catalog_admin.database import AsyncSessionLocal, engine, init_models
from catalog_admin.logging_config import configure_logging
from catalog_admin.repositories.catalog import Catalog

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "artists", "songs", "albums")


def iter_documents(documents: Any) -> list[tuple[str, dict[str, Any]]]:
    """Normalize one exported collection to (id, body) pairs."""
    if isinstance(documents, dict):
        return [(str(record_id), dict(body)) for record_id, body in documents.items()]
    pairs = []
    for body in documents:
        body = dict(body)
        record_id = body.pop("id", None)
        if record_id is None:
            raise ValueError(f"Exported document has no id: {body}")
        pairs.append((str(record_id), body))
    return pairs


async def import_export(catalog: Catalog, export: dict[str, Any]) -> dict[str, int]:
    """Write every exported document; unknown top-level keys are skipped."""
    result = {}
    for name in COLLECTIONS:
        documents = iter_documents(export.get(name) or {})
        repository = catalog.by_name(name)
        for record_id, body in documents:
            await repository.import_document(record_id, body)
        result[name] = len(documents)
        logger.info(f"Imported {len(documents)} {name}")

    skipped = sorted(set(export) - set(COLLECTIONS))
    if skipped:
        logger.warning(f"Skipped unknown collections: {', '.join(skipped)}")
    return result


async def run(path: Path) -> dict[str, int]:
    export = json.loads(path.read_text(encoding="utf-8"))
    settings = get_settings()
    if settings.is_sqlite:
        await init_models(engine)
    try:
        return await import_export(Catalog.from_session_factory(AsyncSessionLocal), export)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("export", type=Path, help="Path to the JSON export")
    args = parser.parse_args(argv)

    configure_logging(get_settings())
    result = asyncio.run(run(args.export))
    logger.info(f"Import complete: {result}")


if __name__ == "__main__":
    main()
