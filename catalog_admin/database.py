from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from catalog_admin.config import get_settings

settings = get_settings()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    PostgreSQL gets the pooled, pgbouncer-friendly settings; SQLite uses
    the driver defaults since it does not accept pool sizing.
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)

    return create_async_engine(
        database_url,
        echo=echo,            # Log SQL queries in debug mode
        pool_pre_ping=True,   # Check connection health before using
        pool_size=3,
        max_overflow=5,
        pool_timeout=10,      # Fail fast if can't get connection
        pool_recycle=300,     # Recycle connections every 5 min to avoid stale connections
        connect_args={
            "statement_cache_size": 0,           # Required for pgbouncer
            "prepared_statement_cache_size": 0,
            "command_timeout": 30,
        },
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.database_url, echo=settings.debug)

# Create async session factory
AsyncSessionLocal = build_session_factory(engine)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


async def init_models(bind: AsyncEngine = engine) -> None:
    """
    Create missing tables.

    Production schemas are managed by Alembic; this covers local SQLite
    databases and tests.
    """
    # Register models on Base.metadata
    import catalog_admin.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
