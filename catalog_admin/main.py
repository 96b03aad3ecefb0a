import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_admin.config import get_settings
from catalog_admin.database import engine, init_models
from catalog_admin.logging_config import configure_logging
from catalog_admin.routers import albums, artists, dashboard, songs, users

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    """
    # Startup
    configure_logging(settings)
    logger.info(f"Starting {settings.app_name} with {settings.storage_backend} storage...")
    if settings.storage_backend == "sql" and settings.is_sqlite:
        await init_models(engine)
    yield
    # Shutdown
    await engine.dispose()
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="Admin API for the music catalog: users, artists, songs and albums",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(
    users.router,
    prefix=f"{settings.api_v1_prefix}/users",
    tags=["Users"]
)
app.include_router(
    artists.router,
    prefix=f"{settings.api_v1_prefix}/artists",
    tags=["Artists"]
)
app.include_router(
    songs.router,
    prefix=f"{settings.api_v1_prefix}/songs",
    tags=["Songs"]
)
app.include_router(
    albums.router,
    prefix=f"{settings.api_v1_prefix}/albums",
    tags=["Albums"]
)
app.include_router(
    dashboard.router,
    prefix=f"{settings.api_v1_prefix}/dashboard",
    tags=["Dashboard"]
)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API info."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
