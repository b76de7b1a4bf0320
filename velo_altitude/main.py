"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from velo_altitude.config import settings

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
from velo_altitude.models.database import create_tables, get_db
from velo_altitude.data.fallback_data import ensure_fallback_catalog
from velo_altitude.api import browse, categories, content

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    create_tables()

    if settings.seed_fallback_catalog:
        db = next(get_db())
        try:
            inserted = ensure_fallback_catalog(db)
            if inserted:
                logger.info(f"Seeded local catalog with {inserted} items")
        finally:
            db.close()

    app.state.http_client = httpx.AsyncClient(
        timeout=settings.request_timeout_seconds,
        headers={"Accept": "application/json"},
    )

    yield

    # Shutdown
    await app.state.http_client.aclose()


app = FastAPI(
    title="Velo-Altitude Catalog",
    description="Category browsing for mountain passes, training programs, nutrition and challenges",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(categories.router, prefix="/categories", tags=["Categories"])
app.include_router(browse.router, prefix="/browse", tags=["Browse"])
app.include_router(content.router, prefix="/content", tags=["Content"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Velo-Altitude Catalog",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
