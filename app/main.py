"""
Glyph Counter

An image-based visit counter. Each request for a named counter increments
a persisted integer and returns an SVG rendering of it as a strip of
themed digit glyphs.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.database import init_db
from app.models import HealthResponse
from app.routers import counters_router, themes_router
from app.themes import load_themes

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("starting glyph counter")
    logger.info(f"bind: {settings.host}:{settings.port}")
    logger.info(f"assets: {settings.assets_path}")
    logger.info(f"default theme: {settings.default_theme}")

    # Startup: create tables and load themes once, before serving requests
    init_db()
    app.state.themes = load_themes(settings.assets_path)
    yield


app = FastAPI(
    title="Glyph Counter API",
    version="0.1.0",
    description="""
An image-based visit counter rendering persisted counts as SVG digit strips.
    """,
    lifespan=lifespan,
)

# Include routers
app.include_router(counters_router)
app.include_router(themes_router)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
