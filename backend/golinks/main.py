"""golinks API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GoLinksError → structured JSON responses
    - Startup order: logging → database → migrations → cache warm-up; a failure
      at any step aborts startup, so traffic is never served from a cold cache
    - The resolution cache is constructed here and shared through app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Interactive docs disabled: /docs and /redoc would shadow go-link names
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from golinks.api.error_handlers import register_error_handlers
from golinks.api.routes import health, links
from golinks.config import get_settings
from golinks.core.resolution_cache import ResolutionCache
from golinks.infrastructure.database import init_db
from golinks.infrastructure.link_repository import SqlLinkRepository
from golinks.infrastructure.migrations import run_migrations
from golinks.infrastructure.observability import setup_logging
from golinks.services.bootstrap import warm_cache

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        if settings.run_migrations:
            await run_migrations(settings.database_url)

        cache = ResolutionCache(fuzzy_threshold=settings.fuzzy_threshold)
        async with manager.session() as db:
            await warm_cache(SqlLinkRepository(db), cache)
        app.state.link_cache = cache

        logger.info("golinks API started")
        yield
        logger.info("golinks API shutting down")
    finally:
        await manager.dispose()


app = FastAPI(
    title="golinks API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url="/api/v1/openapi.json",
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Health first: link routes are a catch-all on single path segments
app.include_router(health.router)
app.include_router(links.router)
