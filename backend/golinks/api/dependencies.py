"""Route Dependencies — shared cache and per-request resolver.

Invariants:
    - The cache is created once in the lifespan hook and read from app.state
    - A Resolver wraps the shared cache and a request-scoped repository
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from golinks.core.resolution_cache import ResolutionCache
from golinks.infrastructure.database import get_db
from golinks.infrastructure.link_repository import SqlLinkRepository
from golinks.services.resolver import Resolver


def get_cache(request: Request) -> ResolutionCache:
    cache = getattr(request.app.state, "link_cache", None)
    if cache is None:
        raise RuntimeError("Resolution cache not initialized")
    return cache


def get_resolver(
    cache: ResolutionCache = Depends(get_cache),
    db: AsyncSession = Depends(get_db),
) -> Resolver:
    return Resolver(cache, SqlLinkRepository(db))
