"""Go-link Routes — list, redirect, create, and delete.

Invariants:
    - GET / lists the cache contents (not the store), sorted by name
    - GET /{name} redirects with 303 See Other or answers 404
    - POST / writes the store only; the cache fills on first resolve
    - DELETE /{name} answers 404 only when neither cache nor store held the name
    - Path names are validated against NAME_PATTERN before reaching the core

Design Decisions:
    - Mounted at the root so links are reachable as /<name>; API routes under
      /api/v1 have more than one segment and never collide with a link name
"""

import logging

from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import RedirectResponse

from golinks.api.dependencies import get_cache, get_resolver
from golinks.core.domain_types import Identifier
from golinks.core.errors import LinkNotFoundError
from golinks.core.resolution_cache import ResolutionCache
from golinks.schemas.link import NAME_PATTERN, LinkCreate, LinkResponse
from golinks.services.resolver import Resolver

logger = logging.getLogger(__name__)
router = APIRouter(tags=["links"])


@router.get("/", response_model=list[LinkResponse])
async def list_links(cache: ResolutionCache = Depends(get_cache)):
    """All cached links, ordered by name."""
    records = sorted(cache.list(), key=lambda r: r.name.value)
    return [LinkResponse.from_record(r) for r in records]


@router.get("/{name}")
async def follow_link(
    name: str = Path(min_length=1, max_length=255, pattern=NAME_PATTERN),
    resolver: Resolver = Depends(get_resolver),
):
    """Redirect to the URL the name resolves to."""
    record = await resolver.resolve(Identifier.parse(name))
    if record is None:
        raise LinkNotFoundError(name)
    return RedirectResponse(record.url, status_code=status.HTTP_303_SEE_OTHER)


@router.post(
    "/", response_model=LinkResponse, status_code=status.HTTP_201_CREATED,
)
async def create_link(
    body: LinkCreate, resolver: Resolver = Depends(get_resolver),
):
    """Create a new go-link."""
    record = body.to_record()
    await resolver.create(record)
    return LinkResponse.from_record(record)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_link(
    name: str = Path(min_length=1, max_length=255, pattern=NAME_PATTERN),
    resolver: Resolver = Depends(get_resolver),
):
    """Delete a go-link from the cache and the store."""
    outcome = await resolver.remove(Identifier.parse(name))
    if not outcome.found:
        raise LinkNotFoundError(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
