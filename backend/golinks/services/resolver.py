"""Resolver — tiered lookup (cache → store → fuzzy) and write-through policy.

Invariants:
    - A cache hit never touches the store
    - A store hit is written into the cache before it is returned
    - Fuzzy matching runs over cache contents only, never a store scan
    - Store errors on the read path degrade to a miss; on the write path they propagate
    - create() writes the store only; the next resolve() populates the cache
    - remove() attempts both deletes; a store failure surfaces even if the
      cache half succeeded
    - remove() evicts the cache again once the store delete has committed

Design Decisions:
    - No retries here: retry policy belongs to the store adapter or the caller
    - No rollback across cache and store: the gap is accepted eventual consistency
"""

import logging
from dataclasses import dataclass

from golinks.core.domain_types import Identifier, LinkRecord
from golinks.core.errors import DatabaseError
from golinks.core.repository_protocols import LinkRepository
from golinks.core.resolution_cache import ResolutionCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemovalOutcome:
    """Which halves of a delete actually removed something."""
    cache_removed: bool
    store_removed: bool

    @property
    def found(self) -> bool:
        return self.cache_removed or self.store_removed


class Resolver:
    """Composes the shared cache with a store adapter."""

    def __init__(self, cache: ResolutionCache, store: LinkRepository):
        self.cache = cache
        self.store = store

    async def resolve(self, name: Identifier) -> LinkRecord | None:
        """Exact cache hit, then store, then unambiguous fuzzy match."""
        cached = self.cache.get(name)
        if cached is not None:
            logger.info(
                f"Hit cache for {name}",
                extra={"link_name": name.value, "tier": "cache"},
            )
            return cached

        stored = await self._get_from_store(name)
        if stored is not None:
            logger.info(
                f"Cache miss for {name}, found it in database",
                extra={"link_name": name.value, "tier": "store"},
            )
            self.cache.put(stored)
            return stored

        match = self.cache.fuzzy_get(name)
        if match is not None:
            logger.info(
                f"Fuzzy matched {name} to {match.name}",
                extra={"link_name": name.value, "tier": "fuzzy"},
            )
        else:
            logger.info(
                f"No link resolves for {name}",
                extra={"link_name": name.value, "tier": "none"},
            )
        return match

    async def create(self, record: LinkRecord) -> None:
        """Persist record; the cache learns about it on first resolve."""
        await self.store.insert(record)
        logger.info(
            f"Created link {record.name}",
            extra={"link_name": record.name.value},
        )

    async def remove(self, name: Identifier) -> RemovalOutcome:
        """Delete from cache and store independently."""
        cache_removed = self.cache.delete(name)
        if not cache_removed:
            logger.debug(
                f"{name} was not cached",
                extra={"link_name": name.value},
            )
        try:
            store_removed = await self.store.delete(name)
        except DatabaseError:
            logger.error(
                f"Failed to delete {name} from database "
                f"(cache entry removed: {cache_removed})",
                extra={"link_name": name.value},
            )
            raise
        # A resolve that ran during the store delete may have re-cached the row
        if self.cache.delete(name):
            cache_removed = True
        outcome = RemovalOutcome(cache_removed, store_removed)
        logger.info(
            f"Removed link {name} (cache={cache_removed}, store={store_removed})",
            extra={"link_name": name.value},
        )
        return outcome

    async def _get_from_store(self, name: Identifier) -> LinkRecord | None:
        """Store lookup that treats a store failure as a miss."""
        try:
            return await self.store.get(name)
        except DatabaseError as e:
            logger.warning(
                f"Database lookup for {name} failed, falling back to fuzzy match: {e}",
                extra={"link_name": name.value, "error_code": e.code},
            )
            return None
