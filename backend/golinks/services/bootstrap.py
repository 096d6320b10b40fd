"""Cache Bootstrap — one-shot warm-up of the resolution cache from the store.

Invariants:
    - Runs before the service accepts resolution traffic
    - The only caller of ResolutionCache.replace_all
    - A store failure propagates so startup aborts instead of serving an empty cache
"""

import logging

from golinks.core.repository_protocols import LinkRepository
from golinks.core.resolution_cache import ResolutionCache

logger = logging.getLogger(__name__)


async def warm_cache(store: LinkRepository, cache: ResolutionCache) -> int:
    """Load every stored link into the cache. Returns the number loaded."""
    try:
        records = await store.list_all()
    except Exception as e:
        logger.error(f"Couldn't load links from database: {e}")
        raise
    cache.replace_all(records)
    logger.info(
        f"Cache warmed with {len(records)} links",
        extra={"count": len(records)},
    )
    return len(records)
