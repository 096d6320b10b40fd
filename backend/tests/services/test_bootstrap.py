"""Cache Bootstrap — warm-up from a full store scan."""

import pytest

from golinks.core.domain_types import Identifier, LinkRecord
from golinks.core.errors import DatabaseError
from golinks.core.resolution_cache import ResolutionCache
from golinks.services.bootstrap import warm_cache
from tests.services.fake_repositories import FailingLinkRepository, FakeLinkRepository


async def test_warm_cache_loads_every_link():
    records = [
        LinkRecord.create("docs", "https://docs.example.com"),
        LinkRecord.create("wiki", "https://wiki.example.com"),
    ]
    cache = ResolutionCache()

    loaded = await warm_cache(FakeLinkRepository(records), cache)

    assert loaded == 2
    assert set(cache.list()) == set(records)


async def test_warm_cache_replaces_previous_contents():
    cache = ResolutionCache()
    cache.put(LinkRecord.create("stale", "https://stale.example.com"))

    await warm_cache(FakeLinkRepository([]), cache)

    assert cache.get(Identifier.parse("stale")) is None


async def test_warm_cache_store_failure_propagates_and_leaves_cache_empty():
    cache = ResolutionCache()
    with pytest.raises(DatabaseError):
        await warm_cache(FailingLinkRepository(), cache)
    assert len(cache) == 0
