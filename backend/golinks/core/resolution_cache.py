"""Resolution Cache — thread-safe in-memory index of link name to LinkRecord.

Invariants:
    - Empty until bootstrap, then a subset-or-equal snapshot of the store
    - A name only ever maps to a record explicitly written into the cache
    - Reads (get, list, fuzzy_get) share the lock; writes (put, delete,
      replace_all) hold it exclusively
    - replace_all swaps the whole mapping at once; readers never see a mix of
      old and new snapshots
    - No IO: the cache holds no reference to the store

Design Decisions:
    - replace_all builds the new dict before taking the write lock, so the
      exclusive section is a single assignment
    - fuzzy_get snapshots the entries under the read lock and scores outside it
"""

import logging

from golinks.core.domain_types import Identifier, LinkRecord
from golinks.core.fuzzy_match import (
    DEFAULT_THRESHOLD, PartialRatioScorer, Scorer, select_unambiguous,
)
from golinks.core.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)


class ResolutionCache:
    """In-memory name → LinkRecord mapping with fuzzy fallback."""

    def __init__(
        self,
        scorer: Scorer | None = None,
        fuzzy_threshold: float = DEFAULT_THRESHOLD,
    ):
        self._data: dict[Identifier, LinkRecord] = {}
        self._lock = ReadWriteLock()
        self._scorer = scorer or PartialRatioScorer()
        self._threshold = fuzzy_threshold

    def replace_all(self, records: list[LinkRecord]) -> None:
        """Install a fresh mapping built from records (last write wins)."""
        new_map = {record.name: record for record in records}
        with self._lock.write():
            self._data = new_map
        logger.info(
            f"Cache replaced with {len(new_map)} links",
            extra={"count": len(new_map)},
        )

    def get(self, name: Identifier) -> LinkRecord | None:
        with self._lock.read():
            return self._data.get(name)

    def put(self, record: LinkRecord) -> None:
        with self._lock.write():
            self._data[record.name] = record

    def delete(self, name: Identifier) -> bool:
        """Remove the entry; False when the name was not cached."""
        with self._lock.write():
            return self._data.pop(name, None) is not None

    def list(self) -> list[LinkRecord]:
        """Point-in-time snapshot of all entries, order unspecified."""
        with self._lock.read():
            return list(self._data.values())

    def fuzzy_get(self, query: Identifier) -> LinkRecord | None:
        """The record whose name alone is similar enough to query, else None."""
        with self._lock.read():
            entries = [(name.value, record) for name, record in self._data.items()]
        return select_unambiguous(
            query.value, entries, self._scorer, self._threshold,
        )

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)
