"""Reader-Writer Lock — many concurrent readers, one exclusive writer.

Invariants:
    - Readers proceed in parallel while no writer holds or waits for the lock
    - A writer excludes every reader and every other writer
    - Waiting writers block new readers (writer preference, no writer starvation)
    - An exception escaping a write section poisons the lock; every later
      acquisition raises CacheCorruptedError

Design Decisions:
    - threading.Condition over asyncio primitives: callers are both event-loop
      coroutines and threadpool workers, and the lock is never held across an await
    - Poisoning instead of silent recovery: a half-applied write leaves the mapping
      in an unknown state, which is a process-level failure
"""

import threading
from contextlib import contextmanager
from typing import Iterator

from golinks.core.errors import CacheCorruptedError


class ReadWriteLock:
    """Writer-preferring reader-writer lock with poisoning."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        with self._cond:
            while self._writer_active or self._writers_waiting:
                self._cond.wait()
            self._check_poisoned()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively; poison it if the block raises."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._check_poisoned()
            self._writer_active = True
        try:
            yield
        except BaseException:
            self._poisoned = True
            raise
        finally:
            with self._cond:
                self._writer_active = False
                self._cond.notify_all()

    def _check_poisoned(self) -> None:
        if self._poisoned:
            self._cond.notify_all()
            raise CacheCorruptedError(
                "Resolution cache lock poisoned by a failed write",
            )
