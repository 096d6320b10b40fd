"""Reader-Writer Lock — shared readers, exclusive writers, poisoning."""

import threading

import pytest

from golinks.core.errors import CacheCorruptedError
from golinks.core.rw_lock import ReadWriteLock


def test_readers_run_in_parallel():
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=2)
    errors = []

    def reader():
        try:
            with lock.read():
                barrier.wait()  # only passes if both readers hold the lock
        except threading.BrokenBarrierError as e:
            errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5)
    assert errors == []


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()
    release = threading.Event()
    reader_done = threading.Event()

    def writer():
        with lock.write():
            entered.set()
            release.wait(2)

    def reader():
        with lock.read():
            reader_done.set()

    w = threading.Thread(target=writer)
    w.start()
    assert entered.wait(2)
    r = threading.Thread(target=reader)
    r.start()
    assert not reader_done.wait(0.1)
    release.set()
    assert reader_done.wait(2)
    w.join(2)
    r.join(2)


def test_writer_waits_for_active_reader():
    lock = ReadWriteLock()
    reading = threading.Event()
    release = threading.Event()
    writer_done = threading.Event()

    def reader():
        with lock.read():
            reading.set()
            release.wait(2)

    def writer():
        with lock.write():
            writer_done.set()

    r = threading.Thread(target=reader)
    r.start()
    assert reading.wait(2)
    w = threading.Thread(target=writer)
    w.start()
    assert not writer_done.wait(0.1)
    release.set()
    assert writer_done.wait(2)
    r.join(2)
    w.join(2)


def test_failed_write_poisons_lock():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        with lock.write():
            raise RuntimeError("boom")
    assert lock.poisoned
    with pytest.raises(CacheCorruptedError):
        with lock.read():
            pass
    with pytest.raises(CacheCorruptedError):
        with lock.write():
            pass


def test_failed_read_does_not_poison_lock():
    lock = ReadWriteLock()
    with pytest.raises(KeyError):
        with lock.read():
            raise KeyError("missing")
    assert not lock.poisoned
    with lock.write():
        pass
