"""Unit tests for the ReadWriteLock."""

import threading
import time

import pytest

from pet_api.infrastructure.concurrency import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=5)

    def reader():
        with lock.read():
            inside.wait()  # all three readers must be inside at once

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not inside.broken


def test_writer_excludes_readers_and_writers():
    lock = ReadWriteLock()
    active = 0
    max_active = 0
    guard = threading.Lock()

    def writer():
        nonlocal active, max_active
        with lock.write():
            with guard:
                active += 1
                max_active = max(max_active, active)
            time.sleep(0.001)
            with guard:
                active -= 1

    threads = [threading.Thread(target=writer) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert max_active == 1


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order: list[str] = []
    lock.acquire_read()

    writer = threading.Thread(target=lambda: (lock.acquire_write(), order.append("writer"), lock.release_write()))
    writer.start()
    time.sleep(0.05)  # let the writer start waiting

    reader = threading.Thread(target=lambda: (lock.acquire_read(), order.append("reader"), lock.release_read()))
    reader.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    writer.join(timeout=5)
    reader.join(timeout=5)
    assert order == ["writer", "reader"]


def test_unbalanced_release_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
