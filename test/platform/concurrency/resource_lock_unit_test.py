"""
Unit tests for ResourceLock / KeyedLockPool

Tests:
- Re-entrancy on the owning thread
- Fail-fast contention across threads
- Keyed pool returns one lock per key and acquires several keys at once
"""

import threading

import pytest

from src.platform.concurrency.resource_lock import KeyedLockPool, ResourceLock
from src.platform.exception.exceptions import LockContentionError


def _hold_in_background(lock: ResourceLock) -> tuple[threading.Thread, threading.Event]:
    locked = threading.Event()
    done = threading.Event()

    def keep_lock() -> None:
        with lock.hold():
            locked.set()
            done.wait(timeout=5)

    worker = threading.Thread(target=keep_lock)
    worker.start()
    assert locked.wait(timeout=5)
    return worker, done


class TestResourceLock:
    def test_lock_is_reentrant_on_the_same_thread(self) -> None:
        lock = ResourceLock(name='reentrant', timeout=0)

        with lock.hold():
            with lock.hold():
                pass

    def test_contended_lock_raises_after_timeout(self) -> None:
        lock = ResourceLock(name='contended', timeout=0.05)
        worker, done = _hold_in_background(lock)
        try:
            with pytest.raises(LockContentionError, match='Resource busy: contended') as exc_info:
                with lock.hold():
                    pass
        finally:
            done.set()
            worker.join()

        assert exc_info.value.status_code == 409

    def test_lock_is_released_after_exception(self) -> None:
        lock = ResourceLock(name='released', timeout=0)

        with pytest.raises(RuntimeError):
            with lock.hold():
                raise RuntimeError('boom')

        worker, done = _hold_in_background(lock)
        done.set()
        worker.join()

    def test_default_timeout_comes_from_settings(self) -> None:
        from src.platform.config.core_setting import settings

        assert ResourceLock(name='default').timeout == settings.LOCK_ACQUIRE_TIMEOUT_SECONDS


class TestKeyedLockPool:
    def test_same_key_shares_one_lock(self) -> None:
        pool = KeyedLockPool(prefix='cinema', timeout=0)

        assert pool.get(1) is pool.get(1)
        assert pool.get(1) is not pool.get(2)
        assert pool.get(1).name == 'cinema:1'

    def test_hold_acquires_every_key(self) -> None:
        pool = KeyedLockPool(prefix='cinema', timeout=0)
        worker, done = _hold_in_background(pool.get(2))
        try:
            with pytest.raises(LockContentionError, match='cinema:2'):
                with pool.hold(1, 2):
                    pass
            # Key 1 was released again when key 2 failed
            with pool.hold(1):
                pass
        finally:
            done.set()
            worker.join()

    def test_hold_accepts_duplicate_keys(self) -> None:
        pool = KeyedLockPool(prefix='cinema', timeout=0)

        with pool.hold(3, 3):
            pass
