"""
In-process resource locks with a fail-fast contention policy.

Each lock is acquired with a bounded timeout (``LOCK_ACQUIRE_TIMEOUT_SECONDS``);
when the timeout elapses the caller gets a ``LockContentionError`` instead of
blocking indefinitely.
"""

from collections.abc import Hashable, Iterator
from contextlib import ExitStack, contextmanager
import threading
from typing import Dict, Optional

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import LockContentionError
from src.platform.logging.loguru_io import Logger


class ResourceLock:
    """Re-entrant lock guarding a single resource (e.g. one seat matrix)"""

    def __init__(self, *, name: str, timeout: Optional[float] = None) -> None:
        self.name = name
        self._timeout = timeout
        self._lock = threading.RLock()

    @property
    def timeout(self) -> float:
        return settings.LOCK_ACQUIRE_TIMEOUT_SECONDS if self._timeout is None else self._timeout

    @contextmanager
    def hold(self) -> Iterator[None]:
        timeout = self.timeout
        acquired = (
            self._lock.acquire(blocking=False)
            if timeout <= 0
            else self._lock.acquire(timeout=timeout)
        )
        if not acquired:
            Logger.base.warning(f'⏳ [LOCK] Failed to acquire lock: {self.name} ({timeout}s)')
            raise LockContentionError(f'Resource busy: {self.name}')
        try:
            yield
        finally:
            self._lock.release()


class KeyedLockPool:
    """Lazily created ``ResourceLock`` per key (e.g. one per cinema)"""

    def __init__(self, *, prefix: str, timeout: Optional[float] = None) -> None:
        self._prefix = prefix
        self._timeout = timeout
        self._locks: Dict[Hashable, ResourceLock] = {}
        self._guard = threading.Lock()

    def get(self, key: Hashable) -> ResourceLock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = ResourceLock(name=f'{self._prefix}:{key}', timeout=self._timeout)
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, *keys: Hashable) -> Iterator[None]:
        """Acquire the locks of all given keys, in sorted order to avoid lock-order deadlocks"""
        with ExitStack() as stack:
            for key in sorted(set(keys), key=str):
                stack.enter_context(self.get(key).hold())
            yield
