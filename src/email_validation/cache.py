import threading
import time
from typing import Any


class ReadWriteLock:
    """Reader/writer lock: many concurrent readers, or a single writer.

    Writers waiting for the lock block new readers, so a steady stream of
    ``get`` calls cannot starve ``set``.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        """Acquire the shared side of the lock."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Release the shared side of the lock."""
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, blocking: bool = True) -> bool:
        """Acquire the exclusive side of the lock.

        Args:
            blocking: If False, return immediately when the lock is busy.

        Returns:
            True if the lock was acquired, False otherwise
        """
        with self._cond:
            if not blocking:
                if self._writer or self._readers:
                    return False
                self._writer = True
                return True

            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
            return True

    def release_write(self) -> None:
        """Release the exclusive side of the lock."""
        with self._cond:
            self._writer = False
            self._cond.notify_all()


class ExpiringCache:
    """In-memory key-value cache with per-entry expiration.

    Expired entries are never returned. They are removed lazily by the
    ``get`` call that notices them, using a non-blocking write acquire; if
    the lock is busy the removal is simply left to a later access. There is
    no background sweep thread.
    """

    def __init__(self, clock=time.monotonic) -> None:
        """
        Initialize the cache.

        Args:
            clock: Monotonic time source in seconds. Injectable for tests.
        """
        self._data: dict[str, tuple[Any, float]] = {}  # key -> (value, expires_at)
        self._lock = ReadWriteLock()
        self._clock = clock

    def set(self, key: str, value: Any, ttl: float) -> None:
        """
        Store a value for ``ttl`` seconds.

        Args:
            key: Cache key.
            value: Any value.
            ttl: Time-to-live in seconds.
        """
        expires_at = self._clock() + ttl
        self._lock.acquire_write()
        try:
            self._data[key] = (value, expires_at)
        finally:
            self._lock.release_write()

    def get(self, key: str) -> tuple[Any, bool]:
        """
        Look up a value.

        Args:
            key: Cache key.

        Returns:
            ``(value, True)`` on a live hit, ``(None, False)`` otherwise.
        """
        self._lock.acquire_read()
        try:
            item = self._data.get(key)
        finally:
            self._lock.release_read()

        if item is None:
            return None, False

        value, expires_at = item
        if self._clock() >= expires_at:
            self._evict_if_unchanged(key, item)
            return None, False

        return value, True

    def _evict_if_unchanged(self, key: str, item: tuple[Any, float]) -> None:
        """Drop an expired entry unless it was replaced in the meantime."""
        if not self._lock.acquire_write(blocking=False):
            return
        try:
            if self._data.get(key) is item:
                del self._data[key]
        finally:
            self._lock.release_write()

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        self._lock.acquire_write()
        try:
            self._data.pop(key, None)
        finally:
            self._lock.release_write()

    def clear(self) -> None:
        """Remove every entry."""
        self._lock.acquire_write()
        try:
            self._data = {}
        finally:
            self._lock.release_write()

    def __len__(self) -> int:
        """Number of stored entries, including expired ones not yet evicted."""
        self._lock.acquire_read()
        try:
            return len(self._data)
        finally:
            self._lock.release_read()
