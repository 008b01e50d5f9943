"""In-process TTL cache with per-key miss coalescing."""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryCacheStore:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}  # key -> (expires_at, value)
        self._lock = threading.Lock()
        self._key_locks: dict[str, threading.Lock] = {}

    def get_or_compute(self, key: str, compute: Callable[[], T], ttl_seconds: int) -> T:
        """Return the live value for ``key`` or compute, store and return it.

        Concurrent misses on the same key wait for the first caller's compute
        and then read its result instead of computing again.
        """
        hit, value = self._lookup(key)
        if hit:
            return value

        with self._key_lock(key):
            hit, value = self._lookup(key)
            if hit:
                return value

            logger.debug("Cache miss for %s", key)
            value = compute()
            with self._lock:
                self._store[key] = (self._clock() + ttl_seconds, value)
            return value

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if a live entry was removed."""
        with self._lock:
            item = self._store.pop(key, None)
            self._key_locks.pop(key, None)
        return item is not None and item[0] > self._clock()

    def purge_expired(self) -> int:
        """Drop every expired entry. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            stale = [k for k, (expires_at, _) in self._store.items() if expires_at <= now]
            for k in stale:
                del self._store[k]
                self._key_locks.pop(k, None)
        return len(stale)

    def _lookup(self, key: str) -> tuple[bool, Any]:
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return False, None
            expires_at, value = item
            if expires_at <= self._clock():
                del self._store[key]
                return False, None
            return True, value

    def _key_lock(self, key: str) -> threading.Lock:
        with self._lock:
            return self._key_locks.setdefault(key, threading.Lock())
