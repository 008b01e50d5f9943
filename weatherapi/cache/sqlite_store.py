"""Persistent TTL cache backed by SQLite."""

import json
import logging
import sqlite3
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from weatherapi.errors import CacheError
from weatherapi.models.common import utc_now_iso
from weatherapi.storage.database import connect, run_migrations

logger = logging.getLogger(__name__)


class SqliteCacheStore:
    """Stores JSON payloads in the ``cache_entries`` table.

    Concurrent misses are not coalesced: each computes and upserts, and the
    last write wins. Payloads must be JSON-serializable.
    """

    def __init__(self, db_path: str | Path, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._lock = threading.Lock()
        try:
            self.conn = connect(db_path, check_same_thread=False)
            run_migrations(self.conn)
        except (sqlite3.Error, OSError) as e:
            raise CacheError(f"Cannot open cache database {db_path}: {e}") from e

    def get_or_compute(self, key: str, compute: Callable[[], Any], ttl_seconds: int) -> Any:
        hit, value = self._get(key)
        if hit:
            return value

        logger.debug("Cache miss for %s", key)
        value = compute()
        self._set(key, value, ttl_seconds)
        return value

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if a live entry was removed."""
        try:
            with self._lock:
                cursor = self.conn.execute(
                    "DELETE FROM cache_entries WHERE cache_key = ? AND expires_at > ?",
                    (key, self._clock()),
                )
                removed = cursor.rowcount > 0
                self.conn.execute("DELETE FROM cache_entries WHERE cache_key = ?", (key,))
                self.conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"Cache delete failed for {key}: {e}") from e
        return removed

    def purge_expired(self) -> int:
        """Delete expired rows. Returns how many were removed."""
        try:
            with self._lock:
                cursor = self.conn.execute(
                    "DELETE FROM cache_entries WHERE expires_at <= ?", (self._clock(),)
                )
                self.conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"Cache purge failed: {e}") from e
        return cursor.rowcount

    def close(self) -> None:
        self.conn.close()

    def _get(self, key: str) -> tuple[bool, Any]:
        try:
            with self._lock:
                row = self.conn.execute(
                    "SELECT payload_json FROM cache_entries "
                    "WHERE cache_key = ? AND expires_at > ?",
                    (key, self._clock()),
                ).fetchone()
        except sqlite3.Error as e:
            raise CacheError(f"Cache read failed for {key}: {e}") from e
        if row is None:
            return False, None
        return True, json.loads(row["payload_json"])

    def _set(self, key: str, value: Any, ttl_seconds: int) -> None:
        try:
            payload = json.dumps(value, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise CacheError(f"Value for {key} is not JSON-serializable: {e}") from e

        try:
            with self._lock:
                self.conn.execute(
                    "INSERT INTO cache_entries (cache_key, payload_json, expires_at, created_at) "
                    "VALUES (?, ?, ?, ?) "
                    "ON CONFLICT(cache_key) DO UPDATE SET "
                    "payload_json = excluded.payload_json, "
                    "expires_at = excluded.expires_at, "
                    "created_at = excluded.created_at",
                    (key, payload, self._clock() + ttl_seconds, utc_now_iso()),
                )
                self.conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"Cache write failed for {key}: {e}") from e
