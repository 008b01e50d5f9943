"""Build the configured cache store."""

import logging

from weatherapi.cache.memory_store import InMemoryCacheStore
from weatherapi.cache.sqlite_store import SqliteCacheStore
from weatherapi.config.schema import CacheBackend, CacheConfig

logger = logging.getLogger(__name__)


def build_cache_store(config: CacheConfig) -> InMemoryCacheStore | SqliteCacheStore:
    if config.backend == CacheBackend.SQLITE:
        logger.info("Using SQLite cache at %s", config.path)
        return SqliteCacheStore(config.path)
    logger.info("Using in-memory cache")
    return InMemoryCacheStore()
