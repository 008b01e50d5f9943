"""Cache-aside forecast service for one fixed location."""

import logging

from weatherapi.cache.base import CacheStore
from weatherapi.cache.factory import build_cache_store
from weatherapi.config.defaults import (
    BERLIN_FORECAST_CACHE_KEY,
    CACHE_TTL,
    DEFAULT_FORECAST_OPTIONS,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
)
from weatherapi.config.schema import ServiceConfig
from weatherapi.ingest.openmeteo_client import OpenMeteoClient
from weatherapi.models.common import JSONValue
from weatherapi.models.forecast_options import ForecastOptions

logger = logging.getLogger(__name__)


class ForecastService:
    """Serves the forecast for a pre-configured location through the cache.

    A hit returns the stored payload without touching the network. A miss
    fetches from Open-Meteo, stores the result for ``ttl_seconds`` and returns
    it. Client and cache errors propagate unchanged; a failed fetch is never
    cached.
    """

    def __init__(
        self,
        client: OpenMeteoClient,
        cache: CacheStore,
        latitude: float = DEFAULT_LATITUDE,
        longitude: float = DEFAULT_LONGITUDE,
        cache_key: str = BERLIN_FORECAST_CACHE_KEY,
        ttl_seconds: int = CACHE_TTL,
        options: ForecastOptions = DEFAULT_FORECAST_OPTIONS,
    ):
        self.client = client
        self.cache = cache
        self.latitude = latitude
        self.longitude = longitude
        self.cache_key = cache_key
        self.ttl_seconds = ttl_seconds
        self.options = options

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "ForecastService":
        client = OpenMeteoClient(
            base_url=config.openmeteo.base_url,
            timeout=config.openmeteo.timeout_seconds,
        )
        return cls(
            client=client,
            cache=build_cache_store(config.cache),
            latitude=config.location.latitude,
            longitude=config.location.longitude,
            cache_key=config.cache.key,
            ttl_seconds=config.cache.ttl_seconds,
        )

    def get_forecast(self) -> JSONValue:
        return self.cache.get_or_compute(
            self.cache_key, self._fetch, self.ttl_seconds
        )

    def invalidate(self) -> bool:
        """Delete the cached forecast. Returns True if an entry was present."""
        removed = self.cache.delete(self.cache_key)
        logger.info("Invalidated %s (present=%s)", self.cache_key, removed)
        return removed

    def _fetch(self) -> JSONValue:
        logger.info(
            "Fetching forecast for %.4f,%.4f (cache key %s)",
            self.latitude, self.longitude, self.cache_key,
        )
        return self.client.fetch_forecast(
            latitude=self.latitude,
            longitude=self.longitude,
            options=self.options,
        )
