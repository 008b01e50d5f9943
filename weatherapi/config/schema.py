"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from weatherapi.config.defaults import (
    BERLIN_FORECAST_CACHE_KEY,
    CACHE_TTL,
    DEFAULT_CACHE_PATH,
    DEFAULT_LOCATION_NAME,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
)
from weatherapi.ingest.openmeteo_client import OPENMETEO_BASE_URL


class CacheBackend(StrEnum):
    MEMORY = "memory"
    SQLITE = "sqlite"


class OpenMeteoConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENMETEO_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    backend: CacheBackend = CacheBackend.MEMORY
    path: str = DEFAULT_CACHE_PATH  # sqlite backend only
    key: str = Field(default=BERLIN_FORECAST_CACHE_KEY, min_length=1)
    ttl_seconds: int = Field(default=CACHE_TTL, ge=1)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = DEFAULT_LOCATION_NAME
    latitude: float = Field(default=DEFAULT_LATITUDE, ge=-90.0, le=90.0)
    longitude: float = Field(default=DEFAULT_LONGITUDE, ge=-180.0, le=180.0)


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    openmeteo: OpenMeteoConfig = OpenMeteoConfig()
    cache: CacheConfig = CacheConfig()
    location: LocationConfig = LocationConfig()
