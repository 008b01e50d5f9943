"""Default location, cache settings and request options for the forecast service."""

from weatherapi.models.forecast_options import ForecastOptions

BERLIN_FORECAST_CACHE_KEY = "weather.berlin.forecast"
CACHE_TTL = 300  # 5 minutes
DEFAULT_CACHE_PATH = "data/cache.db"

DEFAULT_LOCATION_NAME = "Berlin"
DEFAULT_LATITUDE = 52.52
DEFAULT_LONGITUDE = 13.41

DEFAULT_FORECAST_OPTIONS = ForecastOptions(
    current=["temperature_2m"],
    hourly=["temperature_2m"],
    forecast_hours=1,
)
