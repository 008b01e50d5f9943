"""Forecast HTTP API: FastAPI app serving the cached forecast."""

import logging
import os
from collections.abc import Callable
from functools import lru_cache

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weatherapi.api.responses import ApiMessage, error, success
from weatherapi.config.loader import load_config_or_default
from weatherapi.service.forecast_service import ForecastService

logger = logging.getLogger(__name__)

CONFIG_PATH = os.environ.get("WEATHERAPI_CONFIG", "ops/configs/default.yaml")


@lru_cache(maxsize=1)
def get_forecast_service() -> ForecastService:
    """Process-wide service built from the config at CONFIG_PATH."""
    return ForecastService.from_config(load_config_or_default(CONFIG_PATH))


def create_app(
    service_factory: Callable[[], ForecastService] = get_forecast_service,
) -> FastAPI:
    app = FastAPI(title="Weather Forecast API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/api/weather")
    def get_weather() -> JSONResponse:
        """Cached forecast for the configured location."""
        try:
            return success(service_factory().get_forecast())
        except Exception:
            logger.exception("Failed to serve forecast")
            return error(ApiMessage.INTERNAL_ERROR, status=500)

    return app


app = create_app()
