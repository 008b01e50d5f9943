"""Open-Meteo forecast API client with classified failures."""

import logging

import httpx

from weatherapi.errors import (
    DecodeError,
    TransportError,
    UpstreamClientError,
    UpstreamError,
    UpstreamServerError,
)
from weatherapi.ingest.query_params import build_query_params
from weatherapi.models.common import Coordinate, JSONValue
from weatherapi.models.forecast_options import ForecastOptions

logger = logging.getLogger(__name__)

OPENMETEO_BASE_URL = "https://api.open-meteo.com/v1"
DEFAULT_USER_AGENT = "weatherapi/0.1.0"


class OpenMeteoClient:
    """Fetches forecasts from ``{base_url}/forecast``.

    No retries happen here: every failure is raised as one of
    TransportError, UpstreamClientError, UpstreamServerError or DecodeError
    so the caller can pick its own recovery policy.
    """

    def __init__(
        self,
        base_url: str = OPENMETEO_BASE_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._http = http_client

    def fetch_forecast(
        self,
        latitude: Coordinate,
        longitude: Coordinate,
        options: ForecastOptions | None = None,
    ) -> JSONValue:
        """Fetch a forecast and return the decoded JSON body unchanged."""
        url = f"{self.base_url}/forecast"
        params = build_query_params(latitude, longitude, options)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            if self._http is not None:
                resp = self._http.get(
                    url, params=params, headers=headers,
                    timeout=self.timeout, follow_redirects=True,
                )
            else:
                resp = httpx.get(
                    url, params=params, headers=headers,
                    timeout=self.timeout, follow_redirects=True,
                )
        except httpx.RequestError as e:
            logger.error("Open-Meteo request failed: GET %s -> %s", url, e)
            raise TransportError(f"Request failed: {e}") from e

        _raise_for_status(resp)

        try:
            return resp.json()
        except ValueError as e:
            logger.error("Open-Meteo returned a non-JSON body for %s", url)
            raise DecodeError(f"Invalid JSON in response: {e}") from e


def _raise_for_status(resp: httpx.Response) -> None:
    status = resp.status_code
    if 200 <= status < 300:
        return

    body = resp.text[:200]
    logger.error("Open-Meteo API %d: %s", status, body)
    if 400 <= status < 500:
        raise UpstreamClientError(f"HTTP {status}: {body}", status)
    if status >= 500:
        raise UpstreamServerError(f"HTTP {status}: {body}", status)
    raise UpstreamError(f"Unexpected HTTP {status}", status)
