"""Exception hierarchy for the forecast service."""


class WeatherAPIError(Exception):
    """Base class for every error raised by the forecast core."""


class BuildError(WeatherAPIError):
    """Raised when request parameters cannot be built from the given input."""


class TransportError(WeatherAPIError):
    """Raised when no response was obtained (DNS, connection, timeout)."""


class UpstreamError(WeatherAPIError):
    """Raised when the forecast API answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamClientError(UpstreamError):
    """HTTP 4xx from the forecast API, including 429 rate limiting."""


class UpstreamServerError(UpstreamError):
    """HTTP 5xx from the forecast API."""


class DecodeError(WeatherAPIError):
    """Raised when the response body is not valid JSON."""


class CacheError(WeatherAPIError):
    """Raised when the cache backend is unreachable or misconfigured."""
