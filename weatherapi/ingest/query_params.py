"""Query parameter builder for the Open-Meteo forecast endpoint."""

from weatherapi.errors import BuildError
from weatherapi.models.common import Coordinate, QueryParams, join_numbers
from weatherapi.models.forecast_options import ForecastOptions


def build_query_params(
    latitude: Coordinate | tuple[float, ...],
    longitude: Coordinate | tuple[float, ...],
    options: ForecastOptions | None = None,
) -> QueryParams:
    """Build the flat query parameter mapping for a forecast request.

    Coordinates may be a single value or a list (or tuple) for multi-location
    requests; both must have the same shape. Lists are comma-joined in the
    given order.
    """
    latitude = _as_coordinate(latitude, "latitude")
    longitude = _as_coordinate(longitude, "longitude")
    _validate_coordinates(latitude, longitude)

    params: QueryParams = {
        "latitude": join_numbers(latitude),
        "longitude": join_numbers(longitude),
    }
    if options is not None:
        params.update(options.to_params())
    return params


def _as_coordinate(value, name: str) -> Coordinate:
    values = list(value) if isinstance(value, (list, tuple)) else [value]
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise BuildError(f"{name} must be numeric, got {v!r}")
    return values if isinstance(value, (list, tuple)) else value


def _validate_coordinates(latitude: Coordinate, longitude: Coordinate) -> None:
    lat_is_list = isinstance(latitude, list)
    if lat_is_list != isinstance(longitude, list):
        raise BuildError("latitude and longitude must both be scalars or both be lists")

    lats = latitude if lat_is_list else [latitude]
    lons = longitude if lat_is_list else [longitude]
    if not lats or not lons:
        raise BuildError("coordinate lists must not be empty")
    if len(lats) != len(lons):
        raise BuildError(
            f"latitude and longitude lists differ in length ({len(lats)} != {len(lons)})"
        )
    for lat in lats:
        if not -90.0 <= lat <= 90.0:
            raise BuildError(f"latitude out of range: {lat}")
    for lon in lons:
        if not -180.0 <= lon <= 180.0:
            raise BuildError(f"longitude out of range: {lon}")
