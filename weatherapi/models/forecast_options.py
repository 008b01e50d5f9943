"""Open-Meteo forecast request options."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from weatherapi.models.common import join_numbers

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
DATETIME_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$"

# Variable lists joined with commas on the wire, order preserved.
ARRAY_PARAMS = ("hourly", "daily", "current", "models")


class TemperatureUnit(StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WindSpeedUnit(StrEnum):
    KMH = "kmh"
    MS = "ms"
    MPH = "mph"
    KN = "kn"


class PrecipitationUnit(StrEnum):
    MM = "mm"
    INCH = "inch"


class TimeFormat(StrEnum):
    ISO8601 = "iso8601"
    UNIXTIME = "unixtime"


class CellSelection(StrEnum):
    LAND = "land"
    SEA = "sea"
    NEAREST = "nearest"


class ForecastOptions(BaseModel):
    """Optional variables, ranges and units for a forecast request.

    Only fields passed explicitly end up in the request. An enum set to its
    own default (``temperature_unit="celsius"``) is still sent; a field that
    was never set is not.
    """

    model_config = {"extra": "forbid", "frozen": True}

    elevation: float | list[float] | None = None
    hourly: list[str] = []
    daily: list[str] = []
    current: list[str] = []
    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    wind_speed_unit: WindSpeedUnit = WindSpeedUnit.KMH
    precipitation_unit: PrecipitationUnit = PrecipitationUnit.MM
    timeformat: TimeFormat = TimeFormat.ISO8601
    timezone: str | None = None  # e.g. "Europe/Berlin" or "auto"
    past_days: int | None = Field(default=None, ge=0, le=92)
    forecast_days: int | None = Field(default=None, ge=0, le=16)
    forecast_hours: int | None = Field(default=None, ge=0)
    forecast_minutely_15: int | None = Field(default=None, ge=0)
    past_hours: int | None = Field(default=None, ge=0)
    past_minutely_15: int | None = Field(default=None, ge=0)
    start_date: str | None = Field(default=None, pattern=DATE_PATTERN)
    end_date: str | None = Field(default=None, pattern=DATE_PATTERN)
    start_hour: str | None = Field(default=None, pattern=DATETIME_PATTERN)
    end_hour: str | None = Field(default=None, pattern=DATETIME_PATTERN)
    start_minutely_15: str | None = Field(default=None, pattern=DATETIME_PATTERN)
    end_minutely_15: str | None = Field(default=None, pattern=DATETIME_PATTERN)
    models: list[str] = []
    cell_selection: CellSelection = CellSelection.LAND

    def with_options(self, **changes: Any) -> "ForecastOptions":
        """Return a new, re-validated copy with ``changes`` applied on top of the set fields."""
        return type(self)(**{**self.model_dump(exclude_unset=True), **changes})

    def to_params(self) -> dict[str, str | int]:
        """Serialize the explicitly set fields to query parameters."""
        params: dict[str, str | int] = {}
        for name in type(self).model_fields:
            if name not in self.model_fields_set:
                continue
            value = getattr(self, name)
            if value is None:
                continue
            if name == "elevation":
                if value != []:
                    params[name] = join_numbers(value)
            elif name in ARRAY_PARAMS:
                if value:
                    params[name] = ",".join(value)
            elif isinstance(value, StrEnum):
                params[name] = value.value
            else:
                params[name] = value
        return params
