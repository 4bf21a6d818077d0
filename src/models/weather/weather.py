import math
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal

from src.config.constants import CURRENT_FIELDS, WEATHER_SOURCE


def is_number(value: Any) -> bool:
    """Return True for finite int/float values, excluding booleans."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers too large to convert to float
        return False


class GeocodingMatch(BaseModel):
    """Single match returned by the Open-Meteo geocoding API."""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")
    name: Optional[str] = Field(None, description="Resolved place name")
    admin1: Optional[str] = Field(None, description="First-level administrative area")
    country: Optional[str] = Field(None, description="Country name")


class GeocodingResponse(BaseModel):
    """Open-Meteo geocoding API response model."""

    results: List[GeocodingMatch] = Field(default_factory=list, description="Matches")

    @model_validator(mode="before")
    @classmethod
    def drop_null_results(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("results") is None:
            return {**data, "results": []}
        return data


class Coordinates(BaseModel):
    """Geographic coordinates with the canonical display name of the place."""

    latitude: float = Field(..., description="Latitude")
    longitude: float = Field(..., description="Longitude")
    canonical_name: str = Field(..., description="Place, region and country, comma-joined")


class RawObservation(BaseModel):
    """
    Current readings from the Open-Meteo forecast API.

    Every reading is optional. Values that are present but unusable (not a
    finite number, or not a string for ``time``) are stored as None and
    their field names are recorded in ``ignored_fields``.
    """

    temperature_2m: Optional[float] = Field(None, description="Air temperature in Celsius")
    relative_humidity_2m: Optional[float] = Field(None, description="Relative humidity in percent")
    wind_speed_10m: Optional[float] = Field(None, description="Wind speed in km/h")
    wind_direction_10m: Optional[float] = Field(None, description="Wind direction in degrees")
    weather_code: Optional[float] = Field(None, description="WMO weather interpretation code")
    time: Optional[str] = Field(None, description="Observation time as returned by the provider")
    ignored_fields: List[str] = Field(
        default_factory=list, description="Fields present in the payload but not usable"
    )

    @model_validator(mode="before")
    @classmethod
    def discard_unusable_values(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        cleaned: Dict[str, Any] = {}
        ignored: List[str] = list(data.get("ignored_fields") or [])

        for field_name in CURRENT_FIELDS:
            if field_name not in data or data[field_name] is None:
                continue
            value = data[field_name]
            if is_number(value):
                cleaned[field_name] = value
            else:
                ignored.append(field_name)

        if data.get("time") is not None:
            if isinstance(data["time"], str):
                cleaned["time"] = data["time"]
            else:
                ignored.append("time")

        cleaned["ignored_fields"] = ignored
        return cleaned


class _WeatherPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class WeatherResult(_WeatherPayload):
    """Parsed current weather for a resolved location."""

    kind: Literal["result"] = "result"
    location: str = Field(..., description="Canonical location name")
    condition: str = Field(..., description="Condition text derived from the weather code")
    temperature_c: Optional[int] = Field(None, description="Temperature in Celsius")
    temperature_f: Optional[int] = Field(None, description="Temperature in Fahrenheit")
    humidity_percent: Optional[int] = Field(None, description="Relative humidity in percent")
    wind_kph: Optional[int] = Field(None, description="Wind speed in km/h")
    wind: str = Field(..., description="Wind description, e.g. '12 km/h NW'")
    reported_at_utc: str = Field(..., description="Observation time, YYYY-MM-DD HH:MM:SSZ")
    source: str = Field(default=WEATHER_SOURCE, description="Upstream data provider")


class WeatherError(_WeatherPayload):
    """Failed weather lookup."""

    kind: Literal["error"] = "error"
    location: str = Field(..., description="Best known location for the failed lookup")
    error: str = Field(..., description="Human readable failure message")
    source: str = Field(default=WEATHER_SOURCE, description="Upstream data provider")


WeatherOutcome = Annotated[Union[WeatherResult, WeatherError], Field(discriminator="kind")]
