from src.models.weather.weather import (
    Coordinates,
    GeocodingMatch,
    GeocodingResponse,
    RawObservation,
    WeatherError,
    WeatherOutcome,
    WeatherResult,
)

__all__ = [
    "Coordinates",
    "GeocodingMatch",
    "GeocodingResponse",
    "RawObservation",
    "WeatherError",
    "WeatherOutcome",
    "WeatherResult",
]
