"""Pure conversions from Open-Meteo current readings to a WeatherResult."""

import math
from datetime import datetime, timezone
from typing import Optional

import structlog

from src.config.constants import (
    COMPASS_POINTS,
    DEFAULT_LOCATION,
    NO_WIND,
    REPORTED_AT_FORMAT,
    UNKNOWN_CONDITION,
    WEATHER_CODE_CONDITIONS,
    WEATHER_SOURCE,
)
from src.models.weather.weather import RawObservation, WeatherResult

logger = structlog.get_logger(__name__)


def normalize_location(location: Optional[str]) -> str:
    """
    Normalize a free-text location query.

    Args:
        location: Raw location supplied by the caller, possibly None or blank

    Returns:
        The stripped location, or the default location when nothing usable was given
    """
    if location is None or not location.strip():
        return DEFAULT_LOCATION
    return location.strip()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity."""
    return math.floor(value + 0.5)


def celsius_to_fahrenheit(celsius: float) -> int:
    return round_half_up(celsius * 1.8 + 32)


def map_weather_code(code: Optional[float]) -> str:
    """Map a WMO weather code to its condition text."""
    if code is None or not float(code).is_integer():
        return UNKNOWN_CONDITION
    return WEATHER_CODE_CONDITIONS.get(int(code), UNKNOWN_CONDITION)


def degrees_to_cardinal(degrees: float) -> str:
    """Map a bearing in degrees to one of the 16 compass points."""
    return COMPASS_POINTS[round_half_up((degrees % 360) / 22.5) % 16]


def format_wind(wind_kph: Optional[int], direction: Optional[str]) -> str:
    if wind_kph is None:
        return NO_WIND
    if direction:
        return f"{wind_kph} km/h {direction}"
    return f"{wind_kph} km/h"


def parse_reported_time(raw_time: Optional[str], now: Optional[datetime] = None) -> datetime:
    """
    Parse the provider timestamp into an aware UTC datetime.

    Naive timestamps are taken as UTC, offset timestamps are converted to UTC.
    A missing or unparseable value falls back to ``now``.
    """
    fallback = now or datetime.now(timezone.utc)

    if not raw_time:
        return fallback

    text = raw_time.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Unparseable observation time, using current time", raw_time=raw_time)
        return fallback

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_reported_at(reported: datetime) -> str:
    if reported.tzinfo is not None:
        reported = reported.astimezone(timezone.utc)
    return reported.strftime(REPORTED_AT_FORMAT)


def parse_observation(
    observation: RawObservation, location: str, now: Optional[datetime] = None
) -> WeatherResult:
    """
    Build a WeatherResult from raw current readings.

    Args:
        observation: Readings returned by the forecast API
        location: Canonical name of the resolved location
        now: Time used when the observation carries no usable timestamp

    Returns:
        WeatherResult with rounded readings and formatted wind and time
    """
    temp_c = observation.temperature_2m
    wind_kph = (
        round_half_up(observation.wind_speed_10m)
        if observation.wind_speed_10m is not None
        else None
    )
    direction = (
        degrees_to_cardinal(observation.wind_direction_10m)
        if observation.wind_direction_10m is not None
        else None
    )

    return WeatherResult(
        location=location,
        condition=map_weather_code(observation.weather_code),
        temperature_c=round_half_up(temp_c) if temp_c is not None else None,
        temperature_f=celsius_to_fahrenheit(temp_c) if temp_c is not None else None,
        humidity_percent=(
            round_half_up(observation.relative_humidity_2m)
            if observation.relative_humidity_2m is not None
            else None
        ),
        wind_kph=wind_kph,
        wind=format_wind(wind_kph, direction),
        reported_at_utc=format_reported_at(parse_reported_time(observation.time, now)),
        source=WEATHER_SOURCE,
    )
