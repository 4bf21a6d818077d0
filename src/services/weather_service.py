from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import ValidationError

from src.config.config import config
from src.config.constants import (
    CURRENT_FIELDS,
    LOCATION_NOT_FOUND_MESSAGE,
    OBSERVATIONS_UNAVAILABLE_MESSAGE,
    UNEXPECTED_FAILURE_PREFIX,
    UNKNOWN_LOCATION,
    WEATHER_SOURCE,
)
from src.exceptions.weather import APIRequestError, WeatherServiceError
from src.models.weather.weather import (
    Coordinates,
    GeocodingResponse,
    RawObservation,
    WeatherError,
    WeatherOutcome,
)
from src.services.observation_parser import normalize_location, parse_observation
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class WeatherService(Singleton):
    """
    Service for looking up current weather through the Open-Meteo APIs.

    A lookup geocodes the location, fetches the current observation for the
    resolved coordinates and parses it. Each step makes at most one request
    and nothing is retried.
    """

    def __init__(self):
        """Initialize the weather service."""
        super().__init__()

        if hasattr(self, "_weather_initialized"):
            return

        self.geocoding_url = config.geocoding_base_url
        self.forecast_url = config.forecast_base_url
        self.language = config.geocoding_language

        # None disables the client-side timeout
        self.timeout = httpx.Timeout(config.http_timeout_seconds)

        self._weather_initialized = True

    async def _make_request(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a single HTTP GET request and decode the JSON body.

        Args:
            url: Endpoint URL
            params: Query parameters

        Returns:
            Decoded JSON object

        Raises:
            APIRequestError: On transport errors, non-200 responses or a body
                that is not a JSON object
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                logger.info("Making API request", url=url, params=params)
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning("Request error", url=url, error=str(e))
            raise APIRequestError(f"Request failed: {str(e)}")

        if response.status_code != 200:
            logger.warning(
                "API request failed",
                url=url,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise APIRequestError(f"Unexpected status code {response.status_code} from {url}")

        try:
            data = response.json()
        except ValueError as e:
            raise APIRequestError(f"Invalid JSON received from {url}: {str(e)}")

        if not isinstance(data, dict):
            raise APIRequestError(f"Unexpected payload received from {url}")
        return data

    async def geocode(self, location: str) -> Optional[Coordinates]:
        """
        Resolve a location to coordinates and a canonical display name.

        Args:
            location: Normalized location string

        Returns:
            Coordinates of the first match, or None when nothing matched or
            the lookup failed
        """
        params = {
            "name": location,
            "count": 1,
            "language": self.language,
            "format": "json",
        }

        try:
            data = await self._make_request(self.geocoding_url, params)
            response = GeocodingResponse.model_validate(data)
        except (WeatherServiceError, ValidationError) as e:
            logger.warning("Geocoding failed", location=location, error=str(e))
            return None

        if not response.results:
            logger.info("No geocoding match", location=location)
            return None

        match = response.results[0]
        parts = [match.name or location, match.admin1, match.country]
        canonical = ", ".join(part for part in parts if part and part.strip())

        return Coordinates(
            latitude=match.latitude,
            longitude=match.longitude,
            canonical_name=canonical or location,
        )

    async def get_latest_observation(
        self, latitude: float, longitude: float
    ) -> Optional[RawObservation]:
        """
        Fetch current readings for a pair of coordinates.

        Args:
            latitude: Latitude of the location
            longitude: Longitude of the location

        Returns:
            RawObservation built from the "current" section, or None when the
            request failed or the section is missing
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
        }

        try:
            data = await self._make_request(self.forecast_url, params)
        except WeatherServiceError as e:
            logger.warning(
                "Observation fetch failed", latitude=latitude, longitude=longitude, error=str(e)
            )
            return None

        current = data.get("current")
        if not isinstance(current, dict):
            logger.warning(
                "Observation payload has no current section", latitude=latitude, longitude=longitude
            )
            return None

        observation = RawObservation.model_validate(current)
        if observation.ignored_fields:
            logger.info("Ignoring unusable readings", fields=observation.ignored_fields)
        return observation

    async def get_current_weather(
        self, location: Optional[str]
    ) -> WeatherOutcome:
        """
        Get current weather for a location.

        Args:
            location: City name, address or zip code; blank uses the default location

        Returns:
            WeatherResult on success, WeatherError on any failure. This method
            never raises.
        """
        best_location = location or UNKNOWN_LOCATION
        try:
            normalized = normalize_location(location)
            best_location = normalized

            coordinates = await self.geocode(normalized)
            if coordinates is None:
                return WeatherError(
                    location=normalized, error=LOCATION_NOT_FOUND_MESSAGE, source=WEATHER_SOURCE
                )

            best_location = coordinates.canonical_name
            observation = await self.get_latest_observation(
                coordinates.latitude, coordinates.longitude
            )
            if observation is None:
                return WeatherError(
                    location=best_location,
                    error=OBSERVATIONS_UNAVAILABLE_MESSAGE,
                    source=WEATHER_SOURCE,
                )

            result = parse_observation(observation, best_location)
            logger.info(
                "Successfully fetched current weather",
                location=result.location,
                temperature_c=result.temperature_c,
            )
            return result

        except Exception as e:
            logger.error(
                "Unexpected weather lookup failure",
                location=best_location,
                error=str(e),
                exc_info=True,
            )
            return WeatherError(
                location=best_location,
                error=f"{UNEXPECTED_FAILURE_PREFIX}: {str(e)}",
                source=WEATHER_SOURCE,
            )


weather_service = WeatherService()
