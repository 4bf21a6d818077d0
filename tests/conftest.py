from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.models.weather.weather import Coordinates, RawObservation
from src.services.snippet_service import SnippetService
from src.services.tool_service import ToolService
from src.services.weather_service import WeatherService


def make_response(status_code=200, json_data=None, text=""):
    """Build a fake httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = json_data
    return response


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and yield the client used inside ``async with``."""
    with patch("src.services.weather_service.httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def weather_service():
    """Fresh weather service instance."""
    WeatherService.reset_instance()
    service = WeatherService()
    yield service
    WeatherService.reset_instance()


@pytest.fixture
def snippet_service():
    """Fresh snippet service backed by a mock bucket."""
    SnippetService.reset_instance()
    service = SnippetService()
    service.bucket_name = "test-bucket"
    service.prefix = "snippets"
    service._bucket = MagicMock()
    yield service
    SnippetService.reset_instance()


@pytest.fixture
def tool_service():
    """Fresh tool service with mocked weather and snippet services."""
    ToolService.reset_instance()
    service = ToolService()
    service.weather_service = MagicMock()
    service.weather_service.get_current_weather = AsyncMock()
    service.snippet_service = MagicMock()
    service.snippet_service.get_snippet = AsyncMock()
    service.snippet_service.save_snippet = AsyncMock()
    service.snippet_service.bucket_exists = AsyncMock(return_value=True)
    service.snippet_service.list_snippets = AsyncMock(return_value=[])
    yield service
    ToolService.reset_instance()


@pytest.fixture
def seattle_coordinates():
    return Coordinates(
        latitude=47.60621,
        longitude=-122.33207,
        canonical_name="Seattle, Washington, United States",
    )


@pytest.fixture
def current_payload():
    """Sample "current" section from the Open-Meteo forecast API."""
    return {
        "time": "2024-05-01T14:15",
        "interval": 900,
        "temperature_2m": 20.0,
        "relative_humidity_2m": 64,
        "wind_speed_10m": 11.6,
        "wind_direction_10m": 190,
        "weather_code": 61,
    }


@pytest.fixture
def full_observation(current_payload):
    return RawObservation.model_validate(current_payload)
