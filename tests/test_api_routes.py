from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from main import app, parse_args, requests_stdio
from src.exceptions.tools import UnknownToolError
from src.models.weather.weather import WeatherError


@pytest.fixture
def client():
    return TestClient(app)


class TestHealthRoutes:
    """Test cases for the health and root endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["message"].endswith("API is running")
        assert "timestamp" in body
        assert "X-Process-Time" in response.headers

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"


class TestToolRoutes:
    """Test cases for the tool endpoints."""

    def test_list_tools(self, client):
        response = client.get("/api/v1/tools")

        assert response.status_code == 200
        names = {tool["name"] for tool in response.json()}
        assert names == {"hello", "getsnippets", "savesnippet", "summarize_snippets", "GetWeather"}

    def test_invoke_tool(self, client):
        with patch("src.api.v1.tools.tools_routes.tool_service") as mock_tool_service:
            mock_tool_service.invoke = AsyncMock(return_value="No snippet name provided")

            response = client.post("/api/v1/tools/getsnippets", json={"arguments": {}})

        assert response.status_code == 200
        assert response.json() == {"tool": "getsnippets", "result": "No snippet name provided"}
        mock_tool_service.invoke.assert_awaited_once_with("getsnippets", {})

    def test_invoke_tool_without_body_arguments(self, client):
        response = client.post("/api/v1/tools/hello", json={})

        assert response.status_code == 200
        assert response.json()["result"] == "Hello World, I am MCP Tool!"

    def test_invoke_unknown_tool(self, client):
        with patch("src.api.v1.tools.tools_routes.tool_service") as mock_tool_service:
            mock_tool_service.invoke = AsyncMock(side_effect=UnknownToolError("Unknown tool: nope"))

            response = client.post("/api/v1/tools/nope", json={"arguments": {}})

        assert response.status_code == 404
        assert response.json()["error"] == "Unknown tool: nope"


class TestWeatherRoutes:
    """Test cases for the weather endpoints."""

    def test_current_weather(self, client):
        mock_weather_service = MagicMock()
        mock_weather_service.get_current_weather = AsyncMock(
            return_value=WeatherError(
                location="Atlantis",
                error="Could not find this location. Try a city, address, or zip code.",
            )
        )

        with patch("src.api.v1.weather.weather_routes.weather_service", mock_weather_service):
            response = client.get("/api/v1/weather/current", params={"location": "Atlantis"})

        assert response.status_code == 200
        assert response.json()["Kind"] == "error"
        assert response.json()["Location"] == "Atlantis"
        mock_weather_service.get_current_weather.assert_awaited_once_with("Atlantis")

    def test_weather_widget(self, client):
        with patch("src.api.v1.weather.weather_routes.tool_service") as mock_tool_service:
            mock_tool_service.get_weather_widget = AsyncMock(return_value="<html>ok</html>")

            response = client.get("/api/v1/weather/widget")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text == "<html>ok</html>"


class TestCommandLine:
    """Test cases for transport selection."""

    @pytest.mark.parametrize(
        "argv,expected",
        [
            ([], False),
            (["--transport", "http"], False),
            (["--transport", "stdio"], True),
            (["--transport=stdio"], True),
            (["--transport"], False),
        ],
    )
    def test_requests_stdio(self, argv, expected):
        assert requests_stdio(argv) is expected

    def test_parse_args_default_transport(self):
        assert parse_args([]).transport == "http"
