from src.exceptions.base import ToolsAppError


class WeatherServiceError(ToolsAppError):
    """Base exception for weather service errors."""

    pass
