from src.exceptions.weather.api_request_error import APIRequestError
from src.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = ["APIRequestError", "WeatherServiceError"]
