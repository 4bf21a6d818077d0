from types import MappingProxyType

# Weather lookup
DEFAULT_LOCATION = "Seattle, WA"
WEATHER_SOURCE = "open-meteo"
UNKNOWN_LOCATION = "Unknown"
UNKNOWN_CONDITION = "Unknown"
NO_WIND = "—"
REPORTED_AT_FORMAT = "%Y-%m-%d %H:%M:%SZ"

LOCATION_NOT_FOUND_MESSAGE = "Could not find this location. Try a city, address, or zip code."
OBSERVATIONS_UNAVAILABLE_MESSAGE = "Could not retrieve current observations."
UNEXPECTED_FAILURE_PREFIX = "Unable to fetch weather"

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "wind_speed_10m",
    "wind_direction_10m",
    "weather_code",
)

WEATHER_CODE_CONDITIONS = MappingProxyType({
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Fog",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    56: "Freezing drizzle",
    57: "Freezing drizzle",
    61: "Rain",
    63: "Rain",
    65: "Rain",
    66: "Freezing rain",
    67: "Freezing rain",
    71: "Snowfall",
    73: "Snowfall",
    75: "Snowfall",
    77: "Snow grains",
    80: "Rain showers",
    81: "Rain showers",
    82: "Rain showers",
    85: "Snow showers",
    86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with hail",
})

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

# Tool catalogue
HELLO_TOOL_NAME = "hello"
HELLO_TOOL_DESCRIPTION = "Simple hello world MCP Tool that responds with a hello message."
HELLO_NAME_PROPERTY_NAME = "name"
HELLO_NAME_PROPERTY_DESCRIPTION = "Optional name to greet."

GET_SNIPPET_TOOL_NAME = "getsnippets"
GET_SNIPPET_TOOL_DESCRIPTION = "Gets code snippets from your snippet collection."
SAVE_SNIPPET_TOOL_NAME = "savesnippet"
SAVE_SNIPPET_TOOL_DESCRIPTION = "Saves a code snippet into your snippet collection."
SUMMARIZE_SNIPPETS_TOOL_NAME = "summarize_snippets"
SUMMARIZE_SNIPPETS_TOOL_DESCRIPTION = (
    "Analyze and summarize all code snippets in storage with statistics and insights"
)
SNIPPET_NAME_PROPERTY_NAME = "snippetname"
SNIPPET_NAME_PROPERTY_DESCRIPTION = "The name of the snippet."
SNIPPET_PROPERTY_NAME = "snippet"
SNIPPET_PROPERTY_DESCRIPTION = "The code snippet."

GET_WEATHER_TOOL_NAME = "GetWeather"
GET_WEATHER_TOOL_DESCRIPTION = "Returns current weather for a location via Open-Meteo."
LOCATION_PROPERTY_NAME = "location"
LOCATION_PROPERTY_DESCRIPTION = "City name to check weather for (e.g., Seattle, New York, Miami)"

# Snippet tool messages
NO_SNIPPET_NAME_MESSAGE = "No snippet name provided"
NO_SNIPPET_CONTENT_MESSAGE = "No snippet content provided"
SNIPPET_NOT_FOUND_TEMPLATE = "Snippet '{name}' not found"
STORAGE_NOT_CONFIGURED_MESSAGE = "❌ Snippet storage is not configured"
NO_SNIPPETS_CONTAINER_MESSAGE = "❌ No snippets container found"
SUMMARY_ERROR_PREFIX = "❌ Error generating summary"
STORAGE_ERROR_PREFIX = "❌ Snippet storage error"

# Weather widget resource
WEATHER_WIDGET_URI = "ui://weather/index.html"
WEATHER_WIDGET_NAME = "Weather Widget"
WEATHER_WIDGET_DESCRIPTION = "Interactive weather display for MCP Apps"
WEATHER_WIDGET_MIME_TYPE = "text/html;profile=mcp-app"
WEATHER_WIDGET_RESOURCE_META = {"ui": {"prefersBorder": True}}
GET_WEATHER_TOOL_META = {"ui": {"resourceUri": WEATHER_WIDGET_URI}}
WEATHER_WIDGET_FALLBACK_HTML = """<!DOCTYPE html>
<html>
<head><title>Weather Widget</title></head>
<body>
  <h1>Weather Widget</h1>
  <p>Widget content not found. Please ensure the widget index.html file exists.</p>
</body>
</html>"""
