import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

import structlog

from src.config.config import config
from src.config.constants import (
    GET_SNIPPET_TOOL_DESCRIPTION,
    GET_SNIPPET_TOOL_NAME,
    GET_WEATHER_TOOL_DESCRIPTION,
    GET_WEATHER_TOOL_NAME,
    HELLO_NAME_PROPERTY_DESCRIPTION,
    HELLO_NAME_PROPERTY_NAME,
    HELLO_TOOL_DESCRIPTION,
    HELLO_TOOL_NAME,
    LOCATION_PROPERTY_DESCRIPTION,
    LOCATION_PROPERTY_NAME,
    NO_SNIPPET_CONTENT_MESSAGE,
    NO_SNIPPET_NAME_MESSAGE,
    NO_SNIPPETS_CONTAINER_MESSAGE,
    SAVE_SNIPPET_TOOL_DESCRIPTION,
    SAVE_SNIPPET_TOOL_NAME,
    SNIPPET_NAME_PROPERTY_DESCRIPTION,
    SNIPPET_NAME_PROPERTY_NAME,
    SNIPPET_NOT_FOUND_TEMPLATE,
    SNIPPET_PROPERTY_DESCRIPTION,
    SNIPPET_PROPERTY_NAME,
    STORAGE_ERROR_PREFIX,
    STORAGE_NOT_CONFIGURED_MESSAGE,
    SUMMARIZE_SNIPPETS_TOOL_DESCRIPTION,
    SUMMARIZE_SNIPPETS_TOOL_NAME,
    SUMMARY_ERROR_PREFIX,
    WEATHER_WIDGET_FALLBACK_HTML,
)
from src.exceptions.snippets import SnippetServiceError, StorageNotConfiguredError
from src.exceptions.tools import UnknownToolError
from src.models.snippets.snippet import Snippet
from src.models.tools.tool_definition import ToolDefinition
from src.models.weather.weather import WeatherResult
from src.services.snippet_service import snippet_service
from src.services.weather_service import weather_service
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)

ToolHandler = Callable[[Mapping[str, Any]], Awaitable[Any]]


def get_string_argument(arguments: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    """
    Read a string argument from a tool invocation.

    Returns None when the argument is missing, None, or blank.
    """
    if not arguments:
        return None
    value = arguments.get(name)
    if value is None:
        return None
    value = value if isinstance(value, str) else str(value)
    return value if value.strip() else None


def format_snippets_summary(snippets: List[Snippet]) -> str:
    """Render the markdown summary returned by the summarize_snippets tool."""
    total_words = sum(snippet.word_count for snippet in snippets)
    total_chars = sum(snippet.char_count for snippet in snippets)

    summary = f"📊 **Snippets Summary** ({total_words} total words, {total_chars} total chars)\n\n"
    for snippet in snippets:
        summary += f"**{snippet.name}** ({snippet.word_count} words, {snippet.char_count} chars)\n"
        summary += f"```\n{snippet.content}\n```\n\n"
    return summary


class ToolService(Singleton):
    """
    Tool layer shared by the HTTP API and the MCP server.

    Every handler takes the mapping of named arguments from the invocation and
    returns the tool result. Missing arguments and storage failures are
    reported as fixed human-readable strings, never raised.
    """

    def __init__(self):
        """Initialize the tool service and its catalogue."""
        super().__init__()

        if hasattr(self, "_tools_initialized"):
            return

        self.weather_service = weather_service
        self.snippet_service = snippet_service

        self._definitions: Dict[str, ToolDefinition] = {
            definition.name: definition
            for definition in (
                ToolDefinition(
                    name=HELLO_TOOL_NAME,
                    description=HELLO_TOOL_DESCRIPTION,
                    properties={HELLO_NAME_PROPERTY_NAME: HELLO_NAME_PROPERTY_DESCRIPTION},
                ),
                ToolDefinition(
                    name=GET_SNIPPET_TOOL_NAME,
                    description=GET_SNIPPET_TOOL_DESCRIPTION,
                    properties={SNIPPET_NAME_PROPERTY_NAME: SNIPPET_NAME_PROPERTY_DESCRIPTION},
                ),
                ToolDefinition(
                    name=SAVE_SNIPPET_TOOL_NAME,
                    description=SAVE_SNIPPET_TOOL_DESCRIPTION,
                    properties={
                        SNIPPET_NAME_PROPERTY_NAME: SNIPPET_NAME_PROPERTY_DESCRIPTION,
                        SNIPPET_PROPERTY_NAME: SNIPPET_PROPERTY_DESCRIPTION,
                    },
                ),
                ToolDefinition(
                    name=SUMMARIZE_SNIPPETS_TOOL_NAME,
                    description=SUMMARIZE_SNIPPETS_TOOL_DESCRIPTION,
                ),
                ToolDefinition(
                    name=GET_WEATHER_TOOL_NAME,
                    description=GET_WEATHER_TOOL_DESCRIPTION,
                    properties={LOCATION_PROPERTY_NAME: LOCATION_PROPERTY_DESCRIPTION},
                ),
            )
        }
        self._handlers: Dict[str, ToolHandler] = {
            HELLO_TOOL_NAME: self.hello,
            GET_SNIPPET_TOOL_NAME: self.get_snippet,
            SAVE_SNIPPET_TOOL_NAME: self.save_snippet,
            SUMMARIZE_SNIPPETS_TOOL_NAME: self.summarize_snippets,
            GET_WEATHER_TOOL_NAME: self.get_weather,
        }

        self._tools_initialized = True
        logger.debug("Tool service initialized", tools=list(self._definitions))

    def list_tools(self) -> List[ToolDefinition]:
        return list(self._definitions.values())

    async def invoke(self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Invoke a tool by name.

        Args:
            tool_name: Registered tool name
            arguments: Named tool arguments

        Returns:
            The tool result

        Raises:
            UnknownToolError: If no tool is registered under tool_name
        """
        handler = self._handlers.get(tool_name)
        if handler is None:
            raise UnknownToolError(f"Unknown tool: {tool_name}")

        logger.info("Invoking tool", tool=tool_name)
        return await handler(arguments or {})

    async def hello(self, arguments: Mapping[str, Any]) -> str:
        name = get_string_argument(arguments, HELLO_NAME_PROPERTY_NAME)
        logger.info("Hello tool invoked", name=name)
        return f"Hello {name or 'World'}, I am MCP Tool!"

    async def get_snippet(self, arguments: Mapping[str, Any]) -> str:
        snippet_name = get_string_argument(arguments, SNIPPET_NAME_PROPERTY_NAME)
        logger.info("Getting snippet", snippet_name=snippet_name)

        if not snippet_name:
            return NO_SNIPPET_NAME_MESSAGE

        try:
            content = await self.snippet_service.get_snippet(snippet_name)
        except SnippetServiceError as e:
            logger.error("Failed to get snippet", snippet_name=snippet_name, error=str(e))
            return f"{STORAGE_ERROR_PREFIX}: {str(e)}"

        if not content:
            return SNIPPET_NOT_FOUND_TEMPLATE.format(name=snippet_name)
        return content

    async def save_snippet(self, arguments: Mapping[str, Any]) -> str:
        snippet_name = get_string_argument(arguments, SNIPPET_NAME_PROPERTY_NAME)
        snippet = get_string_argument(arguments, SNIPPET_PROPERTY_NAME)
        logger.info("Saving snippet", snippet_name=snippet_name)

        if not snippet_name:
            return NO_SNIPPET_NAME_MESSAGE
        if not snippet:
            return NO_SNIPPET_CONTENT_MESSAGE

        try:
            await self.snippet_service.save_snippet(snippet_name, snippet)
        except SnippetServiceError as e:
            logger.error("Failed to save snippet", snippet_name=snippet_name, error=str(e))
            return f"{STORAGE_ERROR_PREFIX}: {str(e)}"

        return snippet

    async def summarize_snippets(self, arguments: Mapping[str, Any]) -> str:
        logger.info("Summarizing snippets")

        try:
            if not await self.snippet_service.bucket_exists():
                return NO_SNIPPETS_CONTAINER_MESSAGE
            snippets = await self.snippet_service.list_snippets()
        except StorageNotConfiguredError:
            return STORAGE_NOT_CONFIGURED_MESSAGE
        except SnippetServiceError as e:
            logger.error("Error in summarize_snippets", error=str(e))
            return f"{SUMMARY_ERROR_PREFIX}: {str(e)}"

        return format_snippets_summary(snippets)

    async def get_weather(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        location = get_string_argument(arguments, LOCATION_PROPERTY_NAME) or ""
        logger.info("Getting weather", location=location)

        outcome = await self.weather_service.get_current_weather(location)

        if isinstance(outcome, WeatherResult):
            logger.info(
                "Weather fetched",
                location=outcome.location,
                temperature_c=outcome.temperature_c,
            )
        else:
            logger.warning("Weather error", location=outcome.location, error=outcome.error)

        return outcome.model_dump(by_alias=True)

    async def get_weather_widget(self) -> str:
        """Return the weather widget markup, or a fallback page if the asset is missing."""
        widget_path = Path(config.widget_html_path)
        try:
            return await asyncio.to_thread(widget_path.read_text, encoding="utf-8")
        except OSError as e:
            logger.warning("Error reading weather widget file", path=str(widget_path), error=str(e))
            return WEATHER_WIDGET_FALLBACK_HTML


tool_service = ToolService()
