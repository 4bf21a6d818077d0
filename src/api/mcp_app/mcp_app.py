"""MCP server exposing the tool layer and the weather widget resource."""

from typing import Any, Dict

import structlog
from mcp.server.fastmcp import FastMCP

from src.config.config import config
from src.config.constants import (
    GET_SNIPPET_TOOL_DESCRIPTION,
    GET_SNIPPET_TOOL_NAME,
    GET_WEATHER_TOOL_DESCRIPTION,
    GET_WEATHER_TOOL_META,
    GET_WEATHER_TOOL_NAME,
    HELLO_TOOL_DESCRIPTION,
    HELLO_TOOL_NAME,
    SAVE_SNIPPET_TOOL_DESCRIPTION,
    SAVE_SNIPPET_TOOL_NAME,
    SUMMARIZE_SNIPPETS_TOOL_DESCRIPTION,
    SUMMARIZE_SNIPPETS_TOOL_NAME,
    WEATHER_WIDGET_DESCRIPTION,
    WEATHER_WIDGET_MIME_TYPE,
    WEATHER_WIDGET_NAME,
    WEATHER_WIDGET_RESOURCE_META,
    WEATHER_WIDGET_URI,
)
from src.services.tool_service import tool_service

logger = structlog.get_logger(__name__)

mcp_server = FastMCP(config.app_name)


@mcp_server.tool(name=HELLO_TOOL_NAME, description=HELLO_TOOL_DESCRIPTION)
async def hello(name: str = "") -> str:
    return await tool_service.invoke(HELLO_TOOL_NAME, {"name": name})


@mcp_server.tool(name=GET_SNIPPET_TOOL_NAME, description=GET_SNIPPET_TOOL_DESCRIPTION)
async def get_snippets(snippetname: str = "") -> str:
    return await tool_service.invoke(GET_SNIPPET_TOOL_NAME, {"snippetname": snippetname})


@mcp_server.tool(name=SAVE_SNIPPET_TOOL_NAME, description=SAVE_SNIPPET_TOOL_DESCRIPTION)
async def save_snippet(snippetname: str = "", snippet: str = "") -> str:
    return await tool_service.invoke(
        SAVE_SNIPPET_TOOL_NAME, {"snippetname": snippetname, "snippet": snippet}
    )


@mcp_server.tool(name=SUMMARIZE_SNIPPETS_TOOL_NAME, description=SUMMARIZE_SNIPPETS_TOOL_DESCRIPTION)
async def summarize_snippets() -> str:
    return await tool_service.invoke(SUMMARIZE_SNIPPETS_TOOL_NAME)


@mcp_server.tool(
    name=GET_WEATHER_TOOL_NAME,
    description=GET_WEATHER_TOOL_DESCRIPTION,
    meta=GET_WEATHER_TOOL_META,
)
async def get_weather(location: str = "") -> Dict[str, Any]:
    return await tool_service.invoke(GET_WEATHER_TOOL_NAME, {"location": location})


@mcp_server.resource(
    WEATHER_WIDGET_URI,
    name=WEATHER_WIDGET_NAME,
    description=WEATHER_WIDGET_DESCRIPTION,
    mime_type=WEATHER_WIDGET_MIME_TYPE,
    meta=WEATHER_WIDGET_RESOURCE_META,
)
async def weather_widget() -> str:
    logger.info("Getting weather widget")
    return await tool_service.get_weather_widget()
