from unittest.mock import AsyncMock, patch

import pytest

from src.api.mcp_app import mcp_app
from src.api.mcp_app.mcp_app import mcp_server


class TestMcpServer:
    """Test cases for the MCP tool and resource registrations."""

    @pytest.mark.asyncio
    async def test_registered_tools(self):
        tools = await mcp_server.list_tools()

        assert {tool.name for tool in tools} == {
            "hello",
            "getsnippets",
            "savesnippet",
            "summarize_snippets",
            "GetWeather",
        }

    @pytest.mark.asyncio
    async def test_registered_widget_resource(self):
        resources = await mcp_server.list_resources()

        assert "ui://weather/index.html" in [str(resource.uri) for resource in resources]

    @pytest.mark.asyncio
    async def test_tools_delegate_to_tool_service(self):
        with patch.object(mcp_app, "tool_service") as mock_tool_service:
            mock_tool_service.invoke = AsyncMock(return_value="saved")

            result = await mcp_app.save_snippet(snippetname="a", snippet="b")

        assert result == "saved"
        mock_tool_service.invoke.assert_awaited_once_with(
            "savesnippet", {"snippetname": "a", "snippet": "b"}
        )

    @pytest.mark.asyncio
    async def test_weather_tool_passes_location(self):
        with patch.object(mcp_app, "tool_service") as mock_tool_service:
            mock_tool_service.invoke = AsyncMock(return_value={"Kind": "error"})

            result = await mcp_app.get_weather(location="Miami")

        assert result == {"Kind": "error"}
        mock_tool_service.invoke.assert_awaited_once_with("GetWeather", {"location": "Miami"})

    @pytest.mark.asyncio
    async def test_weather_tool_links_widget(self):
        tools = {tool.name: tool for tool in await mcp_server.list_tools()}

        assert tools["GetWeather"].meta == {"ui": {"resourceUri": "ui://weather/index.html"}}

    @pytest.mark.asyncio
    async def test_widget_resource_prefers_border(self):
        resources = {str(resource.uri): resource for resource in await mcp_server.list_resources()}

        assert resources["ui://weather/index.html"].meta == {"ui": {"prefersBorder": True}}
