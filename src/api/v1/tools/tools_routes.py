from typing import List

import structlog
from fastapi import APIRouter, HTTPException, status

from src.exceptions.tools import UnknownToolError
from src.models.tools import ToolDefinition, ToolInvocationRequest, ToolInvocationResponse
from src.services.tool_service import tool_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/tools", tags=["Tools"])


@router.get("", summary="List Tools", response_model=List[ToolDefinition])
async def list_tools():
    """Return the catalogue of tools with their argument descriptions."""
    return tool_service.list_tools()


@router.post("/{tool_name}", summary="Invoke Tool", response_model=ToolInvocationResponse)
async def invoke_tool(tool_name: str, request: ToolInvocationRequest):
    """
    Invoke a tool with a mapping of named arguments.

    Missing or empty required arguments do not fail the request; the tool
    answers with a human-readable message instead.

    Args:
        tool_name: Registered tool name, e.g. ``getsnippets`` or ``GetWeather``.
        request: Payload carrying the named arguments.

    Returns:
        The tool name and its result.

    Raises:
        HTTPException: 404 if the tool is not registered.
    """
    logger.info("API request: Invoke tool", tool=tool_name, arguments=list(request.arguments))
    try:
        result = await tool_service.invoke(tool_name, request.arguments)
    except UnknownToolError as e:
        logger.warning("Unknown tool requested", tool=tool_name)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ToolInvocationResponse(tool=tool_name, result=result)
