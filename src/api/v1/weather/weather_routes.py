from typing import Optional

import structlog
from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from src.services.tool_service import tool_service
from src.services.weather_service import weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get("/current", summary="Get Current Weather")
async def get_current_weather(
    location: Optional[str] = Query(
        default=None,
        description="City, address or zip code; defaults to Seattle, WA when blank",
    ),
):
    """
    Get current weather for a location.

    The lookup never fails at the HTTP level: an unknown location or an
    upstream failure is reported in the body with ``Kind`` set to ``error``.

    Args:
        location: Free-text location to look up.

    Returns:
        JSON object with PascalCase keys describing either the weather or the error.
    """
    logger.info("API request: Get current weather", location=location)
    outcome = await weather_service.get_current_weather(location)
    return outcome.model_dump(by_alias=True)


@router.get("/widget", summary="Get Weather Widget", response_class=HTMLResponse)
async def get_weather_widget():
    """Return the static weather widget markup."""
    logger.info("API request: Get weather widget")
    return HTMLResponse(content=await tool_service.get_weather_widget())
