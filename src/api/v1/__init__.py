from fastapi import APIRouter

from src.api.v1.tools import tools_router
from src.api.v1.weather import weather_router

# Create main router
router = APIRouter(prefix="/api/v1")

# Include all sub-routers
router.include_router(tools_router)
router.include_router(weather_router)
