from datetime import datetime, timezone

from fastapi import APIRouter

from src.config.config import config

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Basic health check endpoint."""

    return {
        "message": f"{config.app_name} API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": config.app_version,
    }
