from src.exceptions.base import ToolsAppError


class ToolServiceError(ToolsAppError):
    """Base exception for tool dispatch errors."""

    pass
