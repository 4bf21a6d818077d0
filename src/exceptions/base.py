class ToolsAppError(Exception):
    """Base exception for all tools service errors."""

    pass
