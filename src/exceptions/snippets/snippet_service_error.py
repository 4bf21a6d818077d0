from src.exceptions.base import ToolsAppError


class SnippetServiceError(ToolsAppError):
    """Base exception for snippet storage errors."""

    pass
