from src.exceptions.tools.tool_service_error import ToolServiceError


class UnknownToolError(ToolServiceError):
    """Exception for invocations of tools that are not registered."""

    pass
