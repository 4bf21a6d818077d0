from src.exceptions.tools.tool_service_error import ToolServiceError
from src.exceptions.tools.unknown_tool_error import UnknownToolError

__all__ = ["ToolServiceError", "UnknownToolError"]
