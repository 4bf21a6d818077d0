from src.models.tools.tool_definition import ToolDefinition
from src.models.tools.tool_invocation import ToolInvocationRequest, ToolInvocationResponse

__all__ = ["ToolDefinition", "ToolInvocationRequest", "ToolInvocationResponse"]
