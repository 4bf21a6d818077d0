from typing import Any, Dict

from pydantic import BaseModel, Field


class ToolInvocationRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict, description="Named tool arguments")


class ToolInvocationResponse(BaseModel):
    """Response model for a tool invocation."""

    tool: str = Field(..., description="Invoked tool name")
    result: Any = Field(..., description="Tool result, a string or a weather payload")
