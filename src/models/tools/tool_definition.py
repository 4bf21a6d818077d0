from typing import Dict

from pydantic import BaseModel, Field


class ToolDefinition(BaseModel):
    """Describes a tool exposed to callers."""

    name: str = Field(..., description="Tool name used for invocation")
    description: str = Field(..., description="What the tool does")
    properties: Dict[str, str] = Field(
        default_factory=dict, description="Argument names mapped to their descriptions"
    )
