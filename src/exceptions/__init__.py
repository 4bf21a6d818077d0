from src.exceptions.base import ToolsAppError

__all__ = ["ToolsAppError"]
