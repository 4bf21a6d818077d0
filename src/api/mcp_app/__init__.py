from src.api.mcp_app.mcp_app import mcp_server

__all__ = ["mcp_server"]
