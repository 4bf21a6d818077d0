from src.api.v1.tools.tools_routes import router as tools_router

__all__ = ["tools_router"]
