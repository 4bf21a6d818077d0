import argparse
import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config.config import config
from src.utils.logging_config import setup_logging


def requests_stdio(argv) -> bool:
    """Whether the command line selects the stdio transport."""
    for index, arg in enumerate(argv):
        if arg == "--transport=stdio":
            return True
        if arg == "--transport" and argv[index + 1:index + 2] == ["stdio"]:
            return True
    return False


# Configure logging before the service modules log on import.
# Over stdio, stdout carries the MCP protocol, so logs go to stderr.
setup_logging(stream=sys.stderr if requests_stdio(sys.argv[1:]) else None)
logger = structlog.get_logger(__name__)

from src.api import v1_router  # noqa: E402
from src.api.health import health_router  # noqa: E402
from src.api.mcp_app import mcp_server  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    The services hold no connections that need opening up front, so startup
    and shutdown only log.
    """
    logger.info(f"Starting {config.app_name} application", environment=config.environment)
    try:
        yield
    finally:
        logger.info(f"Shutting down {config.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=f"{config.app_name} API",
        description="""
        ## Weather Snippet Tools API

        Remote tools for code snippets and current weather.

        ### Features:
        - **Tools**: Invoke `hello`, `getsnippets`, `savesnippet`, `summarize_snippets` and `GetWeather`
          with a mapping of named arguments
        - **Weather**: Current conditions for any city, address or zip code via Open-Meteo
        - **Widget**: Static weather widget markup
        - **MCP**: The same tools over the Model Context Protocol under `/mcp`
        """,
        version=config.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            raise

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
                "timestamp": time.time(),
            },
        )

    # HTTP exception handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            url=str(request.url),
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code, "timestamp": time.time()},
        )

    # Include API routes
    app.include_router(health_router)
    app.include_router(v1_router)

    if config.mcp_enabled:
        app.mount("/mcp", mcp_server.sse_app())

    # Root endpoint (hide from swagger)
    @app.get("/", tags=["Root"], include_in_schema=False)
    async def root():
        """Root endpoint providing basic system information."""
        return {
            "message": f"{config.app_name} API",
            "version": config.app_version,
            "status": "running",
            "timestamp": time.time(),
            "docs": "/docs",
            "redoc": "/redoc",
            "mcp": "/mcp/sse" if config.mcp_enabled else None,
        }

    return app


# Create the application instance
app = create_app()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"Run the {config.app_name} server")
    parser.add_argument(
        "--transport",
        choices=["http", "stdio"],
        default="http",
        help="http serves the FastAPI app with uvicorn, stdio runs only the MCP server",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.transport == "stdio":
        # stdout carries the MCP protocol, so logs go to stderr
        setup_logging(stream=sys.stderr)
        logger.info("Starting MCP server over stdio")
        mcp_server.run()
        return

    logger.info(
        f"Starting {config.app_name} server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
        reload=False,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
