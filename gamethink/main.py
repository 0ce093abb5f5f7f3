"""FastAPI application exposing the thinking tool over HTTP."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gamethink import __version__
from gamethink.config import AppConfig, app_config, settings
from gamethink.core import ThoughtTracker, ToolDispatcher, build_tracker
from gamethink.models import ToolCallRequest, ToolListResponse
from gamethink.models.protocol import HealthResponse
from gamethink.utils import setup_logging, get_logger

logger = get_logger(__name__)


def create_app(
    tracker: Optional[ThoughtTracker] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    """Build the app around an explicitly owned tracker."""
    config = config or app_config
    tracker = tracker or build_tracker(config)
    dispatcher = ToolDispatcher(tracker, config.tool)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle."""
        logger.info(
            "app_startup",
            server=config.server.name,
            tool=config.tool.name,
        )
        yield
        logger.info(
            "app_shutdown",
            thought_history_length=tracker.history_length,
        )

    app = FastAPI(
        title="Game Design Thinking API",
        description="Sequential game design thinking tool",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.tracker = tracker
    app.state.dispatcher = dispatcher

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.exception("unhandled_error", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "message": "Internal server error",
                    "type": type(exc).__name__,
                    "code": "internal_error",
                }
            },
        )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            version=config.server.version,
            server=config.server.name,
            tool=config.tool.name,
            thought_history_length=tracker.history_length,
        )

    @app.get("/v1/tools", response_model=ToolListResponse)
    async def list_tools():
        """List the tools this server exposes."""
        return ToolListResponse(tools=dispatcher.list_tools())

    # async so that calls are serialized on the event loop
    @app.post("/v1/tools/call")
    async def call_tool(request: ToolCallRequest):
        """Invoke a tool; failures are reported in the body, not the status."""
        logger.debug("tool_call", tool=request.name)
        response = dispatcher.call_tool(request.name, request.arguments)
        return JSONResponse(content=response.to_wire())

    return app


def main() -> None:
    """Run the HTTP server with uvicorn."""
    import uvicorn

    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        "gamethink.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
