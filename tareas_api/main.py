"""FastAPI main application with app factory and route configuration."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .deps import get_settings
from .errors import TaskError
from .middleware import CORS_HEADERS, cors_middleware
from .routes import tasks
from .schemas import HealthResponse
from .services.task_service import TaskStore
from .utils.logging import (
    configure_request_logging,
    log_shutdown_info,
    log_startup_info,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    settings = app.state.settings

    setup_logging(settings)
    log_startup_info(settings, app.openapi()["paths"])

    yield

    log_shutdown_info()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns a fresh, empty task store.

    Args:
        settings: Settings to use; defaults to the cached global settings

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="API Tareas",
        description="In-memory CRUD service for tasks",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.task_store = TaskStore()

    app.middleware("http")(configure_request_logging())
    # Outermost: also wraps request logging
    app.middleware("http")(cors_middleware)

    # Custom exception handlers
    @app.exception_handler(TaskError)
    async def task_error_handler(request: Request, exc: TaskError):
        """Render task errors as ``{"error": message}``."""
        logger.warning(
            f"HTTP {exc.status_code}: {exc.message} for {request.method} {request.url}"
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions (unknown routes, wrong methods) with proper logging."""
        logger.warning(
            f"HTTP {exc.status_code}: {exc.detail} for {request.method} {request.url}"
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            f"Unexpected error for {request.method} {request.url}: {str(exc)}",
            exc_info=True,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error interno del servidor"},
            # Sent by the server error layer, outside cors_middleware
            headers=CORS_HEADERS,
        )

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for monitoring and load balancers."""
        return HealthResponse(status="ok", service=settings.service_name)

    app.include_router(tasks.router)

    logger.info("FastAPI application created and configured")

    return app


# Create the app instance
app = create_app()
