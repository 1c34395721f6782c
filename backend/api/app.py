"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ToolshelfError,
    UnavailableError,
    ValidationError,
)
from .routes import health, users
from modules.teams.routes import router as teams_router
from modules.shelf.routes import router as shelf_router
from modules.preferences.routes import router as preferences_router
from modules.invites.routes import router as invites_router

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (UnavailableError, 503),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def toolshelf_error_handler(request: Request, exc: ToolshelfError) -> JSONResponse:
    """Map the domain error taxonomy to HTTP responses."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return JSONResponse(status_code=status_code, content=exc.to_dict())

    logger.error("Unexpected error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=500,
        content={"error": "UNEXPECTED_ERROR", "message": "Internal server error", "details": {}},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "UNEXPECTED_ERROR", "message": "Internal server error", "details": {}},
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Team tool shelves with per-user pins and recency",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(ToolshelfError, toolshelf_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(teams_router, prefix="/api/teams", tags=["teams"])
    app.include_router(shelf_router, prefix="/api", tags=["shelf"])
    app.include_router(preferences_router, prefix="/api", tags=["preferences"])
    app.include_router(invites_router, prefix="/functions/v1", tags=["invites"])

    return app


# Application instance for uvicorn
app = create_app()
