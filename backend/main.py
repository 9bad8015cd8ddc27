"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import List, Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers.health import API_VERSION
from api.schemas import error_response
from application.exceptions import StorageError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Loggers whose level follows settings.log_level
APP_LOGGER_NAMES = ("api", "application", "backend", "domain", "infrastructure")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="E-Tracker API",
        description="Personal exercise tracking: records, filters and statistics",
        version=API_VERSION,
    )

    _configure_cors(app, settings)
    _register_exception_handlers(app, settings)
    _include_routers(app)

    logger.info("E-Tracker API configured (environment: %s)", settings.environment)
    return app


def _configure_logging(settings: Settings) -> None:
    """Apply the configured level to the application's loggers."""
    for name in APP_LOGGER_NAMES:
        logging.getLogger(name).setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for e-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """
    Render every failure in the response envelope.

    - HTTPException: its status and detail (404 for unknown routes)
    - RequestValidationError: 400 with readable messages
    - StorageError: 500 "Server Error", no internal detail
    - anything else: 500, detail only in development with expose_error_detail set
    """

    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404 and exc.detail == "Not Found":
            return error_response(404, "Route not found")
        return error_response(exc.status_code, str(exc.detail))

    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(400, "Validation Error", errors=_validation_messages(exc))

    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure during %s %s: %s", request.method, request.url.path, exc)
        return error_response(500, "Server Error")

    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error during %s %s", request.method, request.url.path)
        # Reported to Sentry by its FastAPI integration.
        errors = [str(exc)] if settings.is_development and settings.expose_error_detail else None
        return error_response(500, "Something went wrong!", errors=errors)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def _validation_messages(exc: RequestValidationError) -> List[str]:
    """Turn FastAPI request validation errors into readable messages."""
    messages: List[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc and loc[0] == "body":
            message = "Request body must be a JSON object"
        else:
            field = loc[-1] if loc else "request"
            message = f"{field}: {error.get('msg', 'invalid value')}"
        if message not in messages:
            messages.append(message)
    return messages


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import exercises_router, health_router

    # Health router (no prefix - / and /health at root)
    app.include_router(health_router)

    # Exercise records (prefix /api/exercises)
    app.include_router(exercises_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
