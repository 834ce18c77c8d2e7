"""FastAPI application entry point with global error handling."""
from __future__ import annotations

import os
import sys

# Add src/ to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import Settings, get_settings
from core.logging_config import get_logger, log_request, setup_logging
from core.exceptions import (
    RealtyAnalyticsError,
    ValidationError,
    NotFoundError,
    ConflictError,
    StoreError,
)
from core.models import format_validation_errors
from core.storage import EntityStore
from api.routes import (
    comments,
    dashboard,
    documents,
    health,
    market_data,
    properties,
    team_activity,
    users,
)

LOGGER = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    Sets up logging and logs startup/shutdown events.
    """
    settings: Settings = app.state.settings
    setup_logging(level=settings.log_level, json_format=settings.log_format == "json")

    LOGGER.info(
        "API application starting",
        extra={"extra_data": {
            "environment": settings.environment,
            "seed_demo_data": settings.seed_demo_data,
            "collections": app.state.store.counts(),
        }}
    )

    yield
    LOGGER.info("API application shutting down")


def create_app(
    store: Optional[EntityStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Entity store to serve. A new one is built (and seeded according
            to SEED_DEMO_DATA) when omitted.
        settings: Settings override; defaults to ``get_settings()``.

    Returns:
        Configured FastAPI application instance with:
        - CORS middleware
        - Request logging
        - Global exception handlers
        - All API routes
    """
    settings = settings or get_settings()

    application = FastAPI(
        title="RealtyAnalytics API",
        description="Property listings, market trends and team activity for the RealtyAnalytics dashboard",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.settings = settings
    application.state.store = store if store is not None else EntityStore(seed=settings.seed_demo_data)

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def log_api_requests(request: Request, call_next):
        """Tag every response with X-Request-ID and log /api requests under that id."""
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        start = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        if request.url.path.startswith("/api"):
            duration_ms = (time.perf_counter() - start) * 1000
            log_request(
                LOGGER,
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                request_id=request_id,
            )
        return response

    # -------------------------------------------------------------------------
    # Global Exception Handlers
    # -------------------------------------------------------------------------

    @application.exception_handler(ValidationError)
    async def validation_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle request body validation errors."""
        LOGGER.warning(
            f"Validation error: {exc}",
            extra={"extra_data": {"path": request.url.path, "errors": exc.errors}},
        )
        return JSONResponse(
            status_code=400,
            content={"message": exc.message, "errors": exc.errors},
        )

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed bodies and path parameters rejected by FastAPI itself."""
        errors = format_validation_errors(list(exc.errors()))
        LOGGER.warning(
            "Invalid request",
            extra={"extra_data": {"path": request.url.path, "errors": errors}},
        )
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request", "errors": errors},
        )

    @application.exception_handler(NotFoundError)
    async def not_found_handler(
        request: Request, exc: NotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"message": exc.message})

    @application.exception_handler(ConflictError)
    async def conflict_handler(
        request: Request, exc: ConflictError
    ) -> JSONResponse:
        LOGGER.warning(f"Conflict: {exc}", extra={"extra_data": {"path": request.url.path}})
        return JSONResponse(status_code=409, content={"message": exc.message})

    @application.exception_handler(StoreError)
    async def store_error_handler(
        request: Request, exc: StoreError
    ) -> JSONResponse:
        """Handle store failures. The cause is logged, never returned."""
        return JSONResponse(status_code=500, content={"message": exc.message})

    @application.exception_handler(RealtyAnalyticsError)
    async def app_error_handler(
        request: Request, exc: RealtyAnalyticsError
    ) -> JSONResponse:
        """Handle all other application errors."""
        LOGGER.error(f"Application error: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Keep unknown routes and bad methods in the same {message} shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @application.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        LOGGER.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    # -------------------------------------------------------------------------
    # Include Routers
    # -------------------------------------------------------------------------
    application.include_router(health.router, prefix="/health", tags=["Health"])

    application.include_router(properties.router, prefix="/api/properties", tags=["Properties"])
    application.include_router(market_data.router, prefix="/api/market-data", tags=["Market Data"])
    application.include_router(team_activity.router, prefix="/api/team-activity", tags=["Team Activity"])
    application.include_router(documents.router, prefix="/api/documents", tags=["Documents"])
    application.include_router(comments.router, prefix="/api/comments", tags=["Comments"])
    application.include_router(users.router, prefix="/api/users", tags=["Users"])
    application.include_router(dashboard.router, prefix="/api/dashboard-stats", tags=["Dashboard"])

    return application


# Create the application instance
app = create_app()

LOGGER.info("API application initialized")
