"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Easier to test (can create multiple instances)

2. Lifespan Events
   - startup/shutdown logging, engine disposal on shutdown

3. Exception Handlers
   - Typed API errors (app.exceptions) → their status and JSON body
   - Request validation errors → 400 {"status", "errors"}
   - Database and unexpected errors → logged, 500
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.database import check_connection, engine
from app.exceptions import BooksAPIError, StoreError
from app.routers import books_router
from app.validation import format_error

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Code before yield runs on startup, code after yield on shutdown.
    """
    logger.info(f"Starting {settings.app_name} ({settings.environment})...")
    logger.info(f"Debug mode: {settings.debug}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


# =============================================================================
# Exception Handlers
# =============================================================================
async def books_api_exception_handler(
    request: Request,
    exc: BooksAPIError,
) -> JSONResponse:
    """Translate a typed API error into its JSON response."""
    if isinstance(exc, StoreError):
        logger.error(f"Store error on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Report malformed requests (non-object body, bad query values) in the
    same shape as schema violations instead of FastAPI's default 422.
    """
    errors = []
    for error in exc.errors():
        source, *loc = error["loc"] or ("body",)
        root = "instance" if source == "body" else str(source)
        errors.append(format_error({**error, "loc": tuple(loc)}, root))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"status": status.HTTP_400_BAD_REQUEST, "errors": errors},
    )


async def sqlalchemy_exception_handler(
    request: Request,
    exc: SQLAlchemyError,
) -> JSONResponse:
    """
    Handle SQLAlchemy database errors.

    Logs the actual error while hiding details from users.
    """
    logger.error(f"Database error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "message": "A database error occurred. Please try again later.",
        },
    )


async def general_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Catch-all exception handler.

    In production, hide internal errors from users.
    In debug mode, show more details.
    """
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    message = str(exc) if settings.debug else "An internal error occurred."
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": status.HTTP_500_INTERNAL_SERVER_ERROR, "message": message},
    )


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Books API

CRUD API for a single book resource keyed by ISBN.

- Create requires every field; updates accept any subset except the ISBN.
- Validation failures return `{"status": 400, "errors": [...]}`.
        """,
        version="1.0.0",
        # Interactive docs are not served in production
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    app.add_exception_handler(BooksAPIError, books_api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and can reach its database.",
    )
    def health_check() -> dict:
        """
        Health check endpoint for load balancers and monitoring.
        """
        return {
            "status": "healthy",
            "app": settings.app_name,
            "environment": settings.environment,
            "database": "connected" if check_connection() else "unavailable",
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "books": "/books/",
            "docs": app.docs_url,
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m app.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
