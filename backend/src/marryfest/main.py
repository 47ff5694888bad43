"""MarryFest Backend - Main FastAPI Application

This module creates and configures the FastAPI application, including:
- API routers (profiles, interests, matches)
- Middleware (request ID correlation, CORS)
- Exception handlers translating domain errors to HTTP responses
- Health endpoint
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError

from .config import get_settings
from .domain.errors import (
    DuplicateError,
    InvalidInputError,
    MatrimonyError,
    NotFoundError,
    NotificationFailedError,
)
from .observability.logging_config import configure_logging
from .observability.middleware import RequestIDMiddleware
from .observability.router import router as observability_router
from .profiles.router import router as profiles_router
from .interests.router import router as interests_router
from .matches.router import router as matches_router

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

logger = logging.getLogger(__name__)

# Domain error -> (HTTP status, error code); first isinstance match wins
DOMAIN_ERROR_STATUS = (
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (DuplicateError, status.HTTP_409_CONFLICT, "duplicate"),
    (NotificationFailedError, status.HTTP_502_BAD_GATEWAY, "notification_failed"),
    (InvalidInputError, status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid_input"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("MarryFest API starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    yield

    logger.info("MarryFest API shutting down...")


app = FastAPI(
    title="MarryFest API",
    description="Matrimony matching: compatible candidates, interests and matches",
    version="0.1.0",
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    lifespan=lifespan,
)


# =============================================================================
# MIDDLEWARE CONFIGURATION
# =============================================================================

app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(MatrimonyError)
async def domain_exception_handler(request: Request, exc: MatrimonyError) -> JSONResponse:
    """Translate domain errors into HTTP responses.

    Expected business outcomes (not found, duplicates) log at INFO; a failed
    notification logs at WARNING since it points at the mail provider.
    """
    status_code, error_code = status.HTTP_400_BAD_REQUEST, "domain_error"
    for error_type, mapped_status, mapped_code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            status_code, error_code = mapped_status, mapped_code
            break

    log = logger.warning if isinstance(exc, NotificationFailedError) else logger.info
    log(
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}",
        extra={"status_code": status_code},
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": error_code, "message": str(exc)},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors with field-level details."""
    logger.warning(f"Validation error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(
    request: Request,
    exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database errors.

    Logs the full error but returns a generic message to prevent
    information leakage.
    """
    logger.error(
        f"Database error on {request.method} {request.url.path}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "database_error",
            "message": "A database error occurred. Please try again later.",
        },
    )


# =============================================================================
# ROUTER REGISTRATION
# =============================================================================

app.include_router(observability_router)
app.include_router(profiles_router, prefix="/api/v1")
app.include_router(interests_router, prefix="/api/v1")
app.include_router(matches_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root() -> dict[str, Any]:
    """Root endpoint - API information."""
    return {
        "name": "MarryFest API",
        "version": "0.1.0",
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "marryfest.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
