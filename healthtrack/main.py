"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from healthtrack.api.v1.router import api_router
from healthtrack.core.config import settings
from healthtrack.core.errors import (ApiError, InternalError, InvalidUpdate, ValidationFailed, code_for_status,
                                     error_body, validation_details, )
from healthtrack.core.logger import setup_logger

setup_logger(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Health and performance tracking for athletes and the professionals who follow them.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


# ----------------------------------------------------------------------
# Error handlers
# ----------------------------------------------------------------------

def _validation_response(errors: list) -> JSONResponse:
    # Unknown fields on the strict update schemas are reported as a rejected update.
    if errors and all(err.get("type") == "extra_forbidden" for err in errors):
        exc = InvalidUpdate(details=validation_details(errors))
    else:
        exc = ValidationFailed(details=validation_details(errors))
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, ApiError):
        body = exc.to_body()
    else:
        body = error_body(code_for_status(exc.status_code), str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _validation_response(list(exc.errors()))


@app.exception_handler(ValidationError)
async def pydantic_validation_handler(request: Request, exc: ValidationError):
    return _validation_response(exc.errors())


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Constraint violation on {request.method} {request.url.path}: {exc.orig}")
    exc = ValidationFailed("Constraint violation")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=InternalError().to_body())


# ----------------------------------------------------------------------
# Service endpoints
# ----------------------------------------------------------------------

@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "HealthTrack API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health-check")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "healthtrack-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
