"""
Main FastAPI application entry point.

This module creates the FastAPI application instance and configures
all routes, error handlers, and application lifecycle events.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, NoResultFound
import uvicorn
from typing import AsyncGenerator

from hrapp.config.settings import settings
from hrapp.core.database import create_tables
from hrapp.core.logging_config import setup_logging
from hrapp.core.pagination import InvalidPageRequest
from hrapp.services.base import ServiceError, NotFoundError
from hrapp.api.routes import (
    regions, countries, locations, departments,
    employees, tasks, jobs, job_histories,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Configures logging and makes sure the database tables exist before
    the first request is served.
    """
    setup_logging(settings.log_level)
    logger.info("Starting %s", settings.project_name)

    create_tables()
    logger.info("Database tables verified")

    yield

    logger.info("Shutting down %s", settings.project_name)


# Create FastAPI application instance
app = FastAPI(
    title=settings.project_name,
    description="""
    ## HR Entity Services

    CRUD and free-text search over the entities of a small HR domain:
    regions, countries, locations, departments, employees, tasks, jobs
    and job history.

    Every write goes to the database first and is then mirrored into
    the search index; searches are answered by the index alone.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan
)


def _error_response(status_code: int, error: str, detail, request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "detail": detail,
            "path": str(request.url),
            "method": request.method
        }
    )


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError):
    """Map service layer errors to 404 or 400 responses."""
    status_code = status.HTTP_404_NOT_FOUND if isinstance(exc, NotFoundError) else status.HTTP_400_BAD_REQUEST
    return _error_response(status_code, exc.error_code, exc.message, request)


@app.exception_handler(InvalidPageRequest)
async def page_request_exception_handler(request: Request, exc: InvalidPageRequest):
    return _error_response(status.HTTP_400_BAD_REQUEST, "INVALID_PAGE_REQUEST", str(exc), request)


@app.exception_handler(IntegrityError)
async def integrity_exception_handler(request: Request, exc: IntegrityError):
    """Constraint violations are client errors."""
    detail = str(exc.orig) if settings.debug else "Constraint violation"
    return _error_response(status.HTTP_400_BAD_REQUEST, "CONSTRAINT_VIOLATION", detail, request)


@app.exception_handler(NoResultFound)
async def reference_exception_handler(request: Request, exc: NoResultFound):
    """A DTO referenced a related entity that does not exist."""
    return _error_response(status.HTTP_400_BAD_REQUEST, "UNKNOWN_REFERENCE", str(exc), request)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors.

    Provides consistent error responses and logging for debugging.
    """
    logger.exception("Unhandled error on %s %s", request.method, request.url)
    error_detail = str(exc) if settings.debug else "Internal server error"
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", error_detail, request)


# Health check endpoint
@app.get("/health", tags=["System"])
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        Dict containing application health status
    """
    return {
        "status": "healthy",
        "version": "1.0.0",
        "environment": "development" if settings.debug else "production",
        "search_backend": settings.search_backend,
    }


# Include API routers
for module, tag in (
    (regions, "Regions"),
    (countries, "Countries"),
    (locations, "Locations"),
    (departments, "Departments"),
    (employees, "Employees"),
    (tasks, "Tasks"),
    (jobs, "Jobs"),
    (job_histories, "Job History"),
):
    app.include_router(module.router, prefix=settings.api_prefix, tags=[tag])


# Development server entry point
if __name__ == "__main__":
    uvicorn.run(
        "hrapp.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
