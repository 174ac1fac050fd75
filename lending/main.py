"""FastAPI application for the library lending service."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from lending.config import Settings, configure_logging, get_settings
from lending.database import create_tables, dispose_engine, initialize_database
from lending.domain.common.exceptions import (
    ConflictError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from lending.infrastructure.borrowers.routers import borrowers
from lending.infrastructure.catalog.routers import catalog_entries
from lending.infrastructure.common.routers import health
from lending.infrastructure.common.schemas import ErrorResponse
from lending.infrastructure.library.routers import books

logger = structlog.get_logger(__name__)

# Error kind and status code per domain error family, most specific first
_DOMAIN_ERROR_RESPONSES: tuple[tuple[type[DomainError], int, str], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST, "ValidationError"),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, "NotFound"),
    (ConflictError, status.HTTP_409_CONFLICT, "Conflict"),
)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate a domain error into its HTTP status and error body."""
    for error_type, status_code, error in _DOMAIN_ERROR_RESPONSES:
        if isinstance(exc, error_type):
            break
    else:
        status_code, error = status.HTTP_400_BAD_REQUEST, "DomainError"

    logger.warning(
        "request_failed",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        error=error,
        message=str(exc),
    )
    return _error_response(status_code, error, str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "InternalError", "An unexpected error occurred."
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings (defaults to the environment)."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("starting", project=settings.PROJECT_NAME, version=settings.VERSION)
        initialize_database(settings)
        if settings.DATABASE_CREATE_TABLES:
            await create_tables()
        yield
        await dispose_engine()
        logger.info("stopped", project=settings.PROJECT_NAME)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        lifespan=lifespan,
    )

    # Route the session factory dependency to these settings rather than the cached defaults
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health.router)
    app.include_router(borrowers.router, prefix=settings.API_V1_PREFIX)
    app.include_router(books.router, prefix=settings.API_V1_PREFIX)
    app.include_router(catalog_entries.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()
