"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bankledger import __version__
from bankledger.app_context import AppContext
from bankledger.config.settings import get_settings
from bankledger.config.logging_config import setup_logging
from bankledger.api.routers import accounts_router, auth_router, transfers_router
from bankledger.core.exceptions import AppError, StoreUnavailableError

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = "1"


def _error_response(exc: AppError) -> JSONResponse:
    headers = {"Retry-After": RETRY_AFTER_SECONDS} if exc.retryable else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
        headers=headers,
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. "body.amount: Field required"."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Pre-built AppContext (tests pass one bound to their own
            engine). When omitted, one is built from settings at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging(settings)
        owns_context = context is None
        if owns_context:
            app.state.context = AppContext()
            app.state.context.create_schema()
        else:
            app.state.context = context
        logger.info("%s %s started", settings.app_name, __version__)
        yield
        # Shutdown
        if owns_context:
            app.state.context.close()

    settings = context.settings if context else get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Minimal banking ledger with atomic funds transfer",
        version=__version__,
        lifespan=lifespan,
    )
    if context is not None:
        app.state.context = context

    # Include routers
    app.include_router(accounts_router)
    app.include_router(auth_router)
    app.include_router(transfers_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed request bodies and parameters, in the common error shape."""
        return JSONResponse(
            status_code=422,
            content={
                "error": "VALIDATION_ERROR",
                "message": _describe_validation_errors(exc),
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Store failures outside a unit of work; driver details stay in the log."""
        logger.exception("Unhandled store error on %s %s", request.method, request.url.path)
        return _error_response(StoreUnavailableError())

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_app()
