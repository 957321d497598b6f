"""Error Handlers — global exception handlers for the newsletter API.

Invariants:
    - NewsletterError → its http_status, empty body
    - RequestValidationError → 400, empty body
    - Framework HTTPException (undecodable form, 404, 405) → its status, empty body
    - Exception (catch-all) → 500, empty body; never leaks internal details
    - Client errors logged below ERROR: they are not server faults

Design Decisions:
    - Four-layer handler: domain (NewsletterError), validation (Pydantic),
      framework (HTTPException), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsletter.core.errors import NewsletterError, ErrorSeverity

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.INFO,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_newsletter_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_exception_handler(app)
    _register_generic_error_handler(app)


def _register_newsletter_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NewsletterError)
    async def newsletter_error_handler(request: Request, exc: NewsletterError):
        """Handle all newsletter domain/infrastructure errors."""
        exc.context.path = request.url.path
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra=exc.to_log_extra(),
        )
        return Response(status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.info(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


def _register_http_exception_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
        )
        return Response(status_code=exc.status_code, headers=exc.headers)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
