"""Error Handlers — global exception handlers for the Copy Updater API.

Invariants:
    - CopyUpdaterError → structured JSON with error code, message, severity (+ its headers)
    - RequestValidationError → 400 with field-level error details
    - anthropic.APIError (propagated by the rewriter) → 502 UPSTREAM_API_ERROR envelope
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, upstream SDK, catch-all
    - Upstream mapping happens here, not in the service: the service re-raises
      the SDK exception unmodified, the gateway decides the HTTP shape
"""

import logging

import anthropic
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import CopyUpdaterError, ErrorSeverity, UpstreamAPIError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_upstream_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Copy Updater domain error handler."""

    @app.exception_handler(CopyUpdaterError)
    async def domain_error_handler(request: Request, exc: CopyUpdaterError):
        """Handle all Copy Updater domain errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CopyUpdaterError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=exc.headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_upstream_error_handler(app: FastAPI) -> None:
    """Register text-generation SDK error handler."""

    @app.exception_handler(anthropic.APIError)
    async def upstream_error_handler(request: Request, exc: anthropic.APIError):
        """Render an upstream failure without exposing provider internals."""
        error = UpstreamAPIError(
            _describe_upstream_error(exc),
            type(exc).__name__,
            upstream_status=getattr(exc, "status_code", None),
        )
        logger.error(
            f"Upstream failure on {request.url.path}: {exc}",
            extra={
                "error_code": error.code,
                "path": request.url.path,
                "upstream_status": error.context.upstream_status,
            },
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _describe_upstream_error(exc: anthropic.APIError) -> str:
    if isinstance(exc, anthropic.APITimeoutError):
        return "request timed out"
    if isinstance(exc, anthropic.APIConnectionError):
        return "could not reach service"
    if isinstance(exc, anthropic.RateLimitError):
        return "rate limit exceeded"
    if isinstance(exc, (anthropic.AuthenticationError, anthropic.PermissionDeniedError)):
        return "service rejected credentials"
    return "request failed"


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
