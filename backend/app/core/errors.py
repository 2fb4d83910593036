"""Error Hierarchy — typed, categorized exceptions for Copy Updater failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; upstream/internal errors (500-level) are critical
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CopyUpdaterError base: FastAPI global handler catches all (ADR: uniform error shape)
    - "Not found" is NOT raised by the todo store (normal None/False result);
      the API layer raises ResourceNotFoundError when it needs a 404
    - Upstream SDK exceptions are never wrapped where they occur; the API layer
      builds UpstreamAPIError only to render the response envelope
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    upstream_status: int | None = None


class CopyUpdaterError(Exception):
    """Base exception for all Copy Updater errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.headers = headers

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_id": self.context.resource_id,
                    "upstream_status": self.context.upstream_status,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class UnauthorizedError(CopyUpdaterError):
    """Bad API key, or missing/invalid/expired bearer token."""
    def __init__(self, message: str = "Unauthorized", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ResourceNotFoundError(CopyUpdaterError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Upstream Errors (500-level) ────────────────────────────────

class UpstreamAPIError(CopyUpdaterError):
    """Text-generation service call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        upstream_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = upstream_status
        super().__init__(
            f"Text generation service error ({api_error_type}): {message}",
            "UPSTREAM_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
