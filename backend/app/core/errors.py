"""Error Hierarchy — typed, categorized exceptions for bootstrap failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; connector errors are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all
    - ConnectorError is the only error the lifecycle controller inspects
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    FORBIDDEN = "forbidden"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    origin: str | None = None
    service: str | None = None


class StorefrontError(Exception):
    """Base exception for all Storefront API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

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
                    "path": self.context.path,
                    "origin": self.context.origin,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class OriginNotAllowedError(StorefrontError):
    """Cross-origin request from an origin outside the allow-list."""
    def __init__(self, origin: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.origin = origin
        super().__init__(
            "Not allowed by CORS",
            "CORS_ORIGIN_REJECTED", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, ctx, 403,
        )


# ─── Request Errors raised by the framework ────────────────────

class RequestValidationFailed(StorefrontError):
    """Request body, query or path parameters failed validation."""
    def __init__(
        self, details: list[dict], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class InternalError(StorefrontError):
    """Unexpected failure inside a handler; the cause is logged, never returned."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


# ─── Connector Errors (startup) ─────────────────────────────────

class ConnectorError(StorefrontError):
    """An external service connector failed to connect."""
    def __init__(
        self,
        message: str,
        service: str,
        category: ErrorCategory = ErrorCategory.EXTERNAL_API,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.service = service
        super().__init__(
            f"{service} connection failed: {message}",
            "CONNECTOR_ERROR", category,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.service = service


class DatabaseConnectionError(ConnectorError):
    """Document database unreachable or misconfigured."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "database", ErrorCategory.DATABASE, context)
        self.code = "DATABASE_CONNECTION_ERROR"


class MediaConnectionError(ConnectorError):
    """Media-hosting service unreachable or misconfigured."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "media", ErrorCategory.EXTERNAL_API, context)
        self.code = "MEDIA_CONNECTION_ERROR"
