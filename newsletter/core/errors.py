"""Error Hierarchy — typed, categorized exceptions for all newsletter failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_log_extra() exposes only fields safe for structured logs
    - HTTP responses never carry error details (handlers emit empty bodies)

Design Decisions:
    - Single hierarchy with NewsletterError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability without coupling to the logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for log correlation."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None


class NewsletterError(Exception):
    """Base exception for all newsletter errors."""

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

    def to_log_extra(self) -> dict:
        return {
            "error_code": self.code,
            "path": self.context.path,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class FormValidationError(NewsletterError):
    """Submitted form is missing a required field or cannot be decoded."""
    def __init__(self, message: str, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields

    def to_log_extra(self) -> dict:
        extra = super().to_log_extra()
        extra["fields"] = self.fields
        return extra


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(NewsletterError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    def to_log_extra(self) -> dict:
        extra = super().to_log_extra()
        extra["operation"] = self.operation
        return extra
