"""Error Hierarchy — typed, categorized exceptions for dashboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by api/error_handlers.py
    - No internal details leaked in user-facing messages (causes are logged, not attached)

Design Decisions:
    - Single hierarchy with DashboardError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - AuthError carries a `type` string mirroring the identity layer's classification,
      so callers classify by type and never by message text
    - Navigation is NOT an error: see core/action_outcome.py
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    invoice_id: str | None = None
    action: str | None = None
    debug_info: dict[str, Any] | None = None


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

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
                    "invoice_id": self.context.invoice_id,
                    "action": self.context.action,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(DashboardError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class AuthErrorType(str, Enum):
    """Failure classes the identity layer can report."""
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    INVALID_PROVIDER = "InvalidProvider"
    ACCESS_DENIED = "AccessDenied"


class AuthError(DashboardError):
    """Classified failure raised by the identity layer."""
    def __init__(
        self,
        error_type: AuthErrorType,
        message: str = "Authentication failed",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.type = error_type


class CredentialsSignin(AuthError):
    """Submitted credentials did not match a user."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            AuthErrorType.CREDENTIALS_SIGNIN, "Credentials rejected", context,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DashboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class InvoiceMutationError(DashboardError):
    """An invoice write statement failed. Message is safe to show the user."""
    def __init__(self, message: str, action: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.action = action
        super().__init__(
            message, "INVOICE_MUTATION_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.action = action
