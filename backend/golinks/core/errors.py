"""Error Hierarchy — typed, categorized exceptions for all golinks failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and not-found errors are 400-level; store and cache failures are 500-level
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GoLinksError base: FastAPI global handler catches all
    - Validation errors also subclass ValueError so pydantic field validators
      report them as field errors without re-wrapping
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    link_name: str | None = None
    debug_info: dict[str, Any] | None = None


class GoLinksError(Exception):
    """Base exception for all golinks errors."""

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
                "context": {"link_name": self.context.link_name},
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(GoLinksError, ValueError):
    """Link name is empty or contains non-alphanumeric characters."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid link name {value!r}: only ASCII letters and digits are allowed",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class InvalidUrlError(GoLinksError, ValueError):
    """Destination is not a well-formed absolute URL."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        super().__init__(
            f"Field `url` is not a valid URL: {value!r}",
            "INVALID_URL", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class LinkNotFoundError(GoLinksError):
    """No link resolves for the requested name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.link_name = name
        super().__init__(
            f"Link '{name}' not found",
            "LINK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class DuplicateLinkError(GoLinksError):
    """A link with the same name already exists in the store."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.link_name = name
        super().__init__(
            f"Link '{name}' already exists",
            "DUPLICATE_LINK", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GoLinksError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class CacheCorruptedError(GoLinksError):
    """The resolution cache lock was poisoned by a failed write."""
    def __init__(self, message: str = "Resolution cache is corrupted", context: ErrorContext | None = None):
        super().__init__(
            message, "CACHE_CORRUPTED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
