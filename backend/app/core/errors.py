"""Error Hierarchy — typed, categorized exceptions for every counter failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope {success: false, message}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CounterError base: FastAPI global handler catches all
    - DatabaseError is raised by infrastructure/database.py for any SQLAlchemy
      failure; routes re-raise it as CounterOperationError with a generic,
      route-specific message
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"
    STARTUP = "startup"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    counter: str | None = None
    key: str | None = None


class CounterError(Exception):
    """Base exception for all counter service errors."""

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
        """Convert to the REST error envelope."""
        return {"success": False, "message": self.message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CounterError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class CounterOperationError(CounterError):
    """A counter read or write could not be completed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "COUNTER_OPERATION_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.ERROR, context, 500,
        )


class StartupError(CounterError):
    """Database unreachable or schema creation failed during bootstrap."""
    def __init__(self, message: str):
        super().__init__(
            message, "STARTUP_FAILED", ErrorCategory.STARTUP,
            ErrorSeverity.CRITICAL, None, 500,
        )
