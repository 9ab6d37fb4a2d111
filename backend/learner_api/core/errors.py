"""Error Hierarchy - typed, categorized exceptions for every learner API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope; 500-level errors never reach the client
      through it (api/error_handlers.py answers with the generic body instead)

Design Decisions:
    - Single hierarchy with LearnerApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: carries observability fields without touching logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    learner_id: str | None = None


class LearnerApiError(Exception):
    """Base exception for all learner API errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class LearnerValidationError(LearnerApiError):
    """A learner record violates one or more field constraints.

    details: one entry per failed constraint, each {"field", "message", "type"}.
    """
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        fields = ", ".join(d["field"] for d in details)
        super().__init__(
            f"Learner validation failed: {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    @property
    def fields(self) -> list[str]:
        return [d["field"] for d in self.details]

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class MalformedIdentifierError(LearnerApiError):
    """A route identifier could not be parsed into a LearnerId."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{raw}' is not a valid learner identifier",
            "MALFORMED_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw = raw


class LearnerNotFoundError(LearnerApiError):
    """Identifier is well-formed but no learner carries it."""
    def __init__(self, learner_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.learner_id = learner_id
        super().__init__(
            f"Learner '{learner_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(LearnerApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
