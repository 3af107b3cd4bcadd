"""Error Hierarchy — typed, categorized exceptions for all Movie Club failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it maps to
    - TextBodyError subclasses render as plain text, everything else as a JSON envelope
    - SignupValidationError keeps violations in rule order

Design Decisions:
    - Single hierarchy with MovieClubError base: one global handler catches all
    - Store, duplicate and not-found errors answer in plain text, matching the
      bodies the mobile and web clients already parse
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from movie_club.core.domain_types import FieldViolation


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    username: str | None = None
    path: str | None = None


class MovieClubError(Exception):
    """Base exception for all Movie Club errors."""

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


class TextBodyError(MovieClubError):
    """Error whose response body is a bare text line."""

    def to_text(self) -> str:
        return self.message


# ─── Client Errors (400-level) ──────────────────────────────────

class AuthenticationError(MovieClubError):
    """Bearer token missing, malformed, expired, or not resolvable to a user."""
    def __init__(self, reason: str = "Unauthorized", context: ErrorContext | None = None):
        super().__init__(
            reason, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidCredentialsError(MovieClubError):
    """Login attempted with an unknown username or wrong password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Incorrect username or password.", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 400,
        )


class SignupValidationError(MovieClubError):
    """One or more account-creation fields failed their checks."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{len(violations)} field(s) failed validation",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 422,
        )
        self.violations = violations

    def to_response(self) -> dict:
        return {"errors": [v.to_dict() for v in self.violations]}


class DuplicateUsernameError(TextBodyError):
    """Signup attempted with a Username that is already taken."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        # No separator between name and text.
        super().__init__(
            f"{username}already exists", "DUPLICATE_USERNAME",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, context, 400,
        )
        self.username = username


class UserNotFoundError(TextBodyError):
    """Account removal targeted a user that does not exist."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            f"{username} was not found", "USER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, context, 400,
        )
        self.username = username


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreError(TextBodyError):
    """Data store operation failed. Status depends on the route."""
    def __init__(
        self, detail: str, http_status: int = 500, context: ErrorContext | None = None,
    ):
        super().__init__(
            detail, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, http_status,
        )

    def to_text(self) -> str:
        return f"Error: {self.message}"
