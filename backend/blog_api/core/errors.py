"""Error Hierarchy — typed exceptions and the uniform error envelope.

Invariants:
    - Every error has a code (ErrorCode), category (ErrorCategory) and HTTP status
    - to_response(path) produces the envelope: timestamp, status, error, message, path
    - message is a string, except for validation failures where it is a
      field -> message mapping
    - Envelope paths never carry a "uri=" prefix

Design Decisions:
    - Single hierarchy with BlogError base: one FastAPI handler covers every
      domain and infrastructure failure that is not translated specifically
    - Envelope built here (pure) rather than in the API layer so services and
      tests can produce it without a request object
"""

from datetime import datetime, timezone
from enum import Enum

from blog_api.core.domain_types import ErrorCode, PostId

URI_PREFIX = "uri="


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


def clean_path(path: str) -> str:
    """Strip a leading "uri=" marker from a request path."""
    return path.removeprefix(URI_PREFIX)


def build_error_envelope(
    status: int,
    error: str,
    message: str | dict[str, str],
    path: str,
    timestamp: datetime | None = None,
) -> dict:
    """Build the uniform error envelope returned to clients."""
    return {
        "timestamp": (timestamp or datetime.now(timezone.utc)).isoformat(),
        "status": status,
        "error": error,
        "message": message,
        "path": clean_path(path),
    }


class BlogError(Exception):
    """Base exception for all blog service errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        category: ErrorCategory,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = code.http_status

    @property
    def envelope_message(self) -> str | dict[str, str]:
        return self.message

    def to_response(self, path: str) -> dict:
        """Convert to the standardized REST error envelope."""
        return build_error_envelope(
            self.http_status, self.code.value, self.envelope_message, path,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class PostValidationError(BlogError):
    """One or more post fields violate their constraints."""
    def __init__(self, violations: dict[str, str]):
        super().__init__(
            f"Invalid fields: {', '.join(violations)}",
            ErrorCode.VALIDATION_ERROR, ErrorCategory.VALIDATION,
        )
        self.violations = violations

    @property
    def envelope_message(self) -> dict[str, str]:
        return dict(self.violations)


class PostNotFoundError(BlogError):
    """No post exists with the requested id."""
    def __init__(self, post_id: PostId | int):
        super().__init__(
            f"Post not found with id: {post_id}",
            ErrorCode.POST_NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
        )
        self.post_id = post_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BlogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            ErrorCode.DATABASE_ERROR, ErrorCategory.DATABASE,
        )
        self.operation = operation
