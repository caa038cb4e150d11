"""Domain Types — identity type and error codes shared across the service.

Invariants:
    - PostId wraps the store-assigned integer id: immutable once assigned
    - Every PostId fits the signed 64-bit id column (POST_ID_MIN..POST_ID_MAX)
    - Every error code exposed to clients is an ErrorCode member with its HTTP status
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)

# Signed 64-bit range of the ids column
POST_ID_MIN = -(2**63)
POST_ID_MAX = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ErrorCode(str, Enum):
    """Client-facing error codes. `http_status` is the response status for each."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.POST_NOT_FOUND: 404,
    ErrorCode.DATABASE_ERROR: 503,
    ErrorCode.INTERNAL_ERROR: 500,
}
