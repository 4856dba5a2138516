"""Error Hierarchy — the canonical error payload and typed client-side failure modes.

Invariants:
    - ApiError {message, code?, field?} is the ONLY failure payload handed to callers
    - Every ClientError has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ClientError subclasses never cross the API client boundary: to_api_error()
      converts them into ApiError data before returning
    - ResultUnwrapError is raised on the caller's side only (Result.unwrap)

Design Decisions:
    - Single hierarchy with ClientError base: one except clause at the boundary
    - Structured error shape over plain strings: code/field survive from backend bodies
    - ErrorContext as dataclass: request details for logging without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel


class ApiError(BaseModel):
    """Structured failure payload carried by a Failure envelope."""

    model_config = {"frozen": True}

    message: str
    code: str | None = None
    field: str | None = None


class ErrorSeverity(str, Enum):
    """Error severity — selects the log level used when a failure is normalized."""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level failure categories of a single API call."""
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DESERIALIZATION = "deserialization"
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request details attached to a failure for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    url: str | None = None
    status_code: int | None = None

    def to_log_extra(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "status_code": self.status_code,
        }


class ClientError(Exception):
    """Base exception for every failure the API client normalizes."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.field = field
        self.context = context or ErrorContext()

    def to_api_error(self) -> ApiError:
        """Convert to the canonical structured error payload."""
        return ApiError(message=self.message, code=self.code, field=self.field)


# ─── Request-side failures ───────────────────────────────────────

class InvalidRequestError(ClientError):
    """Caller supplied headers or a body the client refuses to send."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, field, context,
        )


# ─── Response-side failures ──────────────────────────────────────

class TransportFailure(ClientError):
    """Network unreachable, DNS failure, refused connection, or transport timeout."""
    def __init__(
        self, message: str, timed_out: bool = False, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "TIMEOUT" if timed_out else "TRANSPORT_ERROR",
            ErrorCategory.TRANSPORT, ErrorSeverity.WARNING, None, context,
        )
        self.timed_out = timed_out


class HttpStatusFailure(ClientError):
    """Response status outside the 2xx range."""
    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        code: str | None = None,
        field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or f"HTTP error! status: {status_code}",
            code or f"HTTP_{status_code}",
            ErrorCategory.HTTP_STATUS, ErrorSeverity.WARNING, field, context,
        )
        self.status_code = status_code


class DeserializationFailure(ClientError):
    """Success status, but the body is not JSON or not the expected shape."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DESERIALIZATION_ERROR", ErrorCategory.DESERIALIZATION,
            ErrorSeverity.ERROR, None, context,
        )


class InternalClientError(ClientError):
    """Anything unexpected raised while performing a call."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, None, context,
        )


# ─── Caller-side ─────────────────────────────────────────────────

class ResultUnwrapError(Exception):
    """Raised by Result.unwrap() when the envelope is a Failure."""

    def __init__(self, error: ApiError):
        super().__init__(error.message)
        self.error = error
