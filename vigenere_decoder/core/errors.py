"""Error Hierarchy: typed, categorized exceptions for every decoder failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Each concrete error also subclasses the matching builtin (ValueError,
      RuntimeError, IndexError)
    - to_response() produces the REST envelope used by the API error handlers
    - Errors are raised where detected and never caught inside core/

Design Decisions:
    - Single hierarchy with DecoderError base: the FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    STATE = "state"
    RANGE = "range"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and API responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    line_index: int | None = None
    key_length: int | None = None
    details: list[dict[str, Any]] | None = None


class DecoderError(Exception):
    """Base exception for all decoder errors."""

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
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "line_index": self.context.line_index,
                "key_length": self.context.key_length,
            },
        }
        if self.context.details is not None:
            error["details"] = self.context.details
        return {"error": error}


# ─── Caller Errors ──────────────────────────────────────────────

class InvalidArgumentError(DecoderError, ValueError):
    """A required input is missing or malformed."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


class InvalidStateError(DecoderError, RuntimeError):
    """Operation not allowed in the decoder's current state."""
    def __init__(self, message: str, state: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_STATE", ErrorCategory.STATE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.state = state


class OutOfRangeError(DecoderError, IndexError):
    """Line index outside [0, line_count)."""
    def __init__(self, index: Any, size: int, context: ErrorContext | None = None):
        super().__init__(
            f"Line index {index!r} out of range for message with {size} line(s)",
            "OUT_OF_RANGE", ErrorCategory.RANGE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.index = index
        self.size = size
