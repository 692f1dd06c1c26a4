"""Error Hierarchy — typed, categorized exceptions for landing zone failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) never carry internal details
    - to_response() produces the REST error envelope

Design Decisions:
    - Single hierarchy with LandingZoneError base: one global handler catches all
    - ErrorContext as dataclass: observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    zone: str | None = None


class LandingZoneError(Exception):
    """Base exception for all landing zone errors."""

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
                "context": {"zone": self.context.zone},
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidZoneError(LandingZoneError):
    """Zone identifier is not one of the accepted zones."""
    def __init__(self, zone: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.zone = zone
        super().__init__(
            "Not a valid zone", "INVALID_ZONE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class ZoneNotFoundError(LandingZoneError):
    """Zone is accepted but no rover coordinates are recorded for it."""
    def __init__(self, zone: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.zone = zone
        super().__init__(
            f"No coordinates recorded for zone '{zone}'",
            "ZONE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
