"""Error Hierarchy — typed, categorized exceptions for all contact book failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() always produces {"error": "<message>"}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ContactBookError base: FastAPI global handler catches all
    - ErrorContext.user_message overrides the client-facing text, so a route can
      pick "Failed to add contact." without losing the logged storage detail
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
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
    """Context carried alongside an error for logs and client messages."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    contact_id: int | None = None
    operation: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ContactBookError(Exception):
    """Base exception for all contact book errors."""

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

    @property
    def public_message(self) -> str:
        return self.context.user_message or self.message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.public_message}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldsError(ContactBookError):
    """Create request lacks name, email or phone."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Name, email, and phone are required.",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.missing = missing
        self.context.debug_info = {"missing_fields": missing}


class DuplicateEmailError(ContactBookError):
    """Email already belongs to a stored contact."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "A contact with this email already exists.",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class ContactNotFoundError(ContactBookError):
    """No contact with the requested id."""
    def __init__(self, contact_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Contact not found.",
            "CONTACT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.contact_id = contact_id


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(ContactBookError):
    """Database operation failed for any reason other than a duplicate email."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        if ctx.user_message is None:
            ctx.user_message = "An unexpected error occurred."
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
