"""Error Hierarchy — typed, categorized exceptions for all registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity);
      the API handler logs at the level the severity names
    - Validation errors (400) carry a per-field list in the same shape as Pydantic failures
    - Infrastructure errors surface as the generic 500 envelope, never with driver text
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with ProducerRegistryError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields travel with the exception
"""

from dataclasses import dataclass
from enum import Enum


INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, logged with every handled error."""
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    producer_id: int | None = None


class ProducerRegistryError(Exception):
    """Base exception for all registry errors."""

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
        if self.http_status >= 500:
            return {"error": INTERNAL_ERROR_MESSAGE}
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class AreaRuleViolationError(ProducerRegistryError):
    """Cultivable plus vegetation area exceeds the total area."""
    def __init__(self, failures: list[dict], context: ErrorContext | None = None):
        super().__init__(
            "Area breakdown exceeds total area",
            "AREA_RULE_VIOLATION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )
        self.failures = failures

    def to_response(self) -> dict:
        return {"errors": self.failures}


class ResourceNotFoundError(ProducerRegistryError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProducerRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
