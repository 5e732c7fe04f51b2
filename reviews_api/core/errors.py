"""Error Hierarchy — typed, categorized exceptions for every Reviews API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the public JSON body: {"error": ...} or {"errors": [...]}
    - StorageError keeps driver detail for logs only; its public body is generic

Design Decisions:
    - Single hierarchy with ReviewApiError base: one FastAPI handler renders all of them
    - Raised at the point of detection, rendered once by the response writer
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    DATABASE = "database"
    INTERNAL = "internal"


class ReviewApiError(Exception):
    """Base exception for all Reviews API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public JSON error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class BadRequestError(ReviewApiError):
    """Missing id, malformed body or empty update payload."""
    def __init__(self, message: str):
        super().__init__(message, "BAD_REQUEST", ErrorCategory.BAD_REQUEST, 400)


class ValidationFailedError(ReviewApiError):
    """Field-level validation produced one or more messages."""
    def __init__(self, errors: list[str]):
        super().__init__(
            f"Validation failed: {'; '.join(errors)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        return {"errors": self.errors}


class UnauthorizedError(ReviewApiError):
    """Missing or invalid API key."""
    def __init__(self, message: str):
        super().__init__(message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION, 401)


class NotFoundError(ReviewApiError):
    """Unknown endpoint, unknown resource or missing record."""
    def __init__(self, message: str):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )


class MethodNotAllowedError(ReviewApiError):
    """HTTP method has no review operation."""
    def __init__(self, method: str):
        super().__init__(
            "Method not allowed", "METHOD_NOT_ALLOWED",
            ErrorCategory.METHOD_NOT_ALLOWED, 405,
        )
        self.method = method


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(ReviewApiError):
    """Operation-specific failure reported to the client without detail."""
    def __init__(self, message: str):
        super().__init__(message, "INTERNAL_ERROR", ErrorCategory.INTERNAL, 500)


class StorageError(ReviewApiError):
    """Storage gateway (driver) failure."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {detail}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.detail = detail
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": "Internal server error"}
