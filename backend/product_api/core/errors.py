"""Error Hierarchy — typed exceptions for every Product API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the REST body for the global error handler
    - Validation errors answer {"errors": [...]}, everything else {"error": "..."}
      (the two shapes are never unified)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ProductApiError base: one FastAPI handler catches all
"""

from enum import Enum
from typing import Any


PRODUCT_NOT_FOUND = "Product Not Found"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and log filtering."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class ProductApiError(Exception):
    """Base exception for all Product API errors."""

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

    def to_response(self) -> dict[str, Any]:
        """Convert to REST error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(ProductApiError):
    """One or more declared rules were violated by the request."""
    def __init__(self, violations: list):
        if not violations:
            raise ValueError("RequestValidationFailed requires at least one violation")
        super().__init__(
            f"{len(violations)} validation error(s)",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.violations = violations

    def to_response(self) -> dict[str, Any]:
        return {"errors": [v.to_dict() for v in self.violations]}


class ProductNotFoundError(ProductApiError):
    """Referenced product id has no matching record."""
    def __init__(self, product_id: int):
        super().__init__(
            PRODUCT_NOT_FOUND, "PRODUCT_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 503,
        )
        self.operation = operation
