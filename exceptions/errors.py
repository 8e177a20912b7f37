"""
Custom exception classes for the application.

Every error reaching the HTTP layer is rendered as:

    {"message": "...", "error": {"code": ..., "details": ..., "timestamp": ...}}
"""

from typing import Optional, Any
from datetime import datetime
from decimal import Decimal


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        code: Error code (e.g., "PRODUCT_NOT_FOUND")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.utcnow().isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class NotFoundError(AppError):
    """Resource not found (404)."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=f"{resource} not found",
            status_code=404,
            details={"id": identifier}
        )


class ValidationError(AppError):
    """Validation failed (400)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=400,
            details=details
        )


class DatabaseError(AppError):
    """Database operation failed (500)."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="DATABASE_ERROR",
            message=f"Database {operation} failed: {message}",
            status_code=500,
            details={"operation": operation, **(details or {})}
        )


# ===================
# PRODUCT ERRORS
# ===================

class ProductNotFoundError(NotFoundError):
    """No product with the given SKU."""

    def __init__(self, sku: str):
        super().__init__(
            resource="Product",
            identifier=sku,
            code="PRODUCT_NOT_FOUND"
        )


# ===================
# SPECIAL PRICE ERRORS
# ===================

class MissingUserIdError(ValidationError):
    """userId was omitted or blank."""

    def __init__(self):
        super().__init__(
            code="USER_ID_REQUIRED",
            message="userId is required"
        )


class InvalidSpecialPriceError(ValidationError):
    """Special price is not a positive amount in cents below the list price."""

    MESSAGES = {
        "precision": "Special price cannot have more than two decimal places",
        "non_positive": "Special price must be greater than zero",
        "not_below_list_price": "Special price must be lower than the product list price",
    }

    def __init__(
        self,
        sku: str,
        price: Decimal,
        list_price: Optional[Decimal] = None,
        reason: str = "not_below_list_price"
    ):
        super().__init__(
            code="INVALID_SPECIAL_PRICE",
            message=self.MESSAGES[reason],
            details={
                "sku": sku,
                "price": str(price),
                "list_price": str(list_price) if list_price is not None else None,
                "reason": reason
            }
        )
