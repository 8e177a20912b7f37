"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,
    DatabaseError,

    # Product-specific
    ProductNotFoundError,

    # Special prices
    MissingUserIdError,
    InvalidSpecialPriceError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",
    "DatabaseError",

    # Product
    "ProductNotFoundError",

    # Special prices
    "MissingUserIdError",
    "InvalidSpecialPriceError",
]
