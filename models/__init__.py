"""
Pydantic schemas for request/response validation.
"""

from models.base import BaseSchema, Money
from models.product import ProductResponse, PricedProductResponse
from models.special_price import (
    SpecialPriceCreate,
    SpecialPriceResponse,
    SpecialPriceValidationResponse,
)

__all__ = [
    "BaseSchema",
    "Money",
    "ProductResponse",
    "PricedProductResponse",
    "SpecialPriceCreate",
    "SpecialPriceResponse",
    "SpecialPriceValidationResponse",
]
