"""
Business logic services.

Each service handles one domain area.
"""

from services.product_service import ProductService, get_product_service
from services.special_price_service import SpecialPriceService, get_special_price_service
from services.price_resolution import resolve_effective_prices, list_prices

__all__ = [
    "ProductService",
    "get_product_service",
    "SpecialPriceService",
    "get_special_price_service",
    "resolve_effective_prices",
    "list_prices",
]
