"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.products import router as products_router
from routes.special_prices import router as special_prices_router

__all__ = [
    "products_router",
    "special_prices_router",
]
