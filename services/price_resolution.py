"""
Effective price resolution.

Pure functions: no database access, inputs are never mutated.

Rules:
    - Product with an override for the user -> override price, has_special_price=True
    - Product without override -> list price, has_special_price=False
    - No user -> list prices, has_special_price left unset
"""

from decimal import Decimal
from typing import Iterable

from models.product import ProductResponse, PricedProductResponse
from models.special_price import SpecialPriceResponse


def index_by_sku(special_prices: Iterable[SpecialPriceResponse]) -> dict[str, Decimal]:
    """Map product SKU to override price. A later entry for the same SKU wins."""
    return {sp.product_sku: sp.price for sp in special_prices}


def list_prices(products: Iterable[ProductResponse]) -> list[PricedProductResponse]:
    """Catalog as-is, for requests without a user."""
    return [PricedProductResponse(**product.model_dump()) for product in products]


def resolve_effective_prices(
    products: Iterable[ProductResponse],
    special_prices: Iterable[SpecialPriceResponse]
) -> list[PricedProductResponse]:
    """
    Apply one user's overrides to the catalog.

    Args:
        products: Catalog, in display order
        special_prices: Overrides belonging to a single user

    Returns:
        One entry per product, same order as `products`
    """
    overrides = index_by_sku(special_prices)

    resolved = []
    for product in products:
        data = product.model_dump()
        special_price = overrides.get(product.sku)

        if special_price is not None:
            data["price"] = special_price

        resolved.append(
            PricedProductResponse(
                **data,
                has_special_price=special_price is not None
            )
        )

    return resolved
