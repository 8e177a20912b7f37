"""
Product schemas for validation and serialization.
"""

from pydantic import Field
from typing import Optional

from models.base import BaseSchema, Money


class ProductResponse(BaseSchema):
    """
    Catalog product as stored, priced at list price.

    Serialized with the `_id` key the storefront expects.
    """

    id: str = Field(..., alias="_id", description="Product UUID")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Product description")
    price: Money = Field(..., gt=0, description="List price")
    sku: str = Field(..., description="Product SKU (unique identifier)")


class PricedProductResponse(ProductResponse):
    """
    Product as seen by a specific user.

    `price` is the effective price; `has_special_price` tells whether it
    came from an override. Left unset when no user was given so the key is
    omitted from the response.
    """

    has_special_price: Optional[bool] = Field(
        None,
        alias="hasSpecialPrice",
        description="True when price comes from a per-user override"
    )
