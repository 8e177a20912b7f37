"""
Special price (per-user override) schemas.
"""

from pydantic import Field

from models.base import BaseSchema, Money


class SpecialPriceCreate(BaseSchema):
    """
    Create or replace the special price of one (user, SKU) pair.

    Price bounds depend on the product, so they are checked by the service.
    """

    user_id: str = Field(
        ...,
        min_length=1,
        alias="userId",
        description="User the price applies to",
        examples=["user-1"]
    )
    product_sku: str = Field(
        ...,
        min_length=1,
        alias="productSku",
        description="SKU of an existing product",
        examples=["A1"]
    )
    price: Money = Field(
        ...,
        description="Special price, must be positive and below list price",
        examples=[80]
    )


class SpecialPriceResponse(BaseSchema):
    """Stored override."""

    id: str = Field(..., alias="_id", description="Special price UUID")
    user_id: str = Field(..., alias="userId")
    product_sku: str = Field(..., alias="productSku")
    price: Money


class SpecialPriceValidationResponse(BaseSchema):
    """Whether a user has any override at all."""

    has_special_prices: bool = Field(..., alias="hasSpecialPrices")
