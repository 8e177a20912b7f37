"""
Special price service: per-user price overrides.

One row per (user_id, product_sku). Writes go through a single
INSERT ... ON CONFLICT upsert so concurrent writers for the same pair
never create duplicates; the last one wins.
"""

from decimal import Decimal
from typing import Optional
import structlog

from config import get_supabase_client, settings
from models.product import PricedProductResponse
from models.special_price import SpecialPriceCreate, SpecialPriceResponse
from services.product_service import ProductService, get_product_service
from services.price_resolution import list_prices, resolve_effective_prices
from exceptions import (
    DatabaseError,
    InvalidSpecialPriceError,
    MissingUserIdError,
    ProductNotFoundError,
)

logger = structlog.get_logger(__name__)

# Unique constraint backing the upsert
CONFLICT_COLUMNS = "user_id,product_sku"

# Prices are stored with two decimal places
CENT_EXPONENT = -2


class SpecialPriceService:
    """
    Special price business logic.

    Handles upsert, listing, existence checks and pricing the catalog
    for a user. The only reader and writer of the special prices table.
    """

    def __init__(self, product_service: Optional[ProductService] = None):
        self.db = get_supabase_client()
        self.table = settings.special_prices_table
        self.product_service = product_service or get_product_service()

    # ===================
    # READ OPERATIONS
    # ===================

    def get_by_user(self, user_id: Optional[str]) -> list[SpecialPriceResponse]:
        """
        Get all special prices of a user.

        Args:
            user_id: User identifier

        Returns:
            List of SpecialPriceResponse ordered by SKU

        Raises:
            MissingUserIdError: If user_id is missing or blank
        """
        user_id = self._require_user_id(user_id)

        logger.info("getting_special_prices", user_id=user_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("user_id", user_id)
                .order("product_sku")
                .execute()
            )

            special_prices = [SpecialPriceResponse(**row) for row in result.data]

            logger.info(
                "special_prices_retrieved",
                user_id=user_id,
                count=len(special_prices)
            )

            return special_prices

        except Exception as e:
            logger.error(
                "get_special_prices_failed",
                user_id=user_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

    def has_special_prices(self, user_id: str) -> bool:
        """
        Check whether a user has at least one special price.

        Args:
            user_id: User identifier

        Returns:
            True if any override row exists for the user
        """
        logger.debug("checking_special_prices", user_id=user_id)

        try:
            result = (
                self.db.table(self.table)
                .select("id")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
            return bool(result.data)

        except Exception as e:
            logger.error(
                "check_special_prices_failed",
                user_id=user_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

    def get_catalog(self, user_id: Optional[str] = None) -> list[PricedProductResponse]:
        """
        Get the catalog priced for a user.

        Args:
            user_id: Requesting user. None or blank means list prices only.

        Returns:
            Products in catalog order. With a user, each carries the
            effective price and has_special_price.
        """
        products = self.product_service.get_all()

        if not (user_id or "").strip():
            return list_prices(products)

        special_prices = self.get_by_user(user_id)
        resolved = resolve_effective_prices(products, special_prices)

        logger.info(
            "catalog_priced_for_user",
            user_id=user_id.strip(),
            products=len(resolved),
            special_prices=len(special_prices)
        )

        return resolved

    # ===================
    # WRITE OPERATIONS
    # ===================

    def upsert(self, data: SpecialPriceCreate) -> SpecialPriceResponse:
        """
        Create or replace the special price of a (user, SKU) pair.

        Args:
            data: userId, productSku and price

        Returns:
            Stored SpecialPriceResponse

        Raises:
            MissingUserIdError: If user_id is blank
            ProductNotFoundError: If no product has the SKU
            InvalidSpecialPriceError: If price has sub-cent digits, is <= 0
                or is >= list price
        """
        user_id = self._require_user_id(data.user_id)

        logger.info(
            "upserting_special_price",
            user_id=user_id,
            sku=data.product_sku,
            price=str(data.price)
        )

        product = self.product_service.get_by_sku(data.product_sku)
        if product is None:
            raise ProductNotFoundError(data.product_sku)

        self.validate_price(data.product_sku, data.price, product.price)

        try:
            result = (
                self.db.table(self.table)
                .upsert(
                    {
                        "user_id": user_id,
                        "product_sku": product.sku,
                        "price": float(data.price)
                    },
                    on_conflict=CONFLICT_COLUMNS
                )
                .execute()
            )

            special_price = SpecialPriceResponse(**result.data[0])

            logger.info(
                "special_price_upserted",
                special_price_id=special_price.id,
                user_id=user_id,
                sku=special_price.product_sku,
                price=str(special_price.price),
                list_price=str(product.price)
            )

            return special_price

        except Exception as e:
            logger.error(
                "upsert_special_price_failed",
                user_id=user_id,
                sku=data.product_sku,
                error=str(e)
            )
            raise DatabaseError("upsert", str(e))

    # ===================
    # VALIDATION
    # ===================

    @staticmethod
    def validate_price(sku: str, price: Decimal, list_price: Decimal) -> None:
        """
        Check a special price against the product list price.

        Prices are stored as numeric(12, 2), so anything finer than a cent
        is rejected rather than rounded into a different price.

        Raises:
            InvalidSpecialPriceError: If price has sub-cent digits,
                price <= 0 or price >= list_price
        """
        if price.normalize().as_tuple().exponent < CENT_EXPONENT:
            raise InvalidSpecialPriceError(sku, price, reason="precision")
        if price <= 0:
            raise InvalidSpecialPriceError(sku, price, reason="non_positive")
        if price >= list_price:
            raise InvalidSpecialPriceError(sku, price, list_price)

    @staticmethod
    def _require_user_id(user_id: Optional[str]) -> str:
        user_id = (user_id or "").strip()
        if not user_id:
            raise MissingUserIdError()
        return user_id


# Singleton instance for convenience
_special_price_service: Optional[SpecialPriceService] = None

def get_special_price_service() -> SpecialPriceService:
    """Get or create SpecialPriceService instance."""
    global _special_price_service
    if _special_price_service is None:
        _special_price_service = SpecialPriceService()
    return _special_price_service
