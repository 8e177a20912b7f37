"""
Product service for catalog reads.
"""

from typing import Optional
import structlog

from config import get_supabase_client, settings
from models.product import ProductResponse
from exceptions import DatabaseError

logger = structlog.get_logger(__name__)


class ProductService:
    """
    Catalog business logic.

    Products are read-only here; they are loaded into the store elsewhere.
    """

    def __init__(self):
        self.db = get_supabase_client()
        self.table = settings.products_table

    # ===================
    # READ OPERATIONS
    # ===================

    def get_all(self) -> list[ProductResponse]:
        """
        Get the full catalog ordered by SKU.

        Returns:
            List of ProductResponse at list price
        """
        logger.info("getting_products")

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .order("sku")
                .execute()
            )

            products = [ProductResponse(**row) for row in result.data]

            logger.info("products_retrieved", count=len(products))

            return products

        except Exception as e:
            logger.error(
                "get_products_failed",
                error=str(e)
            )
            raise DatabaseError("select", str(e))

    def get_by_sku(self, sku: str) -> Optional[ProductResponse]:
        """
        Get a product by SKU.

        Args:
            sku: Product SKU, matched exactly

        Returns:
            ProductResponse or None if not found
        """
        logger.debug("getting_product_by_sku", sku=sku)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("sku", sku)
                .limit(1)
                .execute()
            )

            if not result.data:
                return None

            return ProductResponse(**result.data[0])

        except Exception as e:
            logger.error(
                "get_product_by_sku_failed",
                sku=sku,
                error=str(e)
            )
            raise DatabaseError("select", str(e))


# Singleton instance for convenience
_product_service: Optional[ProductService] = None

def get_product_service() -> ProductService:
    """Get or create ProductService instance."""
    global _product_service
    if _product_service is None:
        _product_service = ProductService()
    return _product_service
