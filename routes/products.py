"""
Product API routes.
"""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from typing import Optional
import structlog

from models.product import PricedProductResponse
from services.special_price_service import get_special_price_service
from exceptions import AppError

logger = structlog.get_logger(__name__)

router = APIRouter()


# ===================
# EXCEPTION HANDLER
# ===================

def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    if isinstance(e, AppError):
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )
    # Unexpected error
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "message": "Error fetching products",
            "error": {"code": "INTERNAL_ERROR"}
        }
    )


# ===================
# ROUTES
# ===================

@router.get(
    "",
    response_model=list[PricedProductResponse],
    response_model_exclude_none=True
)
def list_products(
    user_id: Optional[str] = Query(
        None,
        alias="userId",
        description="Price the catalog for this user"
    )
):
    """
    List the catalog.

    With userId, each product carries the user's effective price and a
    hasSpecialPrice flag. Without it, list prices are returned unchanged.
    """
    try:
        service = get_special_price_service()
        return service.get_catalog(user_id)

    except Exception as e:
        return handle_error(e)
