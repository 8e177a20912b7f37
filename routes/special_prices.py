"""
Special price API routes.

Endpoints:
    POST /api/special-prices                      upsert one (user, SKU) override
    GET  /api/special-prices?userId=              list a user's overrides
    GET  /api/special-prices/validate/{userId}    does the user have any
"""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from typing import Optional
import structlog

from models.special_price import (
    SpecialPriceCreate,
    SpecialPriceResponse,
    SpecialPriceValidationResponse,
)
from services.special_price_service import get_special_price_service
from exceptions import AppError

logger = structlog.get_logger(__name__)

router = APIRouter()


# ===================
# EXCEPTION HANDLER
# ===================

def handle_error(e: Exception, message: str) -> JSONResponse:
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
            "message": message,
            "error": {"code": "INTERNAL_ERROR"}
        }
    )


# ===================
# ROUTES
# ===================

@router.post("", response_model=SpecialPriceResponse, status_code=201)
def create_special_price(data: SpecialPriceCreate):
    """
    Create or replace a user's special price for a product.

    Raises:
        400: Price not positive or not below list price
        404: Unknown SKU
    """
    try:
        service = get_special_price_service()
        return service.upsert(data)

    except Exception as e:
        return handle_error(e, "Error creating special price")


@router.get("", response_model=list[SpecialPriceResponse])
def list_special_prices(
    user_id: Optional[str] = Query(None, alias="userId", description="Owner of the overrides")
):
    """
    List a user's special prices.

    Raises:
        400: userId missing
    """
    try:
        service = get_special_price_service()
        return service.get_by_user(user_id)

    except Exception as e:
        return handle_error(e, "Error fetching special prices")


@router.get("/validate/{user_id}", response_model=SpecialPriceValidationResponse)
def validate_special_prices(user_id: str):
    """Tell whether the user has at least one special price."""
    try:
        service = get_special_price_service()
        return SpecialPriceValidationResponse(
            has_special_prices=service.has_special_prices(user_id)
        )

    except Exception as e:
        return handle_error(e, "Error validating special prices")
