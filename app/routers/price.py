# routers/price.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging
from app.database import get_db
from app.models.user import User
from app.routers.auth import get_current_user
from app.schemas.price import PriceRequest, PriceResponse
from app.services.pricing_service import PricingError, calculate_scrap_price

router = APIRouter(prefix="/price", tags=["Price"])
logger = logging.getLogger(__name__)

@router.post("/calculate", response_model=PriceResponse)
def calculate_price(
    body: PriceRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Quote a price for the selected scrap categories and weight.
    The price is always computed server-side from the rate table.
    """
    try:
        quote = calculate_scrap_price(db, body.categories, body.weight)
    except PricingError as e:
        logger.error(f"Price calculation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to calculate price")

    return PriceResponse(
        estimated_price=float(quote.estimated_price),
        confidence_score=quote.confidence_score
    )
