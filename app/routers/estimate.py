from fastapi import APIRouter, Depends, HTTPException
import logging
from app.models.user import User
from app.routers.auth import get_current_user
from app.schemas.estimate import WeightEstimateRequest, WeightEstimateResponse
from app.services.weight_service import (
    AIGatewayError,
    ImageValidationError,
    estimate_scrap_weight,
    validate_image,
)

router = APIRouter(prefix="/estimate", tags=["Estimate"])
logger = logging.getLogger(__name__)

@router.post("/weight", response_model=WeightEstimateResponse)
def estimate_weight(
    body: WeightEstimateRequest,
    current_user: User = Depends(get_current_user)
):
    """Estimate weight and category of the scrap in an uploaded photo"""
    try:
        validate_image(body.image_base64)
    except ImageValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result = estimate_scrap_weight(body.image_base64)
    except AIGatewayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return WeightEstimateResponse(**result)
