from pydantic import Field, field_validator
from typing import Optional
from app.schemas.base import CamelModel

class WeightEstimateRequest(CamelModel):
    image_base64: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("image_base64", mode="before")
    def validate_image(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError("imageBase64 is required")
        return v

class WeightEstimateResponse(CamelModel):
    weight: float
    category: str
    confidence: float
