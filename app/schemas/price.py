from typing import List, Optional
from pydantic import Field, field_validator
from app.schemas.base import CamelModel, check_categories, check_weight

class PriceRequest(CamelModel):
    categories: Optional[List[str]] = Field(default=None, validate_default=True)
    weight: Optional[float] = Field(default=None, validate_default=True)

    @field_validator("categories", mode="before")
    def validate_categories(cls, v):
        return check_categories(v)

    @field_validator("weight", mode="before")
    def validate_weight(cls, v):
        return check_weight(v)

class PriceResponse(CamelModel):
    estimated_price: float
    confidence_score: int
