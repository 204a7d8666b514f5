import re
from pydantic import ConfigDict, Field, field_validator, model_validator
from typing import Any, Optional, List
from datetime import date, datetime
from app.config import settings
from app.models.constant import PICKUP_TYPES, PAYMENT_METHODS
from app.schemas.base import CamelModel, check_categories, check_weight
from app.utils import sanitize_text

OTP_PATTERN = re.compile(r"[0-9]{4}")

def _location_length_ok(value: str) -> bool:
    return settings.MIN_LOCATION_LENGTH <= len(value) <= settings.MAX_LOCATION_LENGTH

class TransactionCreate(CamelModel):
    categories: Optional[List[str]] = Field(default=None, validate_default=True)
    weight: Optional[float] = Field(default=None, validate_default=True)
    location: Optional[str] = Field(default=None, validate_default=True)
    pickup_date: Optional[date] = Field(default=None, validate_default=True)
    pickup_time: Optional[str] = Field(default=None, validate_default=True)
    pickup_type: Optional[str] = Field(default=None, validate_default=True)
    payment_method: Optional[str] = Field(default=None, validate_default=True)
    # Required for UPI payments only, ignored otherwise
    otp: Optional[Any] = None

    @field_validator("categories", mode="before")
    def validate_categories(cls, v):
        return check_categories(v)

    @field_validator("weight", mode="before")
    def validate_weight(cls, v):
        return check_weight(v)

    @field_validator("location", mode="before")
    def validate_location(cls, v):
        message = (
            f"Location must be between {settings.MIN_LOCATION_LENGTH} "
            f"and {settings.MAX_LOCATION_LENGTH} characters"
        )
        if not isinstance(v, str) or not _location_length_ok(v):
            raise ValueError(message)
        # Bounds hold for the stored value too
        cleaned = sanitize_text(v)
        if not _location_length_ok(cleaned):
            raise ValueError(message)
        return cleaned

    @field_validator("pickup_date", mode="before")
    def validate_pickup_date(cls, v):
        """Accept an ISO date or an ISO datetime; only the calendar date is kept."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Invalid pickup date")
        value = v.strip()
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValueError("Invalid pickup date") from None

    @field_validator("pickup_time", mode="before")
    def validate_pickup_time(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Pickup time is required")
        if len(v.strip()) > 50:
            raise ValueError("Pickup time must be at most 50 characters")
        return v.strip()

    @field_validator("pickup_type", mode="before")
    def validate_pickup_type(cls, v):
        if v not in PICKUP_TYPES:
            raise ValueError("Invalid pickup type")
        return v

    @field_validator("payment_method", mode="before")
    def validate_payment_method(cls, v):
        if v not in PAYMENT_METHODS:
            raise ValueError("Invalid payment method")
        return v

    @model_validator(mode="after")
    def validate_upi_otp(self):
        # Format check only, there is no OTP provider behind it
        if self.payment_method == "upi":
            if not isinstance(self.otp, str) or not OTP_PATTERN.fullmatch(self.otp):
                raise ValueError("Valid 4-digit OTP is required for UPI payments")
        return self

class TransactionCreateResponse(CamelModel):
    transaction_id: str
    estimated_price: float
    status: str

class TransactionResponse(CamelModel):
    transaction_id: str
    categories: List[str]
    weight_kg: float
    location: str
    estimated_price: float
    confidence_score: int
    pickup_date: date
    pickup_time: str
    pickup_type: str
    payment_method: str
    status: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class TransactionHistoryResponse(CamelModel):
    transactions: List[TransactionResponse]
    total: int
