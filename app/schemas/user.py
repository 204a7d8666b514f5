from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from typing import Optional
from datetime import datetime
from app.config import settings
from app.schemas.base import CamelModel

class UserCreate(CamelModel):
    email: EmailStr
    password: str
    username: Optional[str] = None
    display_name: Optional[str] = None

    @field_validator("password")
    def validate_password(cls, v):
        if len(v) < settings.MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters")
        return v

class UserResponse(CamelModel):
    user_id: int
    email: str
    username: Optional[str] = None
    is_verified: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
