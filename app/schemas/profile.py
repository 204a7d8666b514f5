from pydantic import ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel

class ProfileUpdate(CamelModel):
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("display_name")
    def validate_display_name(cls, v):
        if v is not None and len(v.strip()) > 100:
            raise ValueError("Display name must be at most 100 characters")
        return v.strip() if v is not None else v

    @field_validator("avatar_url")
    def validate_avatar_url(cls, v):
        if v is None:
            return v
        if not v.startswith(("http://", "https://")) or len(v) > 500:
            raise ValueError("Avatar URL must be an http(s) URL of at most 500 characters")
        return v

class ProfileResponse(CamelModel):
    user_id: int
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
