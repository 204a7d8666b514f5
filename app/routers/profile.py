from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.schemas.profile import ProfileResponse, ProfileUpdate
from app.models.profile import Profile
from app.models.user import User
from app.database import get_db
from app.routers.auth import get_current_user

router = APIRouter(prefix="/profile", tags=["Profile"])

@router.get("/", response_model=ProfileResponse)
def get_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    db_profile = db.query(Profile).filter(Profile.user_id == current_user.user_id).first()
    if not db_profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return db_profile

@router.put("/", response_model=ProfileResponse)
def update_profile(
    profile: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    db_profile = db.query(Profile).filter(Profile.user_id == current_user.user_id).first()
    if not db_profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    # Only touch the fields the client actually sent
    for field, value in profile.model_dump(exclude_unset=True).items():
        setattr(db_profile, field, value)
    db.commit()
    db.refresh(db_profile)
    return db_profile
