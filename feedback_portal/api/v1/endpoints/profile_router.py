# feedback_portal/api/v1/endpoints/profile_router.py
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_portal import crud
from feedback_portal import schemas
from feedback_portal.api.v1.deps import get_current_profile, get_current_user_id
from feedback_portal.db.models import Profile
from feedback_portal.db.session import get_db

router = APIRouter()

@router.post("/", response_model=schemas.Profile, status_code=201)
async def register_profile(
    profile_in: schemas.ProfileCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Register the caller as a student or a faculty member.
    """
    if await crud.get_profile(db=db, user_id=user_id) is not None:
        raise HTTPException(status_code=409, detail="Profile already registered")
    profile = await crud.create_profile(db=db, user_id=user_id, profile_in=profile_in)
    if profile is None:
        raise HTTPException(status_code=409, detail="Profile already registered")
    return profile

@router.get("/me", response_model=schemas.Profile)
async def read_my_profile(profile: Profile = Depends(get_current_profile)):
    return profile
