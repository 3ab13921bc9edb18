# feedback_portal/api/v1/deps.py
import logging
import uuid
from functools import lru_cache
from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from feedback_portal import crud
from feedback_portal.config import settings
from feedback_portal.core.lexicon import bundled_lexicon, load_lexicon
from feedback_portal.core.sentiment import SentimentClassifier
from feedback_portal.db.models import Faculty, Profile, Student
from feedback_portal.db.session import get_db
from feedback_portal.schemas.profile_schema import UserRole

logger = logging.getLogger(__name__)

@lru_cache(maxsize=1)
def get_classifier() -> SentimentClassifier:
    """
    Process-wide classifier: LEXICON_PATH when configured, otherwise the bundled LEXICON_NAME lexicon.
    """
    if settings.LEXICON_PATH:
        return SentimentClassifier(load_lexicon(settings.LEXICON_PATH))
    return SentimentClassifier(bundled_lexicon(settings.LEXICON_NAME))

def get_current_user_id(x_user_id: Optional[uuid.UUID] = Header(None)) -> uuid.UUID:
    """
    Identity of the caller, as forwarded by the authentication gateway.
    """
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Please login to access this portal")
    return x_user_id

async def get_current_profile(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
) -> Profile:
    profile = await crud.get_profile(db=db, user_id=user_id)
    if profile is None:
        raise HTTPException(status_code=401, detail="Profile not found")
    return profile

def _check_role(profile: Profile, role: UserRole) -> None:
    if profile.role != role.value:
        logger.warning(f"Profile {profile.id} with role '{profile.role}' denied access to the {role.value} portal")
        raise HTTPException(status_code=403, detail=f"Unauthorized: This portal is for {role.value} only")

async def get_current_student(
    profile: Profile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db)
) -> Student:
    _check_role(profile, UserRole.STUDENT)
    student = await crud.get_student(db=db, student_id=profile.id)
    if student is None:
        raise HTTPException(status_code=404, detail="Student profile not found")
    return student

async def get_current_faculty(
    profile: Profile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db)
) -> Faculty:
    _check_role(profile, UserRole.FACULTY)
    faculty = await crud.get_faculty(db=db, faculty_id=profile.id)
    if faculty is None:
        raise HTTPException(status_code=404, detail="Faculty profile not found")
    return faculty
