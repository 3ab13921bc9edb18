# feedback_portal/api/v1/endpoints/faculty_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from feedback_portal import crud
from feedback_portal import schemas
from feedback_portal.api.v1.deps import get_current_faculty, get_current_profile
from feedback_portal.db.models import Faculty, Profile
from feedback_portal.db.session import get_db

router = APIRouter()

@router.get("/", response_model=List[schemas.Faculty])
async def read_faculty_directory(
    skip: int = 0,
    limit: int = 100,
    profile: Profile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db)
):
    """
    Faculty members a student can address feedback to, ordered by name.
    """
    return await crud.get_all_faculty(db=db, skip=skip, limit=limit)

@router.get("/me/feedback", response_model=List[schemas.FacultyFeedback])
async def read_received_feedback(
    skip: int = 0,
    limit: Optional[int] = None,
    faculty: Faculty = Depends(get_current_faculty),
    db: AsyncSession = Depends(get_db)
):
    """
    Feedback addressed to the caller, newest first. Without a limit every entry is
    returned, matching the total reported by /me/stats.
    """
    return await crud.get_feedback_for_faculty(db=db, faculty_id=faculty.id, skip=skip, limit=limit)

@router.get("/me/stats", response_model=schemas.SentimentStats)
async def read_sentiment_stats(
    faculty: Faculty = Depends(get_current_faculty),
    db: AsyncSession = Depends(get_db)
):
    """
    Sentiment counts and percentages over all feedback addressed to the caller.
    """
    stats = await crud.get_sentiment_stats_for_faculty(db=db, faculty_id=faculty.id)
    return schemas.SentimentStats.from_stats(stats)
