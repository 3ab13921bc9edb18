# feedback_portal/api/v1/endpoints/feedback_router.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from feedback_portal import crud
from feedback_portal import schemas
from feedback_portal.api.v1.deps import get_classifier, get_current_student
from feedback_portal.core.sentiment import SentimentClassifier
from feedback_portal.db.models import Student
from feedback_portal.db.session import get_db

router = APIRouter()

@router.post("/", response_model=schemas.StudentFeedback, status_code=201)
async def submit_feedback(
    feedback_in: schemas.FeedbackCreate,
    student: Student = Depends(get_current_student),
    classifier: SentimentClassifier = Depends(get_classifier),
    db: AsyncSession = Depends(get_db)
):
    """
    Submit feedback to a faculty member. The sentiment label is assigned here, once.
    """
    faculty = await crud.get_faculty(db=db, faculty_id=feedback_in.faculty_id)
    if faculty is None:
        raise HTTPException(status_code=404, detail="Faculty not found")
    return await crud.create_feedback(db=db, feedback_in=feedback_in, student_id=student.id, classifier=classifier)

@router.get("/mine", response_model=List[schemas.StudentFeedback])
async def read_my_feedback(
    skip: int = 0,
    limit: int = 100,
    student: Student = Depends(get_current_student),
    db: AsyncSession = Depends(get_db)
):
    """
    Retrieve the caller's submitted feedback, newest first.
    """
    return await crud.get_feedback_by_student(db=db, student_id=student.id, skip=skip, limit=limit)
