# feedback_portal/crud/crud_feedback.py
import logging
import time
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from typing import List, Optional

from feedback_portal.core.sentiment import SentimentClassifier
from feedback_portal.core.statistics import SentimentStats, aggregate
from feedback_portal.db.models import Feedback
from feedback_portal.metrics import CLASSIFICATION_LATENCY, FEEDBACK_SUBMITTED_TOTAL, STATS_REQUESTS_TOTAL
from feedback_portal.schemas.feedback_schema import FeedbackCreate

logger = logging.getLogger(__name__)

async def create_feedback(
    db: AsyncSession,
    feedback_in: FeedbackCreate,
    student_id: uuid.UUID,
    classifier: SentimentClassifier,
) -> Feedback:
    """
    Classify the text and store it as a new feedback entry.
    The label is attached before the commit, so no reader ever sees unlabelled feedback.
    """
    started = time.perf_counter()
    result = classifier.analyze(feedback_in.feedback_text)
    CLASSIFICATION_LATENCY.observe(time.perf_counter() - started)

    db_feedback = Feedback(
        student_id=student_id,
        faculty_id=feedback_in.faculty_id,
        feedback_text=feedback_in.feedback_text,
        sentiment=result.label,
        sentiment_score=result.score,
        # created_at is handled by the model default
    )
    db.add(db_feedback)
    await db.commit()
    FEEDBACK_SUBMITTED_TOTAL.labels(sentiment=result.label.value).inc()
    logger.info(f"Stored feedback {db_feedback.id} from student {student_id} to faculty {feedback_in.faculty_id} as {result.label.value} (score {result.score})")

    # Reload with both names for the response
    return await get_feedback(db, db_feedback.id)

async def get_feedback(db: AsyncSession, feedback_id: uuid.UUID) -> Optional[Feedback]:
    """
    Retrieve a feedback entry by its ID, with author and recipient loaded.
    """
    result = await db.execute(
        select(Feedback)
        .options(selectinload(Feedback.student), selectinload(Feedback.faculty))
        .filter(Feedback.id == feedback_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()

async def get_feedback_by_student(db: AsyncSession, student_id: uuid.UUID, skip: int = 0, limit: int = 100) -> List[Feedback]:
    """
    Retrieve a student's own submissions, newest first.
    """
    result = await db.execute(
        select(Feedback)
        .options(selectinload(Feedback.faculty))
        .filter(Feedback.student_id == student_id)
        .order_by(Feedback.created_at.desc())
        .offset(skip)
        .limit(limit)
    )
    return result.scalars().all()

async def get_feedback_for_faculty(db: AsyncSession, faculty_id: uuid.UUID, skip: int = 0, limit: Optional[int] = None) -> List[Feedback]:
    """
    Retrieve the feedback addressed to a faculty member, newest first.
    With limit=None (the default) all of it is returned.
    """
    query = (
        select(Feedback)
        .options(selectinload(Feedback.student))
        .filter(Feedback.faculty_id == faculty_id)
        .order_by(Feedback.created_at.desc())
        .offset(skip)
    )
    if limit is not None:
        query = query.limit(limit)
    result = await db.execute(query)
    return result.scalars().all()

async def get_sentiment_stats_for_faculty(db: AsyncSession, faculty_id: uuid.UUID) -> SentimentStats:
    """
    Aggregate the labels of every feedback entry addressed to a faculty member.
    """
    result = await db.execute(select(Feedback.sentiment).filter(Feedback.faculty_id == faculty_id))
    stats = aggregate(result.scalars().all())
    STATS_REQUESTS_TOTAL.inc()
    logger.info(f"Computed sentiment summary for faculty {faculty_id}: {stats.total} feedback entries")
    return stats
