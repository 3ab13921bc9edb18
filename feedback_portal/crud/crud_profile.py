# feedback_portal/crud/crud_profile.py
import logging
import uuid
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List, Optional

from feedback_portal.db.models import Faculty, Profile, Student
from feedback_portal.schemas.profile_schema import ProfileCreate, UserRole

logger = logging.getLogger(__name__)

async def create_profile(db: AsyncSession, user_id: uuid.UUID, profile_in: ProfileCreate) -> Optional[Profile]:
    """
    Register a profile and the matching student or faculty entry in one commit.
    Returns None when a profile with this id already exists.
    """
    db_profile = Profile(id=user_id, name=profile_in.name, role=profile_in.role.value)
    try:
        db.add(db_profile)
        # Profile row first; the role row references it
        await db.flush()
        if profile_in.role == UserRole.STUDENT:
            db.add(Student(id=user_id, name=profile_in.name, enrollment_number=profile_in.enrollment_number))
        else:
            db.add(Faculty(id=user_id, name=profile_in.name, department=profile_in.department))
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(f"Profile {user_id} is already registered")
        return None
    await db.refresh(db_profile)
    logger.info(f"Registered {profile_in.role.value} profile {user_id}")
    return db_profile

async def get_profile(db: AsyncSession, user_id: uuid.UUID) -> Optional[Profile]:
    return await db.get(Profile, user_id)

async def get_student(db: AsyncSession, student_id: uuid.UUID) -> Optional[Student]:
    return await db.get(Student, student_id)

async def get_faculty(db: AsyncSession, faculty_id: uuid.UUID) -> Optional[Faculty]:
    return await db.get(Faculty, faculty_id)

async def get_all_faculty(db: AsyncSession, skip: int = 0, limit: int = 100) -> List[Faculty]:
    """
    Retrieve the faculty directory ordered by name.
    """
    result = await db.execute(select(Faculty).order_by(Faculty.name).offset(skip).limit(limit))
    return result.scalars().all()
