# feedback_portal/schemas/profile_schema.py
from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
import datetime
import uuid

class UserRole(str, Enum):
    STUDENT = "student"
    FACULTY = "faculty"

class ProfileBase(BaseModel):
    name: str
    role: UserRole

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name must not be empty")
        return value

class ProfileCreate(ProfileBase):
    # Only one of these applies, depending on the role
    department: Optional[str] = None
    enrollment_number: Optional[str] = None

class Profile(ProfileBase):
    id: uuid.UUID
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)

class Faculty(BaseModel):
    id: uuid.UUID
    name: str
    department: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
