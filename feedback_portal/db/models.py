# feedback_portal/db/models.py
import datetime
import uuid
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship, validates

from feedback_portal.core.sentiment import SentimentLabel
from feedback_portal.db.base_class import Base


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class Profile(Base):
    __tablename__ = "profiles"

    # Same identifier as the upstream authenticated user
    id = Column(Uuid, primary_key=True)
    name = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, index=True) # 'student' or 'faculty'
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Profile(id={self.id}, role='{self.role}', name='{self.name}')>"

class Student(Base):
    __tablename__ = "students"

    id = Column(Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True)
    name = Column(String(255), nullable=False)
    enrollment_number = Column(String(100), nullable=True)

    # Relationships
    feedback_given = relationship("Feedback", back_populates="student", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Student(id={self.id}, name='{self.name}')>"

class Faculty(Base):
    __tablename__ = "faculty"

    id = Column(Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    department = Column(String(255), nullable=True)

    # Relationships
    feedback_received = relationship("Feedback", back_populates="faculty", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Faculty(id={self.id}, name='{self.name}', department='{self.department}')>"

class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    student_id = Column(Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    faculty_id = Column(Uuid, ForeignKey("faculty.id", ondelete="CASCADE"), nullable=False, index=True)
    feedback_text = Column(Text, nullable=False)

    # Assigned once at submission; never re-labelled
    sentiment = Column(String(20), nullable=False, index=True) # 'Positive', 'Neutral' or 'Negative'
    sentiment_score = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Relationships
    student = relationship("Student", back_populates="feedback_given")
    faculty = relationship("Faculty", back_populates="feedback_received")

    @validates("sentiment")
    def validate_sentiment(self, key, value):
        label = SentimentLabel(value).value
        if self.sentiment is not None and self.sentiment != label:
            raise ValueError(f"Feedback {self.id} is already labelled '{self.sentiment}'; sentiment is immutable")
        return label

    @validates("sentiment_score")
    def validate_sentiment_score(self, key, value):
        if self.sentiment_score is not None and self.sentiment_score != value:
            raise ValueError(f"Feedback {self.id} already has a sentiment score; it is immutable")
        return value

    def __repr__(self):
        return f"<Feedback(id={self.id}, sentiment='{self.sentiment}', text='{self.feedback_text[:30]}...')>"
