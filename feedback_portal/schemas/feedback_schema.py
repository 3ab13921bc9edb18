# feedback_portal/schemas/feedback_schema.py
from pydantic import BaseModel, ConfigDict, computed_field, model_validator
from typing import Optional
import datetime
import uuid

from feedback_portal.core.sentiment import SentimentLabel, sentiment_color

class FeedbackCreate(BaseModel):
    faculty_id: Optional[uuid.UUID] = None
    feedback_text: str = ""

    @model_validator(mode="after")
    def require_recipient_and_text(self) -> "FeedbackCreate":
        if self.faculty_id is None or not self.feedback_text.strip():
            raise ValueError("Please select a faculty and enter feedback")
        self.feedback_text = self.feedback_text.strip()
        return self

class PersonSummary(BaseModel):
    name: str

    model_config = ConfigDict(from_attributes=True)

class Feedback(BaseModel):
    id: uuid.UUID
    feedback_text: str
    sentiment: SentimentLabel
    sentiment_score: Optional[int] = None
    created_at: datetime.datetime
    student_id: uuid.UUID
    faculty_id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def sentiment_color(self) -> str:
        return sentiment_color(self.sentiment)

class StudentFeedback(Feedback):
    """Feedback as shown in a student's history, with the recipient's name."""
    faculty: PersonSummary

class FacultyFeedback(Feedback):
    """Feedback as shown in a faculty inbox, with the author's name."""
    student: PersonSummary
