# feedback_portal/crud/__init__.py
from .crud_feedback import (
    create_feedback,
    get_feedback,
    get_feedback_by_student,
    get_feedback_for_faculty,
    get_sentiment_stats_for_faculty,
)
from .crud_profile import create_profile, get_profile, get_student, get_faculty, get_all_faculty
