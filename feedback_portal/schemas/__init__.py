# feedback_portal/schemas/__init__.py
from .feedback_schema import Feedback, FeedbackCreate, PersonSummary, StudentFeedback, FacultyFeedback
from .profile_schema import Profile, ProfileCreate, Faculty, UserRole
from .stats_schema import SentimentStats
