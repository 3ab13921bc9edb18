# feedback_portal/api/v1/__init__.py
from fastapi import APIRouter
from .endpoints import faculty_router, feedback_router, profile_router

# Main router for API v1
api_v1_router = APIRouter()

api_v1_router.include_router(profile_router.router, prefix="/profiles", tags=["Profiles"])
api_v1_router.include_router(faculty_router.router, prefix="/faculty", tags=["Faculty"])
api_v1_router.include_router(feedback_router.router, prefix="/feedback", tags=["Feedback"])
