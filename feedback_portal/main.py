from fastapi import FastAPI, Response
import logging
import sys

import prometheus_client

from feedback_portal.config import settings
from feedback_portal.db.base_class import Base
from feedback_portal.db.session import async_engine
# Import models to ensure they are registered with Base.metadata
from feedback_portal.db.models import Profile, Student, Faculty, Feedback
from feedback_portal.api.v1 import api_v1_router
from feedback_portal.api.v1.deps import get_classifier

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

app.include_router(api_v1_router, prefix=settings.API_V1_STR)

@app.on_event("startup")
async def startup_event():
    # Load the lexicon up front rather than on the first submission
    classifier = get_classifier()
    logger.info(f"Sentiment classifier ready with {len(classifier.lexicon)} lexicon terms")

    if async_engine is None:
        logger.warning("Skipping table creation: no database configured.")
        return
    logger.info("Application startup - Initializing database...")
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialization complete.")

@app.on_event("shutdown")
async def shutdown_event():
    if async_engine is not None:
        await async_engine.dispose()
    logger.info("Application shutdown")

@app.get("/")
async def read_root():
    return {"message": "Welcome to the Student Feedback Portal API"}

@app.get("/health")
async def health_check():
    return {"status": "healthy", "database_configured": async_engine is not None}

@app.get("/metrics")
async def metrics():
    return Response(content=prometheus_client.generate_latest(), media_type=prometheus_client.CONTENT_TYPE_LATEST)
