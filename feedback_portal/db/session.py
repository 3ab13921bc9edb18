# feedback_portal/db/session.py
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from feedback_portal.config import settings
import logging

logger = logging.getLogger(__name__)

if settings.DATABASE_URL:
    async_engine = create_async_engine(
        settings.DATABASE_URL,
        echo=False,
        pool_pre_ping=True
    )

    AsyncSessionLocal = async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    logger.info("Async SQLAlchemy engine and session maker configured.")
else:
    logger.error(
        "DATABASE_URL is not set; feedback storage is unavailable "
        "and every request that needs a database session will fail."
    )
    async_engine = None
    AsyncSessionLocal = None # type: ignore

async def get_db() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency yielding one async session per request.
    Commits happen in the crud layer; anything raised inside the request rolls back.
    """
    if AsyncSessionLocal is None:
        logger.critical("Cannot provide a DB session: DATABASE_URL is missing.")
        raise RuntimeError("Database not configured. AsyncSessionLocal is None.")

    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
