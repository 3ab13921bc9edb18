"""
Pytest configuration and fixtures for the feedback portal tests.
"""
import uuid
from contextlib import asynccontextmanager

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from feedback_portal.api.v1.deps import get_classifier
from feedback_portal.core.lexicon import build_lexicon
from feedback_portal.core.sentiment import SentimentClassifier
from feedback_portal.db.base_class import Base
from feedback_portal.db.session import get_db
from feedback_portal.main import app

# Small stand-in for the bundled lexicon so expectations don't depend on its exact weights.
FIXTURE_LEXICON = build_lexicon({
    "excellent": 3,
    "wonderful": 4,
    "great": 3,
    "good": 3,
    "helpful": 2,
    "clear": 1,
    "bad": -3,
    "terrible": -3,
    "awful": -3,
    "boring": -3,
    "confusing": -2,
    "late": -1,
})


@pytest.fixture
def fixture_lexicon():
    return FIXTURE_LEXICON


@pytest.fixture
def classifier():
    return SentimentClassifier(FIXTURE_LEXICON)


@pytest.fixture
def portal():
    """
    Returns an async context manager yielding an httpx client bound to the app,
    backed by a fresh in-memory SQLite database and the fixture lexicon.
    """

    @asynccontextmanager
    async def _portal(lexicon=FIXTURE_LEXICON):
        engine = create_async_engine(
            "sqlite+aiosqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

        async def _get_test_db():
            async with session_factory() as session:
                try:
                    yield session
                except Exception:
                    await session.rollback()
                    raise

        app.dependency_overrides[get_db] = _get_test_db
        app.dependency_overrides[get_classifier] = lambda: SentimentClassifier(lexicon)
        try:
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://portal.test") as client:
                # Direct database access for seeding rows the API cannot create
                client.sessions = session_factory
                yield client
        finally:
            app.dependency_overrides.clear()
            await engine.dispose()

    return _portal


async def register(client, role, name, **extra):
    """Registers a profile and returns the headers identifying it."""
    user_id = uuid.uuid4()
    headers = {"X-User-Id": str(user_id)}
    response = await client.post("/api/v1/profiles/", json={"name": name, "role": role, **extra}, headers=headers)
    assert response.status_code == 201, response.text
    return headers
