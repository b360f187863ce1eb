"""Shared fixtures: a throwaway SQLite database per test, services, and an HTTP client."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from httpx import ASGITransport, AsyncClient

from ideaswipe.config import Settings
from ideaswipe.database import Database
from ideaswipe.main import create_app
from ideaswipe.services.comments import CommentStore
from ideaswipe.services.engagement import EngagementTracker
from ideaswipe.services.feed import FeedSelector
from ideaswipe.services.ideas import IdeaStore


# ---------------------------------------------------------------------------
# Database + services
# ---------------------------------------------------------------------------


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'ideaswipe.db'}",
        DEBUG=True,
        ENVIRONMENT="test",
        SECRET_KEY="test-secret",
        STORE_TIMEOUT_SECONDS=5.0,
        PUBLIC_BASE_URL="https://ideaswipe.example.com",
    )


@pytest.fixture
async def database(settings: Settings):
    db = Database(settings.DATABASE_URL)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database: Database):
    async with database.session() as s:
        yield s


@pytest.fixture
def ideas(session) -> IdeaStore:
    return IdeaStore(session, timeout=5.0)


@pytest.fixture
def tracker(session, ideas: IdeaStore) -> EngagementTracker:
    return EngagementTracker(session, ideas)


@pytest.fixture
def feed(ideas: IdeaStore, tracker: EngagementTracker) -> FeedSelector:
    return FeedSelector(ideas, tracker)


@pytest.fixture
def comments(session, ideas: IdeaStore) -> CommentStore:
    return CommentStore(session, ideas)


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


@pytest.fixture
def app(settings: Settings, database: Database):
    return create_app(settings, database)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def auth_headers(app) -> Callable[[str], dict]:
    def _headers(email: str) -> dict:
        token = app.state.identity.create_access_token(email)
        return {"Authorization": f"Bearer {token}"}

    return _headers
