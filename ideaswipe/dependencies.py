"""
FastAPI dependency providers.

Services are built per request around the request's ``AsyncSession``, so
tests can swap the database or identity gateway on ``app.state``.
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ideaswipe.config import Settings
from ideaswipe.database import get_db
from ideaswipe.errors import Unauthorized
from ideaswipe.schemas.session import Session
from ideaswipe.services.comments import CommentStore
from ideaswipe.services.engagement import EngagementTracker
from ideaswipe.services.feed import FeedSelector
from ideaswipe.services.identity import IdentityGateway
from ideaswipe.services.ideas import IdeaStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_identity(request: Request) -> IdentityGateway:
    return request.app.state.identity


def get_current_session(
    request: Request,
    identity: IdentityGateway = Depends(get_identity),
) -> Optional[Session]:
    """Returns None when no valid token is present."""
    return identity.current_session(request)


def require_session(session: Optional[Session] = Depends(get_current_session)) -> Session:
    if not session:
        raise Unauthorized("Login required")
    return session


def get_idea_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> IdeaStore:
    return IdeaStore(db, timeout=settings.STORE_TIMEOUT_SECONDS)


def get_tracker(
    db: AsyncSession = Depends(get_db),
    ideas: IdeaStore = Depends(get_idea_store),
) -> EngagementTracker:
    return EngagementTracker(db, ideas)


def get_feed_selector(
    ideas: IdeaStore = Depends(get_idea_store),
    tracker: EngagementTracker = Depends(get_tracker),
) -> FeedSelector:
    return FeedSelector(ideas, tracker)


def get_comment_store(
    db: AsyncSession = Depends(get_db),
    ideas: IdeaStore = Depends(get_idea_store),
) -> CommentStore:
    return CommentStore(db, ideas)
