"""Feed router — the swipe queue."""

from fastapi import APIRouter, Depends

from ideaswipe.dependencies import get_feed_selector, require_session
from ideaswipe.schemas.engagement import FeedOut
from ideaswipe.schemas.idea import IdeaOut
from ideaswipe.schemas.session import Session
from ideaswipe.services.feed import FeedSelector

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("", response_model=FeedOut)
async def get_feed(
    session: Session = Depends(require_session),
    feed: FeedSelector = Depends(get_feed_selector),
):
    """
    Recompute the unseen-idea queue for the current user.

    An empty queue means the user is caught up; clients refresh or
    prompt for a submission.
    """
    ideas = await feed.compute_feed(session.email)
    return FeedOut(
        ideas=[IdeaOut.model_validate(idea) for idea in ideas],
        caught_up=not ideas,
    )
