"""Ideas router — submit, view, edit, delete, swipe, and share ideas."""

from typing import Optional

from fastapi import APIRouter, Depends

from ideaswipe.config import Settings
from ideaswipe.dependencies import (
    get_idea_store,
    get_settings,
    get_tracker,
    require_session,
)
from ideaswipe.schemas.engagement import ShareIn, ShareLinks, ShareOut, SwipeIn, SwipeOut
from ideaswipe.schemas.idea import IdeaCreate, IdeaOut, IdeaUpdate
from ideaswipe.schemas.session import Session
from ideaswipe.services.engagement import EngagementTracker
from ideaswipe.services.ideas import IdeaStore
from ideaswipe.services.sharing import build_share_links

router = APIRouter(prefix="/ideas", tags=["ideas"])


# ═══════════════════════════════════════════════════════════════
#  CRUD
# ═══════════════════════════════════════════════════════════════

@router.post("", response_model=IdeaOut)
async def create_idea(
    payload: IdeaCreate,
    session: Session = Depends(require_session),
    ideas: IdeaStore = Depends(get_idea_store),
):
    return await ideas.create(payload.model_dump(exclude_unset=True), session.email)


@router.get("/{idea_id}", response_model=IdeaOut)
async def get_idea(
    idea_id: str,
    session: Session = Depends(require_session),
    ideas: IdeaStore = Depends(get_idea_store),
):
    return await ideas.get(idea_id)


@router.put("/{idea_id}", response_model=IdeaOut)
async def update_idea(
    idea_id: str,
    payload: IdeaUpdate,
    session: Session = Depends(require_session),
    ideas: IdeaStore = Depends(get_idea_store),
):
    return await ideas.update(idea_id, payload.model_dump(exclude_unset=True), session.email)


@router.delete("/{idea_id}")
async def delete_idea(
    idea_id: str,
    session: Session = Depends(require_session),
    ideas: IdeaStore = Depends(get_idea_store),
):
    await ideas.delete(idea_id, session.email)
    return {"success": True}


# ═══════════════════════════════════════════════════════════════
#  Engagement
# ═══════════════════════════════════════════════════════════════

@router.post("/{idea_id}/swipe", response_model=SwipeOut)
async def swipe_idea(
    idea_id: str,
    payload: SwipeIn,
    session: Session = Depends(require_session),
    ideas: IdeaStore = Depends(get_idea_store),
    tracker: EngagementTracker = Depends(get_tracker),
):
    counted = await tracker.record_swipe(idea_id, session.email, payload.action)
    idea = await ideas.get(idea_id)
    return SwipeOut(idea_id=idea.id, action=payload.action, counted=counted, metrics=idea.metrics)


@router.post("/{idea_id}/share", response_model=ShareOut)
async def share_idea(
    idea_id: str,
    payload: Optional[ShareIn] = None,
    session: Session = Depends(require_session),
    ideas: IdeaStore = Depends(get_idea_store),
    tracker: EngagementTracker = Depends(get_tracker),
    settings: Settings = Depends(get_settings),
):
    """Count a share (link copy or social post) and hand back the share URLs."""
    channel = payload.channel if payload else "link"
    await tracker.record_share(idea_id)
    idea = await ideas.get(idea_id)

    links = build_share_links(idea, settings.PUBLIC_BASE_URL)
    target = links["url"] if channel == "link" else links[channel]
    return ShareOut(
        channel=channel,
        target=target,
        links=ShareLinks(**links),
        metrics=idea.metrics,
    )
