"""Comments router — post and list comments on an idea."""

from typing import List

from fastapi import APIRouter, Depends

from ideaswipe.dependencies import get_comment_store, require_session
from ideaswipe.schemas.comment import CommentCreate, CommentOut
from ideaswipe.schemas.session import Session
from ideaswipe.services.comments import CommentStore

router = APIRouter(tags=["comments"])


@router.post("/comments", response_model=CommentOut)
async def create_comment(
    payload: CommentCreate,
    session: Session = Depends(require_session),
    comments: CommentStore = Depends(get_comment_store),
):
    return await comments.create(payload.idea_id, session.email, payload.content)


@router.get("/ideas/{idea_id}/comments", response_model=List[CommentOut])
async def list_comments(
    idea_id: str,
    session: Session = Depends(require_session),
    comments: CommentStore = Depends(get_comment_store),
):
    """Newest first."""
    return await comments.list_for_idea(idea_id)
