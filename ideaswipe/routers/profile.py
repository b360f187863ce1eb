"""Profile router — the signed-in user's own ideas with their comments."""

from typing import List

from fastapi import APIRouter, Depends

from ideaswipe.dependencies import get_comment_store, get_idea_store, require_session
from ideaswipe.schemas.comment import CommentOut
from ideaswipe.schemas.engagement import IdeaWithComments
from ideaswipe.schemas.idea import IdeaOut
from ideaswipe.schemas.session import Session
from ideaswipe.services.comments import CommentStore
from ideaswipe.services.ideas import IdeaStore

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/ideas", response_model=List[IdeaWithComments])
async def my_ideas(
    session: Session = Depends(require_session),
    ideas: IdeaStore = Depends(get_idea_store),
    comments: CommentStore = Depends(get_comment_store),
):
    results = []
    for idea in await ideas.list_by_author(session.email):
        idea_comments = await comments.list_for_idea(idea.id)
        results.append(
            IdeaWithComments(
                **IdeaOut.model_validate(idea).model_dump(),
                comments=[CommentOut.model_validate(c) for c in idea_comments],
            )
        )
    return results
