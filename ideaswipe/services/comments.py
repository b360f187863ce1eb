"""Comment Store — comments scoped to an idea."""

import logging
import uuid
from typing import List

from sqlalchemy import desc, select

from ideaswipe.errors import ValidationError
from ideaswipe.models.comment import Comment
from ideaswipe.services.base import StoreService
from ideaswipe.services.ideas import IdeaStore

logger = logging.getLogger(__name__)


def _check_idea_id(idea_id: str) -> None:
    try:
        uuid.UUID(str(idea_id))
    except ValueError:
        raise ValidationError("Invalid idea ID format")


class CommentStore(StoreService):

    def __init__(self, db, ideas: IdeaStore):
        super().__init__(db, ideas.timeout)
        self.ideas = ideas

    async def create(self, idea_id: str, user_email: str, content: str) -> Comment:
        if not idea_id:
            raise ValidationError("ideaId is required")
        _check_idea_id(idea_id)
        text = (content or "").strip()
        if not text:
            raise ValidationError("Comment cannot be empty")
        await self.ideas.get(idea_id)

        comment = Comment(idea_id=idea_id, user_email=user_email, content=text)
        self.db.add(comment)
        await self._commit("create comment")
        await self._call(self.db.refresh(comment), "reload created comment")
        logger.info(f"{user_email} commented on idea {idea_id}")
        return comment

    async def list_for_idea(self, idea_id: str) -> List[Comment]:
        result = await self._call(
            self.db.execute(
                select(Comment)
                .where(Comment.idea_id == idea_id)
                .order_by(desc(Comment.created_at))
            ),
            "list comments",
        )
        return list(result.scalars().all())
