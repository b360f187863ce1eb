"""
Engagement Tracker — swipes, likes, passes, and shares.

Likes are idempotent per (idea, user): the ``likes`` table carries a
uniqueness constraint and the counter only moves when our insert actually
created the row. Passes and shares are counted every time.
"""

import logging
from typing import Optional, Set

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ideaswipe.errors import ConflictOrRace, NotFound, UpstreamFailure, ValidationError
from ideaswipe.models.idea import Idea
from ideaswipe.models.like import Like
from ideaswipe.models.view_record import ViewRecord
from ideaswipe.services.base import StoreService
from ideaswipe.services.ideas import IdeaStore

logger = logging.getLogger(__name__)

RIGHT = "right"
LEFT = "left"
VALID_ACTIONS = {RIGHT, LEFT}

COUNTERS = {"likes": Idea.likes, "passes": Idea.passes, "shares": Idea.shares}

# Dialects that can express "insert, ignore duplicate" in one statement.
UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


class EngagementTracker(StoreService):

    def __init__(self, db: AsyncSession, ideas: IdeaStore, timeout: Optional[float] = None):
        super().__init__(db, timeout if timeout is not None else ideas.timeout)
        self.ideas = ideas

    async def record_view(self, idea_id: str, user_email: str, action: str) -> None:
        self.db.add(ViewRecord(idea_id=idea_id, user_email=user_email, action=action))
        await self._call(self.db.flush(), "record view")

    async def record_swipe(self, idea_id: str, user_email: str, action: str) -> bool:
        """
        Record a swipe and update the idea's counters.

        Returns True when a counter moved: always for a pass, and only for
        the first like by this user on this idea.
        """
        if action not in VALID_ACTIONS:
            raise ValidationError("Swipe action must be 'left' or 'right'")
        await self.ideas.get(idea_id)

        await self.record_view(idea_id, user_email, action)

        if action == RIGHT:
            counted = await self._insert_like(idea_id, user_email)
            if counted:
                await self._increment(idea_id, "likes")
                logger.info(f"{user_email} liked idea {idea_id}")
        else:
            await self._increment(idea_id, "passes")
            counted = True

        await self._commit("record swipe")
        return counted

    async def record_share(self, idea_id: str) -> None:
        await self._increment(idea_id, "shares")
        await self._commit("record share")
        logger.info(f"Idea {idea_id} shared")

    async def has_liked(self, idea_id: str, user_email: str) -> bool:
        result = await self._call(
            self.db.execute(
                select(Like.id).where(Like.idea_id == idea_id, Like.user_email == user_email)
            ),
            "look up like",
        )
        return result.first() is not None

    async def seen_idea_ids(self, user_email: str) -> Set[str]:
        result = await self._call(
            self.db.execute(
                select(ViewRecord.idea_id).where(ViewRecord.user_email == user_email).distinct()
            ),
            "load view history",
        )
        return set(result.scalars().all())

    # ── internals ──

    async def _increment(self, idea_id: str, counter: str) -> None:
        column = COUNTERS[counter]
        result = await self._call(
            self.db.execute(
                update(Idea)
                .where(Idea.id == idea_id)
                .values({column: column + 1})
                .execution_options(synchronize_session=False)
            ),
            f"increment {counter}",
        )
        if result.rowcount == 0:
            await self._rollback_quietly()
            raise NotFound("Idea not found")

    async def _insert_like(self, idea_id: str, user_email: str) -> bool:
        """Insert the like row; False when the user had already liked the idea."""
        values = {"idea_id": idea_id, "user_email": user_email}
        dialect = self.db.get_bind().dialect.name
        upsert = UPSERT_INSERTS.get(dialect)

        if upsert is not None:
            stmt = (
                upsert(Like)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["idea_id", "user_email"])
                .returning(Like.id)
            )
            result = await self._call(self.db.execute(stmt), "insert like")
            return result.scalar_one_or_none() is not None

        # Check-then-insert; the unique constraint catches the race.
        if await self.has_liked(idea_id, user_email):
            return False
        try:
            await self._call(self.db.execute(insert(Like).values(**values)), "insert like")
        except UpstreamFailure as e:
            if isinstance(e.__cause__, IntegrityError):
                raise ConflictOrRace("Like was recorded concurrently, retry the swipe") from e.__cause__
            raise
        return True
