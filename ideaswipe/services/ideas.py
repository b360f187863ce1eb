"""Idea Store — ownership-checked CRUD over idea records."""

import logging
from typing import List, Optional

from sqlalchemy import delete, desc, select

from ideaswipe.errors import Forbidden, NotFound, ValidationError
from ideaswipe.models.comment import Comment
from ideaswipe.models.idea import Idea
from ideaswipe.models.like import Like
from ideaswipe.models.view_record import ViewRecord
from ideaswipe.services.base import StoreService

logger = logging.getLogger(__name__)

# Fields an owner may set on create/update. Everything else (id, author,
# timestamps, metrics) is managed by the store.
MUTABLE_FIELDS = (
    "title",
    "description",
    "market_size",
    "market_potential",
    "technical_requirements",
    "financial_requirement",
    "timeline",
    "category",
    "challenges",
)
LIST_FIELDS = ("technical_requirements", "challenges")
REQUIRED_FIELDS = ("title", "description")

# Rows referencing an idea, deleted in this order before the idea itself.
CASCADE_STEPS = (ViewRecord, Like, Comment)


def _clean(fields: dict) -> dict:
    """Keep whitelisted keys; empty strings become None, list fields never None."""
    cleaned = {}
    for key in MUTABLE_FIELDS:
        if key not in fields:
            continue
        value = fields[key]
        if key in LIST_FIELDS:
            value = [item for item in (value or []) if item is not None]
        elif value == "":
            value = None
        cleaned[key] = value
    return cleaned


def _check_required(values: dict) -> None:
    # Whitespace-only counts as empty, but stored values are kept as given.
    if any(not (values.get(name) or "").strip() for name in REQUIRED_FIELDS):
        raise ValidationError("Title and description are required")


def authorize_owner(idea: Idea, acting_email: str) -> None:
    """Single ownership guard for every mutating operation."""
    if idea.author_email != acting_email:
        logger.warning(f"{acting_email} tried to modify idea {idea.id} owned by {idea.author_email}")
        raise Forbidden("You can only modify your own ideas")


class IdeaStore(StoreService):

    async def create(self, fields: dict, author_email: str) -> Idea:
        values = _clean(fields)
        _check_required(values)
        for key in LIST_FIELDS:
            values.setdefault(key, [])

        idea = Idea(author_email=author_email, likes=0, passes=0, shares=0, **values)
        self.db.add(idea)
        await self._commit("create idea")
        await self._call(self.db.refresh(idea), "reload created idea")
        logger.info(f"Idea {idea.id} created by {author_email}")
        return idea

    async def find(self, idea_id: str) -> Optional[Idea]:
        result = await self._call(
            self.db.execute(
                select(Idea)
                .where(Idea.id == idea_id)
                .execution_options(populate_existing=True)
            ),
            "load idea",
        )
        return result.scalar_one_or_none()

    async def get(self, idea_id: str) -> Idea:
        idea = await self.find(idea_id)
        if not idea:
            raise NotFound("Idea not found")
        return idea

    async def update(self, idea_id: str, fields: dict, acting_email: str) -> Idea:
        idea = await self.get(idea_id)
        authorize_owner(idea, acting_email)

        values = _clean(fields)
        merged = {name: getattr(idea, name) for name in REQUIRED_FIELDS}
        merged.update({k: v for k, v in values.items() if k in REQUIRED_FIELDS})
        _check_required(merged)

        for key, value in values.items():
            setattr(idea, key, value)
        await self._commit("update idea")
        logger.info(f"Idea {idea.id} updated by {acting_email}")
        return idea

    async def delete(self, idea_id: str, acting_email: str) -> None:
        """
        Delete an idea and everything that references it.

        Dependents go first and the idea last, all inside the session's
        transaction; a failure at any step rolls the whole cascade back.
        """
        idea = await self.get(idea_id)
        authorize_owner(idea, acting_email)

        for model in CASCADE_STEPS:
            await self._call(
                self.db.execute(delete(model).where(model.idea_id == idea_id)),
                f"delete {model.__tablename__} for idea",
            )
        await self._call(self.db.delete(idea), "delete idea")
        await self._commit("delete idea")
        logger.info(f"Idea {idea_id} deleted by {acting_email}")

    async def list_excluding_author(self, excluded_email: str) -> List[Idea]:
        result = await self._call(
            self.db.execute(
                select(Idea)
                .where(Idea.author_email != excluded_email)
                .order_by(desc(Idea.created_at))
            ),
            "list ideas",
        )
        return list(result.scalars().all())

    async def list_by_author(self, author_email: str) -> List[Idea]:
        result = await self._call(
            self.db.execute(
                select(Idea)
                .where(Idea.author_email == author_email)
                .order_by(desc(Idea.created_at))
            ),
            "list own ideas",
        )
        return list(result.scalars().all())
