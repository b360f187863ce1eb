"""Shared plumbing for the datastore-backed services: timeouts and error mapping."""

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ideaswipe.config import settings
from ideaswipe.errors import UpstreamFailure, UpstreamTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreService:
    """
    Base class for services that talk to the datastore through one
    request-scoped ``AsyncSession``.

    Every awaited call goes through ``_call`` so that it is bounded by
    ``timeout`` and so that driver errors surface as ``UpstreamFailure``.
    """

    def __init__(self, db: AsyncSession, timeout: Optional[float] = None):
        self.db = db
        self.timeout = timeout if timeout is not None else settings.STORE_TIMEOUT_SECONDS

    async def _call(self, awaitable: Awaitable[T], what: str) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Datastore call timed out after {self.timeout}s: {what}")
            await self._rollback_quietly()
            raise UpstreamTimeout(f"Timed out while trying to {what}")
        except SQLAlchemyError as e:
            logger.exception(f"Datastore call failed: {what}")
            await self._rollback_quietly()
            raise UpstreamFailure(f"Failed to {what}: {e.__class__.__name__}") from e

    async def _commit(self, what: str) -> None:
        await self._call(self.db.commit(), what)

    async def _rollback_quietly(self) -> None:
        # The original error is what the caller needs to see.
        try:
            await self.db.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")
