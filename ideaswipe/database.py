"""
IdeaSwipe – Async SQLAlchemy engine, session factory, and declarative base.

The engine lives on an explicitly constructed ``Database`` object which the
app factory stores on ``app.state``; routes reach it through ``get_db``.
"""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


# ── Declarative base ──
class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Database:
    """Owns the async engine and hands out sessions."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs) -> None:
        engine_kwargs.setdefault("future", True)

        # If using PostgreSQL (Render/Supabase), disable prepared statement caching
        # because PgBouncer (transaction mode) does not support it properly.
        if "postgresql" in url:
            engine_kwargs.setdefault("connect_args", {"statement_cache_size": 0})

        self.url = url
        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


# ── Dependency for FastAPI routes ──
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield an async database session, auto-closed on exit."""
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
