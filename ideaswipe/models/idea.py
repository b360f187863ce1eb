"""Idea model — a submitted startup concept with denormalized engagement counters."""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ideaswipe.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Idea(Base):
    __tablename__ = "ideas"

    # ── Identity ──
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    author_email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)

    # ── Pitch ──
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    market_size: Mapped[Optional[str]] = mapped_column(String(200))
    market_potential: Mapped[Optional[str]] = mapped_column(Text)
    technical_requirements: Mapped[List[str]] = mapped_column(JSON, default=list)
    financial_requirement: Mapped[Optional[str]] = mapped_column(String(200))
    timeline: Mapped[Optional[str]] = mapped_column(String(200))
    category: Mapped[Optional[str]] = mapped_column(String(100))
    challenges: Mapped[List[str]] = mapped_column(JSON, default=list)

    # ── Metrics ──
    likes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    passes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    shares: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # ── Timestamps ──
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )

    @property
    def metrics(self) -> dict:
        return {"likes": self.likes, "passes": self.passes, "shares": self.shares}
