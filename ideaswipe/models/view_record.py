"""ViewRecord model — append-only log of swipes, one row per swipe event."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from ideaswipe.database import Base
from ideaswipe.models.idea import utcnow


class ViewRecord(Base):
    __tablename__ = "viewed_ideas"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    idea_id: Mapped[str] = mapped_column(ForeignKey("ideas.id"), index=True, nullable=False)
    user_email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    action: Mapped[str] = mapped_column(String(5), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
