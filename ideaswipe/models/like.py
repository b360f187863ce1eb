"""Like model — at most one per (idea, user), enforced by the table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ideaswipe.database import Base
from ideaswipe.models.idea import utcnow


class Like(Base):
    __tablename__ = "likes"
    __table_args__ = (
        UniqueConstraint("idea_id", "user_email", name="uq_likes_idea_user"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    idea_id: Mapped[str] = mapped_column(ForeignKey("ideas.id"), nullable=False)
    user_email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
