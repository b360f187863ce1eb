"""Comment Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    idea_id: Optional[str] = Field(None, alias="ideaId")
    content: Optional[str] = None

    model_config = {"populate_by_name": True}


class CommentOut(BaseModel):
    id: str
    idea_id: str
    user_email: str
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}
