"""Idea Pydantic schemas — submission, edit, and API output."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class IdeaCreate(BaseModel):
    """Fields submitted on the idea form. Title/description are checked by the store."""
    title: Optional[str] = None
    description: Optional[str] = None
    market_size: Optional[str] = None
    market_potential: Optional[str] = None
    technical_requirements: Optional[List[str]] = None
    financial_requirement: Optional[str] = None
    timeline: Optional[str] = None
    category: Optional[str] = None
    challenges: Optional[List[str]] = None


class IdeaUpdate(IdeaCreate):
    """Same whitelist as creation; omitted fields are left untouched."""


class Metrics(BaseModel):
    likes: int = 0
    passes: int = 0
    shares: int = 0


class IdeaOut(BaseModel):
    """Public idea representation returned by the API."""
    id: str
    author_email: str
    title: str
    description: str
    market_size: Optional[str] = None
    market_potential: Optional[str] = None
    technical_requirements: List[str] = []
    financial_requirement: Optional[str] = None
    timeline: Optional[str] = None
    category: Optional[str] = None
    challenges: List[str] = []
    metrics: Metrics
    created_at: datetime

    model_config = {"from_attributes": True}
