"""Swipe and share Pydantic schemas."""

from typing import List, Literal

from pydantic import BaseModel

from ideaswipe.schemas.comment import CommentOut
from ideaswipe.schemas.idea import IdeaOut, Metrics


class SwipeIn(BaseModel):
    action: str


class SwipeOut(BaseModel):
    idea_id: str
    action: str
    counted: bool
    metrics: Metrics


class ShareIn(BaseModel):
    channel: Literal["link", "twitter", "linkedin", "facebook"] = "link"


class ShareLinks(BaseModel):
    url: str
    twitter: str
    linkedin: str
    facebook: str


class ShareOut(BaseModel):
    channel: str
    target: str
    links: ShareLinks
    metrics: Metrics


class FeedOut(BaseModel):
    ideas: List[IdeaOut]
    caught_up: bool


class IdeaWithComments(IdeaOut):
    comments: List[CommentOut] = []
