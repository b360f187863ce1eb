"""Feed Selector — the queue of ideas a user has not swiped on yet."""

from typing import List

from ideaswipe.models.idea import Idea
from ideaswipe.services.engagement import EngagementTracker
from ideaswipe.services.ideas import IdeaStore


class FeedSelector:

    def __init__(self, ideas: IdeaStore, tracker: EngagementTracker):
        self.ideas = ideas
        self.tracker = tracker

    async def compute_feed(self, user_email: str) -> List[Idea]:
        """
        Everyone else's ideas, newest first, minus any the user has already
        swiped on. Recomputed in full on every call.
        """
        seen = await self.tracker.seen_idea_ids(user_email)
        candidates = await self.ideas.list_excluding_author(user_email)
        return [idea for idea in candidates if idea.id not in seen]
