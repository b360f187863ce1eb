"""
IdeaSwipe – SQLAlchemy ORM models package.

Imports all model classes so the metadata and the app can discover them
through a single ``from ideaswipe.models import *`` import.
"""

from ideaswipe.models.idea import Idea                   # noqa: F401
from ideaswipe.models.view_record import ViewRecord      # noqa: F401
from ideaswipe.models.like import Like                   # noqa: F401
from ideaswipe.models.comment import Comment             # noqa: F401
