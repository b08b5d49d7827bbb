"""Database models for core application."""

from core.models.bond import Bond
from core.models.place import Place
from core.models.post import Post
from core.models.sight import Sight
from core.models.status import Status
from core.models.user import User

__all__ = ["Bond", "Place", "Post", "Sight", "Status", "User"]
