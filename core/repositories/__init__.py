"""Repositories encapsulating database queries."""

from core.repositories.bond_repository import BondRepository
from core.repositories.post_repository import PostRepository
from core.repositories.user_repository import UserRepository

__all__ = ["BondRepository", "PostRepository", "UserRepository"]
