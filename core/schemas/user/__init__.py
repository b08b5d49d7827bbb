"""User-related Pydantic schemas."""

from core.schemas.user.user_profile import UserProfile

__all__ = ["UserProfile"]
