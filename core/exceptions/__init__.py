"""Exceptions raised by the social graph services."""

from core.exceptions.social_exceptions import (
    BondNotFoundError,
    ConflictError,
    InvalidBondTransitionError,
    SelfBondError,
    SocialGraphError,
    UserNotFoundError,
)

__all__ = [
    "BondNotFoundError",
    "ConflictError",
    "InvalidBondTransitionError",
    "SelfBondError",
    "SocialGraphError",
    "UserNotFoundError",
]
