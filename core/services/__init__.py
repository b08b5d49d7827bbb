"""Services for the core app."""

from core.services.account_service import AccountService, account_service
from core.services.bond_service import BondService, bond_service
from core.services.post_service import PostService, post_service

__all__ = [
    "AccountService",
    "BondService",
    "PostService",
    "account_service",
    "bond_service",
    "post_service",
]
