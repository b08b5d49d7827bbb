"""Pydantic schemas for the core app."""

from core.schemas.account import SIGN_UP_FIELDS, SignUpRequest
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user import UserProfile

__all__ = ["SIGN_UP_FIELDS", "BaseSchemaModel", "SignUpRequest", "UserProfile"]
