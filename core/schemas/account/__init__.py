"""Account-related Pydantic schemas."""

from core.schemas.account.sign_up_request import SIGN_UP_FIELDS, SignUpRequest

__all__ = ["SIGN_UP_FIELDS", "SignUpRequest"]
