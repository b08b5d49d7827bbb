"""User profile schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserProfile(BaseSchemaModel):
    """Public view of a user with relationship counts."""

    id: int
    username: str
    first_name: str
    last_name: str = ""
    is_public: bool = True
    follower_count: int = Field(default=0, ge=0)
    following_count: int = Field(default=0, ge=0)
