"""Request schema for account sign-up."""

from pydantic import EmailStr, Field, model_validator

from core.schemas.base_schema_model import BaseSchemaModel

SIGN_UP_FIELDS = (
    "first_name",
    "last_name",
    "username",
    "email",
    "password",
    "password_confirmation",
)


class SignUpRequest(BaseSchemaModel):
    """Fields accepted when a new account signs up.

    Any other key in the payload (``is_public``, ``encrypted_password`` ...)
    is silently discarded.

    Attributes:
        first_name: Given name, required.
        last_name: Family name, optional and kept as entered.
        username: Unique handle.
        email: Unique email address.
        password: Raw password, hashed before it is stored.
        password_confirmation: Must equal ``password``.
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(default="", max_length=100)
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    password_confirmation: str

    @model_validator(mode="after")
    def passwords_match(self) -> "SignUpRequest":
        """Reject a confirmation that differs from the password."""
        if self.password != self.password_confirmation:
            raise ValueError("password_confirmation does not match password")
        return self

    model_config = {
        "json_schema_extra": {
            "example": {
                "first_name": "Sam",
                "last_name": "Yamashita",
                "username": "samsam",
                "email": "sam@example.org",
                "password": "correct horse battery",
                "password_confirmation": "correct horse battery",
            }
        }
    }
