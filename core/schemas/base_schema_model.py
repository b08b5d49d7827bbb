"""Base pydantic model for centralized configuration of schema definitions."""

from pydantic import BaseModel, ConfigDict


class BaseSchemaModel(BaseModel):
    """Base pydantic model for centralized configuration of schema definitions.

    Unknown keys are dropped rather than rejected, so a schema doubles as an
    attribute whitelist for incoming payloads.
    """

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )
