"""Post payload discriminant."""

from enum import Enum


class PostableType(str, Enum):
    """Which payload variant a Post carries.

    STATUS posts reference a Status (free text), SIGHT posts reference a
    Sight (a check-in at a Place).
    """

    STATUS = "STATUS"
    SIGHT = "SIGHT"
