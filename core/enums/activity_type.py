"""Activity types recorded by a Sight."""

from enum import Enum


class ActivityType(str, Enum):
    """What a user did at a place."""

    CHECKIN = "CHECKIN"
