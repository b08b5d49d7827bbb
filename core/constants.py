"""Constants used throughout the social service application."""

from core.enums import ActivityType

# Sight summaries
ACTIVITY_VERBS = {
    ActivityType.CHECKIN: "Checked in at",
}

# Proximity search
DEFAULT_MAX_NEARBY_RADIUS_KM = 50.0  # Used when settings do not override it
