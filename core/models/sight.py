"""Sight payload model."""

from django.db import models

from core.constants import ACTIVITY_VERBS
from core.enums import ActivityType
from core.models.base import TimestampedModel


class Sight(TimestampedModel):
    """Post payload recording an activity at a Place."""

    place = models.ForeignKey(
        "core.Place",
        on_delete=models.PROTECT,
        related_name="sights",
    )
    activity_type = models.CharField(
        max_length=16,
        choices=[(activity.value, activity.value) for activity in ActivityType],
        default=ActivityType.CHECKIN.value,
    )

    class Meta:
        """Django model metadata."""

        db_table = "sights"

    def __str__(self) -> str:
        """Return string representation of sight."""
        return self.summary()

    def summary(self) -> str:
        """Short text shown on a timeline, e.g. "Checked in at Hotel Majapahit"."""
        verb = ACTIVITY_VERBS[ActivityType(self.activity_type)]
        return f"{verb} {self.place.name}"
