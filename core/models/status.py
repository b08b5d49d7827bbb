"""Status payload model."""

from django.db import models

from core.models.base import TimestampedModel


class Status(TimestampedModel):
    """Free-text post payload."""

    text = models.TextField(max_length=1024)

    class Meta:
        """Django model metadata."""

        db_table = "statuses"
        verbose_name_plural = "statuses"

    def __str__(self) -> str:
        """Return string representation of status."""
        return self.summary()

    def summary(self) -> str:
        """Short text shown on a timeline."""
        return self.text
