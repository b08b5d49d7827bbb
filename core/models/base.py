"""Abstract base model shared by all core models."""

from django.core.exceptions import ValidationError
from django.db import models


class TimestampedModel(models.Model):
    """Base model providing timestamps and validate-before-save behaviour.

    ``save()`` runs ``full_clean()`` first, so a record that fails field,
    uniqueness or constraint validation is never written. Callers that want
    to inspect problems without raising use ``is_valid()``.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        abstract = True

    def is_valid(self) -> bool:
        """Validate the instance and record field-level error messages.

        Returns:
            True when the instance could be saved as it is.
        """
        try:
            self.full_clean()
        except ValidationError as e:
            self.validation_errors = e.message_dict
            return False
        self.validation_errors = {}
        return True

    def before_save(self) -> None:
        """Hook run after validation passed, right before the write."""

    def save(self, *args, **kwargs) -> None:
        """Validate, normalize, then persist."""
        self.full_clean()
        self.before_save()
        super().save(*args, **kwargs)
