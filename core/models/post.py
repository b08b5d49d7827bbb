"""Post model.

A post is a timeline entry owned by a user. Its payload is a tagged
variant: ``postable_type`` names the variant and exactly one of ``status``
or ``sight`` is set to match it. Replies point at their parent through
``thread``.
"""

from typing import ClassVar

from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models import Q

from core.enums import PostableType
from core.models.base import TimestampedModel
from core.models.sight import Sight
from core.models.status import Status


class Post(TimestampedModel):
    """Timeline entry wrapping a Status or a Sight."""

    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="posts",
    )
    postable_type = models.CharField(
        max_length=16,
        choices=[(kind.value, kind.value) for kind in PostableType],
    )
    status = models.OneToOneField(
        "core.Status",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="post",
    )
    sight = models.OneToOneField(
        "core.Sight",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="post",
    )
    thread = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="replies",
    )

    class Meta:
        """Django model metadata."""

        db_table = "posts"
        ordering: ClassVar[list[str]] = ["-created_at", "-id"]
        constraints: ClassVar[list] = [
            models.CheckConstraint(
                condition=(
                    Q(
                        postable_type=PostableType.STATUS.value,
                        status__isnull=False,
                        sight__isnull=True,
                    )
                    | Q(
                        postable_type=PostableType.SIGHT.value,
                        sight__isnull=False,
                        status__isnull=True,
                    )
                ),
                name="post_payload_matches_type",
                violation_error_message="A post carries exactly one payload of its type.",
            ),
        ]
        indexes: ClassVar[list] = [
            models.Index(fields=["user", "-created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of post."""
        return f"{self.postable_type} by user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of post."""
        return (
            f"<Post(id={self.pk}, user={self.user_id}, "
            f"type={self.postable_type}, thread={self.thread_id})>"
        )

    @property
    def postable(self) -> Status | Sight | None:
        """The payload selected by ``postable_type``."""
        if self.postable_type == PostableType.STATUS.value:
            return self.status
        if self.postable_type == PostableType.SIGHT.value:
            return self.sight
        return None

    @postable.setter
    def postable(self, payload: Status | Sight) -> None:
        if isinstance(payload, Status):
            self.postable_type = PostableType.STATUS.value
            self.status = payload
            self.sight = None
        elif isinstance(payload, Sight):
            self.postable_type = PostableType.SIGHT.value
            self.sight = payload
            self.status = None
        else:
            raise TypeError(
                f"postable must be a Status or a Sight, got {type(payload).__name__}"
            )

    @property
    def root(self) -> "Post":
        """First post of the thread this post belongs to."""
        post = self
        while post.thread is not None:
            post = post.thread
        return post

    def summary(self) -> str:
        """Short text for the payload."""
        return self.postable.summary()

    def clean(self) -> None:
        """Require a payload and keep the thread chain acyclic."""
        if self.postable is None:
            raise ValidationError(
                {"postable_type": "A post needs a Status or a Sight payload."}
            )
        if self.pk is not None and self.thread_id is not None:
            ancestor = self.thread
            while ancestor is not None:
                if ancestor.pk == self.pk:
                    raise ValidationError(
                        {"thread": "A post can not reply to itself or its replies."}
                    )
                ancestor = ancestor.thread

    def save(self, *args, **kwargs) -> None:
        """Persist an unsaved payload together with the post.

        If the post can not be saved the payload insert is rolled back and
        the payload is left unsaved again, so a later save inserts it anew.
        """
        payload = self.postable
        new_payload = payload is not None and payload.pk is None
        try:
            with transaction.atomic():
                if new_payload:
                    payload.save()
                    self.postable = payload
                super().save(*args, **kwargs)
        except Exception:
            if new_payload:
                payload.pk = None
                payload._state.adding = True
                self.postable = payload
            raise
