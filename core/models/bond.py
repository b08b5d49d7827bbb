"""Bond model."""

from typing import ClassVar

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import F, Q

from core.enums import BondState
from core.exceptions import InvalidBondTransitionError
from core.models.base import TimestampedModel


class Bond(TimestampedModel):
    """Directed relationship: ``user`` follows, or asked to follow, ``friend``.

    Direction (who initiated) and state (what came of it) are kept as two
    separate fields. A pair of users has at most one bond per direction and
    nobody can bond with themselves.
    """

    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="bonds",
    )
    friend = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="inverse_bonds",
    )
    state = models.CharField(
        max_length=16,
        choices=[(state.value, state.value) for state in BondState],
    )

    class Meta:
        """Django model metadata."""

        db_table = "bonds"
        ordering: ClassVar[list[str]] = ["id"]
        constraints: ClassVar[list] = [
            models.UniqueConstraint(
                fields=["user", "friend"],
                name="unique_bond_user_friend",
                violation_error_message="This user already has a bond to that friend.",
            ),
            models.CheckConstraint(
                condition=~Q(user=F("friend")),
                name="bond_user_is_not_friend",
                violation_error_message="A user can not bond with themselves.",
            ),
        ]
        indexes: ClassVar[list] = [
            models.Index(fields=["user", "state"]),
            models.Index(fields=["friend", "state"]),
        ]

    def __str__(self) -> str:
        """Return string representation of the bond."""
        return f"{self.user_id} -> {self.friend_id} ({self.state})"

    def __repr__(self) -> str:
        """Return detailed representation of the bond."""
        return (
            f"<Bond(id={self.pk}, user={self.user_id}, "
            f"friend={self.friend_id}, state={self.state})>"
        )

    def clean(self) -> None:
        """Reject self-bonds with a field-level message."""
        if self.user_id is not None and self.user_id == self.friend_id:
            raise ValidationError(
                {"friend": "A user can not bond with themselves."}
            )

    @property
    def is_following(self) -> bool:
        """True when the bond is an accepted follow."""
        return self.state == BondState.FOLLOWING.value

    @property
    def is_requesting(self) -> bool:
        """True when the bond is a pending follow request."""
        return self.state == BondState.REQUESTING.value

    def accept(self) -> None:
        """Turn a pending request into an accepted follow.

        Raises:
            InvalidBondTransitionError: If the bond is not REQUESTING.
        """
        if not self.is_requesting:
            raise InvalidBondTransitionError(
                current_state=self.state,
                target_state=BondState.FOLLOWING.value,
            )
        self.state = BondState.FOLLOWING.value
        self.save(update_fields=["state", "updated_at"])
