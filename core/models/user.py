"""User model."""

from typing import ClassVar

from django.contrib.auth.hashers import check_password, make_password
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import QuerySet

from core.enums import BondState
from core.models.base import TimestampedModel
from core.models.bond import Bond


class User(TimestampedModel):
    """Account owning bonds and posts.

    ``first_name`` is stored capitalized ("AdaM" becomes "Adam") while
    ``last_name`` is kept exactly as entered. Email addresses are compared
    case-insensitively by storing them lower-cased; usernames are
    case-sensitive.
    """

    email = models.EmailField(max_length=255, unique=True)
    username = models.CharField(max_length=50, unique=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100, default="", blank=True)
    is_public = models.BooleanField(default=True)
    encrypted_password = models.CharField(max_length=255, default="", blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["id"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.username} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(id={self.pk}, username='{self.username}')>"

    def clean(self) -> None:
        """Normalize the email and reject a whitespace-only first name."""
        if self.email:
            self.email = self.email.strip().lower()
        if self.first_name is not None and not self.first_name.strip():
            raise ValidationError({"first_name": "This field cannot be blank."})

    def before_save(self) -> None:
        """Capitalize the first name."""
        self.first_name = self.first_name.capitalize()

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def set_password(self, raw_password: str) -> None:
        """Hash and store a password. The caller is responsible for saving."""
        self.encrypted_password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        """Return True if the raw password matches the stored hash."""
        if not self.encrypted_password:
            return False
        return check_password(raw_password, self.encrypted_password)

    @property
    def followings(self) -> QuerySet["User"]:
        """Users this user follows, in the order the bonds were created."""
        return User.objects.filter(
            inverse_bonds__user=self,
            inverse_bonds__state=BondState.FOLLOWING.value,
        ).order_by("inverse_bonds__id")

    @property
    def followers(self) -> QuerySet["User"]:
        """Users following this user, in the order the bonds were created."""
        return User.objects.filter(
            bonds__friend=self,
            bonds__state=BondState.FOLLOWING.value,
        ).order_by("bonds__id")

    @property
    def follow_requests(self) -> QuerySet["User"]:
        """Users this user asked to follow who have not accepted yet."""
        return User.objects.filter(
            inverse_bonds__user=self,
            inverse_bonds__state=BondState.REQUESTING.value,
        ).order_by("inverse_bonds__id")

    @property
    def pending_requests(self) -> QuerySet["User"]:
        """Users waiting for this user to accept their follow request."""
        return User.objects.filter(
            bonds__friend=self,
            bonds__state=BondState.REQUESTING.value,
        ).order_by("bonds__id")

    def can_view(self, viewer: "User | None") -> bool:
        """Return True if ``viewer`` may see this user's posts.

        Public users are visible to everyone. Private users are visible to
        themselves and to users holding an accepted bond towards them.
        """
        if self.is_public:
            return True
        if viewer is None:
            return False
        if viewer.pk == self.pk:
            return True
        return Bond.objects.filter(
            user=viewer, friend=self, state=BondState.FOLLOWING.value
        ).exists()
