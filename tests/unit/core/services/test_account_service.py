"""Tests for AccountService."""

import pytest
from django.core.exceptions import ValidationError

from core.enums import BondState
from core.exceptions import UserNotFoundError
from core.models import User
from core.schemas import SignUpRequest
from core.services import account_service
from tests.factories import BondFactory, UserFactory


def sign_up_payload(**overrides):
    """Build a raw sign-up payload."""
    payload = {
        "first_name": "adam",
        "last_name": "Notodikromo",
        "username": "adam123",
        "email": "adam@example.org",
        "password": "correct horse",
        "password_confirmation": "correct horse",
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestAccountServiceSignUp:
    """Test suite for AccountService.sign_up."""

    def test_sign_up_creates_user(self):
        """Test sign-up persists a normalized user with a hashed password."""
        user = account_service.sign_up(SignUpRequest(**sign_up_payload()))

        assert user.pk is not None
        assert user.first_name == "Adam"
        assert user.last_name == "Notodikromo"
        assert user.is_public is True
        assert user.check_password("correct horse")

    def test_sign_up_ignores_fields_outside_whitelist(self):
        """Test extra fields in the payload never reach the user."""
        request = SignUpRequest(
            **sign_up_payload(is_public=False, encrypted_password="x")
        )

        user = account_service.sign_up(request)

        assert user.is_public is True
        assert user.encrypted_password != "x"

    def test_sign_up_with_taken_email(self):
        """Test sign-up fails when the email is taken."""
        UserFactory(email="adam@example.org")

        with pytest.raises(ValidationError) as exc_info:
            account_service.sign_up(SignUpRequest(**sign_up_payload()))

        assert "email" in exc_info.value.message_dict
        assert User.objects.count() == 1


@pytest.mark.django_db
class TestAccountServiceProfile:
    """Test suite for AccountService.profile_of."""

    def test_profile_includes_counts(self):
        """Test profile carries follower and following counts."""
        user = UserFactory(username="samsam")
        BondFactory(friend=user)
        BondFactory(friend=user, state=BondState.REQUESTING.value)
        BondFactory(user=user)

        profile = account_service.profile_of("samsam")

        assert profile.id == user.pk
        assert profile.username == "samsam"
        assert profile.follower_count == 1
        assert profile.following_count == 1

    def test_private_profile_hides_counts_from_strangers(self):
        """Test counts are zero for viewers who can not see the user."""
        user = UserFactory(username="hidden", is_public=False)
        BondFactory(friend=user)

        profile = account_service.profile_of("hidden", viewer=UserFactory())

        assert profile.is_public is False
        assert profile.follower_count == 0

    def test_profile_of_unknown_user(self):
        """Test unknown usernames raise UserNotFoundError."""
        with pytest.raises(UserNotFoundError):
            account_service.profile_of("ghost")
