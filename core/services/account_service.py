"""Service for account sign-up and profiles."""

import structlog

from core.exceptions import UserNotFoundError
from core.models import User
from core.repositories import BondRepository, UserRepository
from core.schemas import SignUpRequest, UserProfile

logger = structlog.get_logger(__name__)


class AccountService:
    """Service for creating accounts and reading profiles."""

    def sign_up(self, request: SignUpRequest) -> User:
        """Create a user from a validated sign-up request.

        Only the whitelisted sign-up fields reach the model; the password is
        hashed before the user is saved.

        Args:
            request: Validated sign-up payload.

        Returns:
            The persisted User.

        Raises:
            django.core.exceptions.ValidationError: If the user is invalid,
                e.g. the email or username is already taken.
        """
        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            username=request.username,
            email=request.email,
        )
        user.set_password(request.password)
        user.save()

        logger.info("user_signed_up", user_id=user.pk, username=user.username)
        return user

    def profile_of(self, username: str, viewer: User | None = None) -> UserProfile:
        """Build the profile of ``username`` as seen by ``viewer``.

        Relationship counts are hidden (zero) when the viewer may not see
        the user.

        Raises:
            UserNotFoundError: If no user has that username.
        """
        try:
            user = UserRepository.get_user_by_username(username)
        except UserNotFoundError:
            logger.warning("profile_user_not_found", username=username)
            raise

        profile = UserProfile.model_validate(user)
        if user.can_view(viewer):
            profile.follower_count = BondRepository.count_followers(user.pk)
            profile.following_count = BondRepository.count_followings(user.pk)
        return profile


account_service = AccountService()
