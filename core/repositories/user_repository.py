"""Repository for user-related database queries."""

from core.enums import BondState
from core.exceptions import UserNotFoundError
from core.models import Bond, User


class UserRepository:
    """Repository for encapsulating user database queries."""

    @staticmethod
    def get_user_by_username(username: str) -> User:
        """Fetch a user by exact username.

        Raises:
            UserNotFoundError: If no user has that username.
        """
        try:
            return User.objects.get(username=username)
        except User.DoesNotExist:
            raise UserNotFoundError(username) from None

    @staticmethod
    def user_follows(follower_id: int, followee_id: int) -> bool:
        """Check if one user follows another.

        Pending requests do not count as following.

        Args:
            follower_id: ID of the user who might be following
            followee_id: ID of the user who might be followed

        Returns:
            True if follower_id follows followee_id, False otherwise

        Example:
            >>> follows = UserRepository.user_follows(sam.pk, adam.pk)
            >>> if follows:
            ...     print("Sam follows Adam")
        """
        return Bond.objects.filter(
            user_id=follower_id,
            friend_id=followee_id,
            state=BondState.FOLLOWING.value,
        ).exists()
