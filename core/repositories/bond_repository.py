"""Repository for bond lookups."""

from core.enums import BondState
from core.exceptions import BondNotFoundError
from core.models import Bond


class BondRepository:
    """Repository for encapsulating bond database queries."""

    @staticmethod
    def find(user_id: int, friend_id: int) -> Bond | None:
        """Return the bond from ``user_id`` to ``friend_id`` if there is one."""
        return Bond.objects.filter(user_id=user_id, friend_id=friend_id).first()

    @staticmethod
    def get(user_id: int, friend_id: int) -> Bond:
        """Return the bond from ``user_id`` to ``friend_id``.

        Raises:
            BondNotFoundError: If the users are not bonded in that direction.
        """
        bond = BondRepository.find(user_id, friend_id)
        if bond is None:
            raise BondNotFoundError(user_id=user_id, friend_id=friend_id)
        return bond

    @staticmethod
    def count_followers(user_id: int) -> int:
        return Bond.objects.filter(friend_id=user_id, state=BondState.FOLLOWING.value).count()

    @staticmethod
    def count_followings(user_id: int) -> int:
        return Bond.objects.filter(user_id=user_id, state=BondState.FOLLOWING.value).count()
