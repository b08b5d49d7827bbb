"""Service managing follow relationships between users."""

from django.db import transaction

import structlog

from core.enums import BondState
from core.exceptions import ConflictError, SelfBondError
from core.models import Bond, User
from core.repositories import BondRepository

logger = structlog.get_logger(__name__)


class BondService:
    """Follow, accept, reject and unfollow.

    Following a public user takes effect immediately. Following a private
    user creates a pending request that the private user accepts or rejects.
    """

    def follow(self, user: User, friend: User) -> Bond:
        """Create a bond from ``user`` to ``friend``.

        Args:
            user: User who wants to follow.
            friend: User to be followed.

        Returns:
            The new Bond, FOLLOWING if ``friend`` is public, REQUESTING
            otherwise.

        Raises:
            SelfBondError: If both users are the same.
            ConflictError: If a bond in this direction already exists.
        """
        if user.pk == friend.pk:
            raise SelfBondError(user.pk)

        existing = BondRepository.find(user.pk, friend.pk)
        if existing is not None:
            logger.warning(
                "bond_already_exists",
                user_id=user.pk,
                friend_id=friend.pk,
                state=existing.state,
            )
            raise ConflictError(
                "Bond already exists",
                detail=f"User {user.pk} is already {existing.state} user {friend.pk}",
            )

        state = BondState.FOLLOWING if friend.is_public else BondState.REQUESTING
        bond = Bond.objects.create(user=user, friend=friend, state=state.value)

        logger.info(
            "bond_created",
            bond_id=bond.pk,
            user_id=user.pk,
            friend_id=friend.pk,
            state=bond.state,
        )
        return bond

    def accept(self, friend: User, requester: User) -> Bond:
        """Accept ``requester``'s pending request to follow ``friend``.

        Raises:
            BondNotFoundError: If there is no request.
            InvalidBondTransitionError: If the bond is already FOLLOWING.
        """
        with transaction.atomic():
            bond = BondRepository.get(requester.pk, friend.pk)
            bond.accept()

        logger.info(
            "bond_accepted",
            bond_id=bond.pk,
            user_id=requester.pk,
            friend_id=friend.pk,
        )
        return bond

    def reject(self, friend: User, requester: User) -> None:
        """Discard ``requester``'s pending request to follow ``friend``.

        An accepted follow is left alone; use ``unfollow`` for that.

        Raises:
            BondNotFoundError: If there is no pending request.
            ConflictError: If the bond was already accepted.
        """
        bond = BondRepository.get(requester.pk, friend.pk)
        if not bond.is_requesting:
            logger.warning(
                "reject_non_pending_bond", bond_id=bond.pk, state=bond.state
            )
            raise ConflictError(
                "Only pending requests can be rejected",
                detail=f"Bond {bond.pk} is {bond.state}",
            )
        bond.delete()
        logger.info("bond_rejected", user_id=requester.pk, friend_id=friend.pk)

    def unfollow(self, user: User, friend: User) -> None:
        """Remove the bond from ``user`` to ``friend``, whatever its state.

        Raises:
            BondNotFoundError: If ``user`` has no bond to ``friend``.
        """
        bond = BondRepository.get(user.pk, friend.pk)
        bond.delete()
        logger.info("bond_removed", user_id=user.pk, friend_id=friend.pk)


bond_service = BondService()
