"""Tests for BondService."""

import pytest

from core.enums import BondState
from core.exceptions import (
    BondNotFoundError,
    ConflictError,
    InvalidBondTransitionError,
    SelfBondError,
)
from core.models import Bond
from core.services import bond_service
from tests.factories import BondFactory, UserFactory


@pytest.mark.django_db
class TestBondServiceFollow:
    """Test suite for BondService.follow."""

    def test_follow_public_user_is_immediate(self, user):
        """Test following a public user creates a FOLLOWING bond."""
        friend = UserFactory(is_public=True)

        bond = bond_service.follow(user, friend)

        assert bond.state == BondState.FOLLOWING.value
        assert list(user.followings) == [friend]

    def test_follow_private_user_creates_request(self, user, private_user):
        """Test following a private user creates a REQUESTING bond."""
        bond = bond_service.follow(user, private_user)

        assert bond.state == BondState.REQUESTING.value
        assert list(user.follow_requests) == [private_user]
        assert list(private_user.pending_requests) == [user]
        assert list(private_user.followers) == []

    def test_follow_twice_conflicts(self, user):
        """Test a duplicate follow raises ConflictError."""
        friend = UserFactory()
        bond_service.follow(user, friend)

        with pytest.raises(ConflictError):
            bond_service.follow(user, friend)

        assert Bond.objects.filter(user=user, friend=friend).count() == 1

    def test_follow_self_is_rejected(self, user):
        """Test following yourself raises SelfBondError."""
        with pytest.raises(SelfBondError):
            bond_service.follow(user, user)

        assert Bond.objects.count() == 0

    def test_mutual_follow(self):
        """Test two users can follow each other."""
        sam, adam = UserFactory.create_batch(2)

        bond_service.follow(sam, adam)
        bond_service.follow(adam, sam)

        assert list(sam.followers) == [adam]
        assert list(adam.followers) == [sam]


@pytest.mark.django_db
class TestBondServiceRequests:
    """Test suite for accept, reject and unfollow."""

    def test_accept_request(self, user, private_user):
        """Test accepting a request makes the requester a follower."""
        bond_service.follow(user, private_user)

        bond = bond_service.accept(private_user, user)

        assert bond.state == BondState.FOLLOWING.value
        assert list(private_user.followers) == [user]
        assert list(private_user.pending_requests) == []

    def test_accept_without_request(self, user, private_user):
        """Test accepting a missing request raises BondNotFoundError."""
        with pytest.raises(BondNotFoundError):
            bond_service.accept(private_user, user)

    def test_accept_already_following(self, user):
        """Test accepting an accepted bond raises InvalidBondTransitionError."""
        friend = UserFactory()
        bond_service.follow(user, friend)

        with pytest.raises(InvalidBondTransitionError):
            bond_service.accept(friend, user)

    def test_reject_request(self, user, private_user):
        """Test rejecting a request deletes it."""
        bond_service.follow(user, private_user)

        bond_service.reject(private_user, user)

        assert not Bond.objects.filter(user=user, friend=private_user).exists()

    def test_reject_accepted_bond_conflicts(self):
        """Test an accepted follow can not be rejected."""
        bond = BondFactory(state=BondState.FOLLOWING.value)

        with pytest.raises(ConflictError):
            bond_service.reject(bond.friend, bond.user)

        assert Bond.objects.filter(pk=bond.pk).exists()

    def test_unfollow(self):
        """Test unfollow removes the bond whatever its state."""
        bond = BondFactory(state=BondState.REQUESTING.value)

        bond_service.unfollow(bond.user, bond.friend)

        assert Bond.objects.count() == 0

    def test_unfollow_without_bond(self, user):
        """Test unfollowing a stranger raises BondNotFoundError."""
        with pytest.raises(BondNotFoundError):
            bond_service.unfollow(user, UserFactory())
