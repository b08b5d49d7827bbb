"""Tests for bond signal handlers."""

from unittest.mock import patch

import pytest

from core.enums import BondState
from tests.factories import BondFactory


@pytest.mark.django_db
class TestBondSignals:
    """Test suite for bond signal handlers."""

    def test_follow_started_logged_on_following_bond(self):
        """Test a new FOLLOWING bond logs follow_started."""
        with patch("core.signals.bond_signals.logger") as mock_logger:
            bond = BondFactory(state=BondState.FOLLOWING.value)

            mock_logger.info.assert_called_once_with(
                "follow_started",
                bond_id=bond.pk,
                user_id=bond.user_id,
                friend_id=bond.friend_id,
            )

    def test_follow_requested_logged_on_requesting_bond(self):
        """Test a new REQUESTING bond logs follow_requested."""
        with patch("core.signals.bond_signals.logger") as mock_logger:
            BondFactory(state=BondState.REQUESTING.value)

            assert mock_logger.info.call_args[0][0] == "follow_requested"

    def test_follow_accepted_logged_on_accept(self):
        """Test accepting a request logs follow_accepted."""
        bond = BondFactory(state=BondState.REQUESTING.value)

        with patch("core.signals.bond_signals.logger") as mock_logger:
            bond.accept()

            mock_logger.info.assert_called_once()
            assert mock_logger.info.call_args[0][0] == "follow_accepted"

    def test_plain_update_is_not_logged(self):
        """Test saving a bond without a state change logs nothing."""
        bond = BondFactory()

        with patch("core.signals.bond_signals.logger") as mock_logger:
            bond.save()

            mock_logger.info.assert_not_called()
