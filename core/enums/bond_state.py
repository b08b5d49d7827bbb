"""Bond state enumeration."""

from enum import Enum


class BondState(str, Enum):
    """State carried by a directed Bond between two users.

    FOLLOWING is an accepted follow; REQUESTING is a pending follow request
    waiting for the followed user to accept it.
    """

    FOLLOWING = "FOLLOWING"
    REQUESTING = "REQUESTING"
