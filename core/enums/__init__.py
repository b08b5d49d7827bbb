"""Enumerations for the core app."""

from core.enums.activity_type import ActivityType
from core.enums.bond_state import BondState
from core.enums.place_type import PlaceType
from core.enums.postable_type import PostableType

__all__ = ["ActivityType", "BondState", "PlaceType", "PostableType"]
