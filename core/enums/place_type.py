"""Place category enumeration."""

from enum import Enum


class PlaceType(str, Enum):
    """Categories a Place can belong to."""

    RESTAURANT = "restaurant"
    COFFEE_SHOP = "coffee_shop"
    MALL = "mall"
    HOTEL = "hotel"
    OTHER = "other"
