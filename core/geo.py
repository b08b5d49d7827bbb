"""Coordinate value object and great-circle helpers for places.

Coordinates use WGS 84 (SRID 4326) with longitude first, matching the
``POINT (lng lat [alt])`` well-known-text form.
"""

import math
import re
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0088

_WKT_POINT = re.compile(
    r"^\s*POINT\s*Z?\s*\(\s*(?P<lng>[-+]?\d+(?:\.\d+)?)\s+"
    r"(?P<lat>[-+]?\d+(?:\.\d+)?)"
    r"(?:\s+(?P<alt>[-+]?\d+(?:\.\d+)?))?\s*\)\s*$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe."""

    longitude: float
    latitude: float
    altitude: float = 0.0

    @classmethod
    def from_wkt(cls, text: str) -> "Coordinate":
        """Parse ``POINT (lng lat)`` or ``POINT (lng lat alt)``.

        Raises:
            ValueError: If the text is not a WKT point.
        """
        match = _WKT_POINT.match(text)
        if match is None:
            raise ValueError(f"Not a WKT point: {text!r}")
        return cls(
            longitude=float(match["lng"]),
            latitude=float(match["lat"]),
            altitude=float(match["alt"] or 0.0),
        )

    def to_wkt(self) -> str:
        """Render as WKT, dropping a zero altitude."""
        if self.altitude:
            return f"POINT ({self.longitude} {self.latitude} {self.altitude})"
        return f"POINT ({self.longitude} {self.latitude})"

    def distance_km_to(self, other: "Coordinate") -> float:
        """Great-circle distance in kilometres (haversine)."""
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        d_lat = lat2 - lat1
        d_lng = math.radians(other.longitude - self.longitude)
        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
        )
        return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


@dataclass(frozen=True)
class BoundingBox:
    """Latitude/longitude ranges enclosing a circle.

    ``min_longitude``/``max_longitude`` are None when the circle touches a
    pole or crosses the antimeridian; only latitude can be used then.
    """

    min_latitude: float
    max_latitude: float
    min_longitude: float | None
    max_longitude: float | None


def bounding_box(origin: Coordinate, radius_km: float) -> BoundingBox:
    """Return a box that contains every point within ``radius_km`` of origin."""
    angular_radius = radius_km / EARTH_RADIUS_KM
    lat_delta = math.degrees(angular_radius)
    min_lat = max(-90.0, origin.latitude - lat_delta)
    max_lat = min(90.0, origin.latitude + lat_delta)

    cos_lat = math.cos(math.radians(origin.latitude))
    if min_lat <= -90.0 or max_lat >= 90.0 or math.sin(angular_radius) >= cos_lat:
        return BoundingBox(min_lat, max_lat, None, None)

    # widest longitude of the circle is reached off the origin's parallel
    lng_delta = math.degrees(math.asin(math.sin(angular_radius) / cos_lat))
    min_lng = origin.longitude - lng_delta
    max_lng = origin.longitude + lng_delta
    if min_lng < -180.0 or max_lng > 180.0:
        return BoundingBox(min_lat, max_lat, None, None)
    return BoundingBox(min_lat, max_lat, min_lng, max_lng)
