"""Place model."""

from typing import ClassVar

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.constants import DEFAULT_MAX_NEARBY_RADIUS_KM
from core.enums import PlaceType
from core.geo import Coordinate, bounding_box
from core.models.base import TimestampedModel


class PlaceQuerySet(models.QuerySet):
    """Spatial lookups over places."""

    def nearby(self, origin: Coordinate, radius_km: float) -> list["Place"]:
        """Places within ``radius_km`` of ``origin``, closest first.

        Candidates are narrowed with an indexed bounding-box query and then
        filtered by great-circle distance.

        Raises:
            ValueError: If the radius is not positive or exceeds
                ``settings.MAX_NEARBY_RADIUS_KM``.
        """
        max_radius = getattr(
            settings, "MAX_NEARBY_RADIUS_KM", DEFAULT_MAX_NEARBY_RADIUS_KM
        )
        if radius_km <= 0 or radius_km > max_radius:
            raise ValueError(
                f"radius_km must be in (0, {max_radius}], got {radius_km}"
            )

        box = bounding_box(origin, radius_km)
        candidates = self.filter(
            latitude__gte=box.min_latitude, latitude__lte=box.max_latitude
        )
        if box.min_longitude is not None:
            candidates = candidates.filter(
                longitude__gte=box.min_longitude, longitude__lte=box.max_longitude
            )

        with_distance = [
            (origin.distance_km_to(place.coordinate), place) for place in candidates
        ]
        return [
            place
            for distance, place in sorted(with_distance, key=lambda pair: pair[0])
            if distance <= radius_km
        ]


class Place(TimestampedModel):
    """Point of interest users can check in at.

    The coordinate is stored as longitude/latitude/altitude columns and
    exposed as a ``Coordinate``. A locale can hold only one place per
    coordinate, altitude included, so two floors of one building at the same
    longitude and latitude are distinct places.
    """

    longitude = models.FloatField(
        validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)],
    )
    latitude = models.FloatField(
        validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)],
    )
    altitude = models.FloatField(default=0.0)
    locale = models.CharField(max_length=16, db_index=True)
    name = models.CharField(max_length=255)
    place_type = models.CharField(
        max_length=20,
        choices=[(place_type.value, place_type.value) for place_type in PlaceType],
    )

    objects = PlaceQuerySet.as_manager()

    class Meta:
        """Django model metadata."""

        db_table = "places"
        ordering: ClassVar[list[str]] = ["id"]
        constraints: ClassVar[list] = [
            models.UniqueConstraint(
                fields=["locale", "longitude", "latitude", "altitude"],
                name="unique_place_locale_coordinate",
                violation_error_message=(
                    "A place already exists at this coordinate for this locale."
                ),
            ),
        ]
        indexes: ClassVar[list] = [
            models.Index(fields=["latitude", "longitude"]),
        ]

    def __str__(self) -> str:
        """Return string representation of place."""
        return f"{self.name} ({self.place_type})"

    def __repr__(self) -> str:
        """Return detailed representation of place."""
        wkt = self.coordinate.to_wkt() if self.coordinate else None
        return f"<Place(id={self.pk}, name='{self.name}', coordinate='{wkt}')>"

    @property
    def coordinate(self) -> Coordinate | None:
        if self.longitude is None or self.latitude is None:
            return None
        return Coordinate(self.longitude, self.latitude, self.altitude or 0.0)

    @coordinate.setter
    def coordinate(self, value: Coordinate | str | None) -> None:
        if value is None:
            self.longitude = None
            self.latitude = None
            return
        if isinstance(value, str):
            value = Coordinate.from_wkt(value)
        self.longitude = value.longitude
        self.latitude = value.latitude
        self.altitude = value.altitude

    def distance_km_to(self, other: "Place | Coordinate") -> float:
        """Great-circle distance to another place or coordinate."""
        target = other.coordinate if isinstance(other, Place) else other
        return self.coordinate.distance_km_to(target)
