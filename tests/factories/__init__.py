"""Factory classes for test data generation."""

import factory
from factory.django import DjangoModelFactory
from faker import Faker

from core.enums import ActivityType, BondState, PlaceType

fake = Faker()


class UserFactory(DjangoModelFactory):
    """Factory for User model."""

    class Meta:
        model = "core.User"

    first_name = factory.LazyAttribute(lambda _: fake.first_name())
    last_name = factory.LazyAttribute(lambda _: fake.last_name())
    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.Sequence(lambda n: f"user{n}@example.org")
    is_public = True
    encrypted_password = factory.django.Password("password123")


class BondFactory(DjangoModelFactory):
    """Factory for Bond model."""

    class Meta:
        model = "core.Bond"

    user = factory.SubFactory(UserFactory)
    friend = factory.SubFactory(UserFactory)
    state = BondState.FOLLOWING.value


class PlaceFactory(DjangoModelFactory):
    """Factory for Place model."""

    class Meta:
        model = "core.Place"

    locale = "en"
    name = factory.LazyAttribute(lambda _: fake.company())
    place_type = factory.Iterator([place_type.value for place_type in PlaceType])
    longitude = factory.Sequence(lambda n: 100.0 + n * 0.01)
    latitude = factory.Sequence(lambda n: -7.0 - n * 0.01)


class StatusFactory(DjangoModelFactory):
    """Factory for Status model."""

    class Meta:
        model = "core.Status"

    text = factory.LazyAttribute(lambda _: fake.sentence())


class SightFactory(DjangoModelFactory):
    """Factory for Sight model."""

    class Meta:
        model = "core.Sight"

    place = factory.SubFactory(PlaceFactory)
    activity_type = ActivityType.CHECKIN.value


class PostFactory(DjangoModelFactory):
    """Factory for a Post carrying a Status."""

    class Meta:
        model = "core.Post"

    user = factory.SubFactory(UserFactory)
    postable = factory.SubFactory(StatusFactory)
