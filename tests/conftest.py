"""Pytest configuration and shared fixtures."""

import os

import django

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "social_service.settings_test")
django.setup()

from tests.factories import PlaceFactory, UserFactory  # noqa: E402


@pytest.fixture
def user(db):
    """Provide a saved public user."""
    return UserFactory()


@pytest.fixture
def private_user(db):
    """Provide a saved private user."""
    return UserFactory(is_public=False)


@pytest.fixture
def place(db):
    """Provide a saved place."""
    return PlaceFactory()
