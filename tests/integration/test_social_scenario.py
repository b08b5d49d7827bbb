"""End-to-end scenario: two friends, a hotel and a conversation thread."""

import pytest

from core.enums import ActivityType, BondState, PlaceType, PostableType
from core.models import Bond, Place, Post, Sight, Status, User
from core.services import bond_service, post_service


@pytest.mark.django_db
class TestSocialScenario:
    """Test suite walking through a complete interaction."""

    @pytest.fixture
    def sam(self):
        """Create Sam."""
        return User.objects.create(
            first_name="Sam",
            last_name="Yamashita",
            email="sam@example.org",
            username="samsam",
        )

    @pytest.fixture
    def adam(self):
        """Create Adam."""
        return User.objects.create(
            first_name="Adam",
            last_name="Notodikromo",
            email="adam@example.org",
            username="adam123",
        )

    @pytest.fixture
    def hotel(self):
        """Create Hotel Majapahit."""
        return Place.objects.create(
            locale="en",
            name="Hotel Majapahit",
            place_type=PlaceType.HOTEL.value,
            coordinate="POINT (112.739898 -7.259836 0)",
        )

    def test_thread_with_mutual_follow_and_check_in(self, sam, adam, hotel):
        """Test all records persist with linkage and the thread resolves."""
        Bond.objects.create(user=sam, friend=adam, state=BondState.FOLLOWING.value)
        Bond.objects.create(user=adam, friend=sam, state=BondState.FOLLOWING.value)

        post = Post.objects.create(
            user=sam, postable=Status(text="Wow! Looks great! Have fun, Sam!")
        )
        replies = [
            Post.objects.create(
                user=adam,
                postable=Status(text="Wow! Looks great! Have fun, Sam!"),
                thread=post,
            ),
            Post.objects.create(
                user=sam, postable=Status(text="Ya ya ya! Are you in town?"), thread=post
            ),
            Post.objects.create(
                user=adam, postable=Status(text="Yups! Let's explore the city!"), thread=post
            ),
            Post.objects.create(
                user=sam,
                postable=Sight(place=hotel, activity_type=ActivityType.CHECKIN.value),
                thread=post,
            ),
        ]

        assert list(sam.followers) == [adam]
        assert list(adam.followers) == [sam]
        assert list(sam.followings) == [adam]

        assert Post.objects.count() == 5
        assert Status.objects.count() == 4
        assert Sight.objects.count() == 1

        for reply in replies:
            reply.refresh_from_db()
            assert reply.thread_id == post.pk
            assert reply.root == post

        check_in = replies[-1]
        assert check_in.postable_type == PostableType.SIGHT.value
        assert check_in.sight.place == hotel
        assert check_in.summary() == "Checked in at Hotel Majapahit"
        assert set(post.replies.all()) == set(replies)

    def test_private_account_flow(self, sam, adam):
        """Test request, accept and timeline for a private account."""
        adam.is_public = False
        adam.save()

        bond_service.follow(sam, adam)
        assert list(sam.follow_requests) == [adam]
        assert list(post_service.timeline_for(sam)) == []

        adams_post = post_service.create_status(adam, "Just landed")
        assert adam.can_view(sam) is False

        bond_service.accept(adam, sam)

        assert adam.can_view(sam) is True
        assert list(sam.followings) == [adam]
        assert list(post_service.timeline_for(sam)) == [adams_post]
