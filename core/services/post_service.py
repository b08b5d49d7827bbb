"""Service for writing and reading posts."""

from django.core.exceptions import PermissionDenied
from django.db.models import QuerySet

import structlog

from core.enums import ActivityType
from core.models import Place, Post, Sight, Status, User
from core.repositories import PostRepository

logger = structlog.get_logger(__name__)


class PostService:
    """Service for status updates, check-ins, replies and timelines."""

    def create_status(self, user: User, text: str, thread: Post | None = None) -> Post:
        """Post a text status, optionally as a reply to ``thread``."""
        post = Post.objects.create(user=user, postable=Status(text=text), thread=thread)
        logger.info(
            "post_created",
            post_id=post.pk,
            user_id=user.pk,
            postable_type=post.postable_type,
            thread_id=post.thread_id,
        )
        return post

    def check_in(
        self,
        user: User,
        place: Place,
        activity_type: ActivityType = ActivityType.CHECKIN,
        thread: Post | None = None,
    ) -> Post:
        """Post a sight of ``user`` at ``place``."""
        post = Post.objects.create(
            user=user,
            postable=Sight(place=place, activity_type=activity_type.value),
            thread=thread,
        )
        logger.info(
            "post_created",
            post_id=post.pk,
            user_id=user.pk,
            postable_type=post.postable_type,
            place_id=place.pk,
            thread_id=post.thread_id,
        )
        return post

    def reply(self, user: User, parent: Post, text: str) -> Post:
        """Reply to ``parent`` with a text status."""
        return self.create_status(user, text, thread=parent)

    def replies_to(self, post: Post) -> QuerySet[Post]:
        """Direct replies to ``post`` in the order they were written."""
        return PostRepository.replies_to(post)

    def timeline_for(self, user: User) -> QuerySet[Post]:
        """Posts by ``user`` and the users they follow, newest first."""
        return PostRepository.timeline(user)

    def posts_visible_to(self, viewer: User | None, author: User) -> QuerySet[Post]:
        """Posts of ``author`` if ``viewer`` is allowed to see them.

        Raises:
            PermissionDenied: If ``author`` is private and ``viewer`` does
                not follow them.
        """
        if not author.can_view(viewer):
            logger.warning(
                "posts_hidden_from_viewer",
                author_id=author.pk,
                viewer_id=viewer.pk if viewer else None,
            )
            raise PermissionDenied(f"User {author.username} is private")
        return PostRepository.by_author(author)


post_service = PostService()
