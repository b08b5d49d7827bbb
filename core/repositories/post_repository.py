"""Repository for post queries."""

from django.db.models import Q, QuerySet

from core.enums import BondState
from core.models import Bond, Post, User


class PostRepository:
    """Repository for encapsulating post database queries."""

    @staticmethod
    def _with_payloads(queryset: QuerySet[Post]) -> QuerySet[Post]:
        return queryset.select_related("user", "status", "sight__place", "thread")

    @staticmethod
    def by_author(author: User) -> QuerySet[Post]:
        """Posts written by ``author``, newest first."""
        return PostRepository._with_payloads(Post.objects.filter(user=author))

    @staticmethod
    def timeline(user: User) -> QuerySet[Post]:
        """Posts by ``user`` and by everyone ``user`` follows, newest first."""
        followed_ids = Bond.objects.filter(
            user=user, state=BondState.FOLLOWING.value
        ).values("friend_id")
        return PostRepository._with_payloads(
            Post.objects.filter(Q(user=user) | Q(user_id__in=followed_ids))
        )

    @staticmethod
    def replies_to(post: Post) -> QuerySet[Post]:
        """Direct replies to ``post``, oldest first."""
        return PostRepository._with_payloads(
            Post.objects.filter(thread=post).order_by("created_at", "id")
        )
