"""Custom exceptions for social graph operations.

Field-level validation problems are reported through Django's
``ValidationError``; the exceptions here cover operations on records that
are valid on their own but can not be carried out.
"""


class SocialGraphError(Exception):
    """Base exception for social graph errors."""

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize social graph error.

        Args:
            message: Error message
            status_code: HTTP status code a caller may map this error to
        """
        self.status_code = status_code
        super().__init__(message)


class UserNotFoundError(SocialGraphError):
    """User does not exist (404)."""

    def __init__(self, identifier: str):
        """Initialize user not found error.

        Args:
            identifier: ID or username that was looked up
        """
        self.identifier = identifier
        super().__init__(
            message=f"User {identifier} not found",
            status_code=404,
        )


class BondNotFoundError(SocialGraphError):
    """No bond exists between the two users (404)."""

    def __init__(self, user_id: int, friend_id: int):
        """Initialize bond not found error.

        Args:
            user_id: ID of the user owning the bond
            friend_id: ID of the user the bond points at
        """
        self.user_id = user_id
        self.friend_id = friend_id
        super().__init__(
            message=f"No bond from user {user_id} to user {friend_id}",
            status_code=404,
        )


class SelfBondError(SocialGraphError):
    """A user tried to follow themselves (400)."""

    def __init__(self, user_id: int):
        """Initialize self bond error.

        Args:
            user_id: ID of the user
        """
        self.user_id = user_id
        super().__init__(
            message=f"User {user_id} can not follow themselves",
            status_code=400,
        )


class InvalidBondTransitionError(SocialGraphError):
    """Bond state change that is not allowed (409)."""

    def __init__(self, current_state: str, target_state: str):
        """Initialize invalid transition error.

        Args:
            current_state: State the bond is in
            target_state: State that was requested
        """
        self.current_state = current_state
        self.target_state = target_state
        super().__init__(
            message=f"Bond can not move from {current_state} to {target_state}",
            status_code=409,
        )


class ConflictError(SocialGraphError):
    """Conflict error for operations that cannot be performed (409)."""

    def __init__(self, message: str, detail: str | None = None):
        """Initialize conflict error.

        Args:
            message: Error message
            detail: Additional details about the conflict
        """
        self.detail = detail
        super().__init__(message=message, status_code=409)
