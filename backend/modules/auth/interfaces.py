"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and keeps the identity provider swappable.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and email

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get an identity by ID.

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        """
        Get an identity by email (trimmed, case-insensitive).

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def get_users_by_ids(self, user_ids: list[str]) -> dict[str, UserProfile]:
        """
        Batch lookup of identities, keyed by user ID.

        Unknown IDs are absent from the result.
        """
        ...
