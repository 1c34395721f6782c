"""
Invites module interface.

The admission protocol is the only way a user other than a team's creator
becomes a member.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import InviteResult


@runtime_checkable
class IInviteService(Protocol):
    """
    Interface for the invite admission protocol.
    """

    async def admit(self, credential: Optional[str], payload: Any) -> InviteResult:
        """
        Admit the user with the given email to a team as a viewer.

        Steps run once each and in order: authenticate the caller, check the
        caller is an admin of the team, resolve the invitee, insert the
        membership.

        Args:
            credential: Bearer token of the caller
            payload: Raw request body with ``team_id`` and ``email``

        Raises:
            AuthenticationError: If the credential is missing or invalid
            ValidationError: If the payload is malformed
            AuthorizationError: If the caller is not an admin of the team
            NotFoundError: If no identity has the email
            ConflictError: If the invitee is already a member
        """
        ...
