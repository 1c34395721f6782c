"""
Invites module exceptions.
"""

from typing import Optional

from shared.exceptions import NotFoundError, ValidationError


class InviteeNotFoundError(NotFoundError):
    """Raised when the invited email has no identity."""

    def __init__(self, email: str):
        super().__init__(
            "User with that email does not exist.",
            code="INVITEE_NOT_FOUND",
            details={"email": email},
        )


class InvalidInviteRequestError(ValidationError):
    """Raised for a missing team ID or an unusable email."""

    def __init__(self, reason: str, fields: Optional[list[str]] = None):
        super().__init__(
            f"Invalid invite request: {reason}",
            code="INVALID_INVITE_REQUEST",
            details={"fields": fields or []},
        )
