"""
Invites module.

Admission of users into teams by email, gated on the caller's admin role.

Public API:
- IInviteService: Interface for the admission protocol
- InviteRequest, InviteResult: Data models
- Invite exceptions
"""

from .interfaces import IInviteService
from .models import InviteRequest, InviteResult
from .exceptions import InviteeNotFoundError, InvalidInviteRequestError

__all__ = [
    "IInviteService",
    "InviteRequest",
    "InviteResult",
    "InviteeNotFoundError",
    "InvalidInviteRequestError",
]
