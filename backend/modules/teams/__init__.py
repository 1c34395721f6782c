"""
Teams module.

The membership store: teams, memberships and roles.

Public API:
- ITeamService: Interface for team operations
- Team, Membership, TeamMember, TeamRole: Data models
- Team exceptions
"""

from .interfaces import ITeamService
from .models import Team, Membership, TeamMember, TeamRole
from .exceptions import (
    TeamNotFoundError,
    MembershipNotFoundError,
    NotTeamMemberError,
    NotTeamAdminError,
    InvalidTeamNameError,
    InvalidRoleError,
    SelfMembershipChangeError,
    AlreadyMemberError,
)

__all__ = [
    "ITeamService",
    "Team",
    "Membership",
    "TeamMember",
    "TeamRole",
    "TeamNotFoundError",
    "MembershipNotFoundError",
    "NotTeamMemberError",
    "NotTeamAdminError",
    "InvalidTeamNameError",
    "InvalidRoleError",
    "SelfMembershipChangeError",
    "AlreadyMemberError",
]
