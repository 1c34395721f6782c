"""
Teams module data models.

Teams, memberships and the roles that gate every team-scoped operation.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class TeamRole(str, Enum):
    """Membership role, highest privilege first."""

    ADMIN = "admin"      # Manages roster and roles
    EDITOR = "editor"
    VIEWER = "viewer"    # Starting role for invitees


# Sort rank for rosters
ROLE_RANK = {
    TeamRole.ADMIN: 0,
    TeamRole.EDITOR: 1,
    TeamRole.VIEWER: 2,
}


class Team(BaseModel):
    """A named group owning a shelf and a roster."""

    id: str
    name: str
    # Informational only; rights come from the membership role
    owner_id: str
    created_at: Optional[datetime] = None


class Membership(BaseModel):
    """A (team, user) pairing with a role. Unique per pair."""

    id: str
    team_id: str
    user_id: str
    role: TeamRole

    @property
    def is_admin(self) -> bool:
        return self.role == TeamRole.ADMIN


class TeamMember(BaseModel):
    """Roster row: a membership joined with the member's email."""

    membership_id: str
    user_id: str
    email: Optional[str] = None
    role: TeamRole


class CreateTeamRequest(BaseModel):
    """Request to create a team."""

    name: str = Field(..., max_length=200, description="Team display name")


class ChangeRoleRequest(BaseModel):
    """Request to change a member's role."""

    role: str = Field(..., description="One of: admin, editor, viewer")
