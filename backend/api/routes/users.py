"""
User-related endpoints.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr

from shared.models import AuthenticatedUser
from modules.teams import ITeamService, TeamRole
from ..dependencies import get_team_service
from ..middleware.auth import get_current_user

router = APIRouter()


class TeamRoleSummary(BaseModel):
    """One team the caller belongs to, with their role in it."""

    team_id: str
    team_name: str
    role: TeamRole


class UserProfileResponse(BaseModel):
    """The caller's identity and team roles."""

    id: str
    email: EmailStr
    email_verified: bool
    teams: list[TeamRoleSummary]


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    teams: ITeamService = Depends(get_team_service),
) -> UserProfileResponse:
    """
    Get the current user's profile and the teams they belong to.

    Teams are ordered by name. Requires authentication.
    """
    memberships = await teams.list_memberships(user)
    names = await teams.lookup_teams([m.team_id for m in memberships])

    summaries = [
        TeamRoleSummary(team_id=m.team_id, team_name=names[m.team_id].name, role=m.role)
        for m in memberships
        if m.team_id in names
    ]
    summaries.sort(key=lambda s: (s.team_name.lower(), s.team_id))

    return UserProfileResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        teams=summaries,
    )
