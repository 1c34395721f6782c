"""
Team API endpoints.

Team creation, listing and roster management. Domain errors propagate to
the application's exception handlers.
"""

from fastapi import APIRouter, Depends, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_team_service
from shared.models import AuthenticatedUser

from .interfaces import ITeamService
from .models import ChangeRoleRequest, CreateTeamRequest, Team, TeamMember

router = APIRouter()


@router.post("", response_model=Team, status_code=201)
async def create_team(
    request: CreateTeamRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITeamService = Depends(get_team_service),
) -> Team:
    """
    Create a team. The caller becomes its admin.
    """
    return await service.create_team(request.name, user)


@router.get("", response_model=list[Team])
async def list_teams(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITeamService = Depends(get_team_service),
) -> list[Team]:
    """
    List the teams the caller belongs to, by name.
    """
    return await service.list_teams(user)


@router.patch("/members/{membership_id}", status_code=204)
async def change_member_role(
    membership_id: str,
    request: ChangeRoleRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITeamService = Depends(get_team_service),
) -> Response:
    """
    Change a member's role. Admins only, and never on your own membership.
    """
    await service.change_role(user, membership_id, request.role)
    return Response(status_code=204)


@router.delete("/members/{membership_id}", status_code=204)
async def remove_member(
    membership_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITeamService = Depends(get_team_service),
) -> Response:
    """
    Remove a member from a team. Admins only, and never yourself.
    """
    await service.remove_member(user, membership_id)
    return Response(status_code=204)


@router.get("/{team_id}", response_model=Team)
async def get_team(
    team_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITeamService = Depends(get_team_service),
) -> Team:
    return await service.get_team(user, team_id)


@router.get("/{team_id}/members", response_model=list[TeamMember])
async def list_members(
    team_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITeamService = Depends(get_team_service),
) -> list[TeamMember]:
    """
    The team's roster: admins first, then editors, then viewers.
    """
    return await service.list_members(user, team_id)
