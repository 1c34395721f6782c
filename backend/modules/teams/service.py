"""
Team service implementation.

Owns the membership rules: who may see a team, who may manage its roster,
and the admin-on-create invariant.
"""

import logging

from shared.exceptions import ConflictError
from shared.models import AuthenticatedUser

from modules.auth.interfaces import IAuthService

from .interfaces import ITeamService
from .models import ROLE_RANK, Membership, Team, TeamMember, TeamRole
from .repository import TeamRepository
from .exceptions import (
    AlreadyMemberError,
    InvalidRoleError,
    InvalidTeamNameError,
    MembershipNotFoundError,
    NotTeamAdminError,
    NotTeamMemberError,
    SelfMembershipChangeError,
    TeamNotFoundError,
)

logger = logging.getLogger(__name__)


class TeamService(ITeamService):
    """
    Team service with Supabase backend.

    Role is the sole source of authority. ``Team.owner_id`` is recorded
    at creation and never consulted for permissions.
    """

    def __init__(self, repository: TeamRepository, auth: IAuthService):
        self._repo = repository
        self._auth = auth

    async def create_team(self, name: str, creator: AuthenticatedUser) -> Team:
        """Create a team and its admin membership, undoing the team on failure."""
        clean_name = (name or "").strip()
        if not clean_name:
            raise InvalidTeamNameError()

        team = self._repo.create_team(clean_name, creator.id)
        try:
            self._repo.create_membership(team.id, creator.id, TeamRole.ADMIN)
        except Exception:
            logger.warning(
                "Admin membership insert failed for team %s; removing team", team.id
            )
            try:
                self._repo.delete_team(team.id)
            except Exception:
                logger.exception("Could not remove team %s without an admin", team.id)
            # Re-raises the membership failure, not the cleanup one.
            raise

        logger.info("Team %s created by %s", team.id, creator.id)
        return team

    async def list_teams(self, user: AuthenticatedUser) -> list[Team]:
        memberships = self._repo.list_user_memberships(user.id)
        team_ids = sorted({m.team_id for m in memberships})
        teams = self._repo.get_teams(team_ids)
        return sorted(teams, key=lambda t: (t.name.lower(), t.id))

    async def list_memberships(self, user: AuthenticatedUser) -> list[Membership]:
        return self._repo.list_user_memberships(user.id)

    async def get_team(self, acting_user: AuthenticatedUser, team_id: str) -> Team:
        await self.require_membership(acting_user.id, team_id)
        team = self._repo.get_team(team_id)
        if team is None:
            raise TeamNotFoundError(team_id)
        return team

    async def list_members(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
    ) -> list[TeamMember]:
        await self.require_membership(acting_user.id, team_id)
        memberships = self._repo.list_team_memberships(team_id)
        profiles = await self._auth.get_users_by_ids([m.user_id for m in memberships])

        members = [
            TeamMember(
                membership_id=m.id,
                user_id=m.user_id,
                email=profiles[m.user_id].email if m.user_id in profiles else None,
                role=m.role,
            )
            for m in memberships
        ]
        return sorted(
            members,
            key=lambda m: (ROLE_RANK[m.role], (m.email or "").lower(), m.membership_id),
        )

    async def change_role(
        self,
        acting_user: AuthenticatedUser,
        membership_id: str,
        new_role: str,
    ) -> None:
        target = await self._get_managed_membership(acting_user, membership_id)

        try:
            role = TeamRole(new_role)
        except ValueError:
            raise InvalidRoleError(str(new_role))

        self._repo.update_role(target.id, role)
        logger.info(
            "Membership %s in team %s set to %s by %s",
            target.id, target.team_id, role.value, acting_user.id,
        )

    async def remove_member(
        self,
        acting_user: AuthenticatedUser,
        membership_id: str,
    ) -> None:
        target = await self._get_managed_membership(acting_user, membership_id)
        self._repo.delete_membership(target.id)
        logger.info(
            "Membership %s removed from team %s by %s",
            target.id, target.team_id, acting_user.id,
        )

    async def require_membership(self, user_id: str, team_id: str) -> Membership:
        membership = self._repo.find_membership(team_id, user_id)
        if membership is None:
            raise NotTeamMemberError(team_id, user_id)
        return membership

    async def require_admin(self, user_id: str, team_id: str) -> Membership:
        membership = self._repo.find_membership(team_id, user_id)
        if membership is None or not membership.is_admin:
            raise NotTeamAdminError(team_id, user_id)
        return membership

    async def add_member(
        self,
        team_id: str,
        user_id: str,
        role: TeamRole = TeamRole.VIEWER,
    ) -> Membership:
        try:
            return self._repo.create_membership(team_id, user_id, role)
        except ConflictError as e:
            raise AlreadyMemberError(team_id, user_id) from e

    async def lookup_teams(self, team_ids: list[str]) -> dict[str, Team]:
        teams = self._repo.get_teams(sorted(set(team_ids)))
        return {t.id: t for t in teams}

    async def _get_managed_membership(
        self,
        acting_user: AuthenticatedUser,
        membership_id: str,
    ) -> Membership:
        """Load a membership the acting user may manage as an admin."""
        target = self._repo.get_membership(membership_id)
        if target is None:
            raise MembershipNotFoundError(membership_id)

        await self.require_admin(acting_user.id, target.team_id)

        if target.user_id == acting_user.id:
            raise SelfMembershipChangeError(membership_id)
        return target
