"""
Teams module interface.

The membership store. Every other module authorizes through
ITeamService.require_membership; the API layer depends on ITeamService for
roster management.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Membership, Team, TeamMember, TeamRole


@runtime_checkable
class ITeamService(Protocol):
    """
    Interface for team and membership operations.
    """

    async def create_team(self, name: str, creator: AuthenticatedUser) -> Team:
        """
        Create a team and make the creator its admin.

        The team and the admin membership are written as one unit: if the
        membership cannot be written the team is removed again.

        Raises:
            ValidationError: If the name is empty or whitespace
        """
        ...

    async def list_teams(self, user: AuthenticatedUser) -> list[Team]:
        """Teams where the user holds any membership."""
        ...

    async def list_memberships(self, user: AuthenticatedUser) -> list[Membership]:
        """The user's own memberships, one per team."""
        ...

    async def get_team(self, acting_user: AuthenticatedUser, team_id: str) -> Team:
        """
        Get a team the user belongs to.

        Raises:
            AuthorizationError: If the user is not a member
            NotFoundError: If the team does not exist
        """
        ...

    async def list_members(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
    ) -> list[TeamMember]:
        """
        The team roster with member emails.

        Raises:
            AuthorizationError: If the user is not a member
        """
        ...

    async def change_role(
        self,
        acting_user: AuthenticatedUser,
        membership_id: str,
        new_role: str,
    ) -> None:
        """
        Overwrite a member's role.

        Raises:
            NotFoundError: If the membership does not exist
            AuthorizationError: Unless the acting user is admin of the team
            ValidationError: For an unknown role or a change to one's own role
        """
        ...

    async def remove_member(
        self,
        acting_user: AuthenticatedUser,
        membership_id: str,
    ) -> None:
        """
        Delete a membership.

        Raises:
            NotFoundError: If the membership does not exist
            AuthorizationError: Unless the acting user is admin of the team
            ValidationError: When removing one's own membership
        """
        ...

    async def require_membership(self, user_id: str, team_id: str) -> Membership:
        """
        Get the user's membership of a team.

        Raises:
            AuthorizationError: If there is none
        """
        ...

    async def require_admin(self, user_id: str, team_id: str) -> Membership:
        """
        Get the user's membership of a team, which must have the admin role.

        Raises:
            AuthorizationError: If there is none or the role is not admin
        """
        ...

    async def add_member(
        self,
        team_id: str,
        user_id: str,
        role: TeamRole = TeamRole.VIEWER,
    ) -> Membership:
        """
        Insert a membership without any authorization check.

        Callers (the invite protocol) authorize first.

        Raises:
            ConflictError: If the user is already a member
        """
        ...

    async def lookup_teams(self, team_ids: list[str]) -> dict[str, Team]:
        """
        Batch team lookup keyed by ID, without authorization.

        Used to resolve team names for read models.
        """
        ...
