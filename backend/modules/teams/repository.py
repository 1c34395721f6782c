"""
Team repository for database access.

Encapsulates all Supabase queries and data mapping for team tables:
- teams
- team_members
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Membership, Team, TeamRole


class TeamRepository(BaseRepository[Team]):
    """
    Repository for team and membership data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying roles.
    """

    # -------------------------------------------------------------------------
    # Team operations
    # -------------------------------------------------------------------------

    def create_team(self, name: str, owner_id: str) -> Team:
        """Insert a team row and return it."""
        result = self._execute(
            self._db.table("teams").insert({"name": name, "owner_id": owner_id})
        )
        return self._map_to_team(result.data[0])

    def delete_team(self, team_id: str) -> None:
        """
        Delete a team.

        Note: memberships and shelf entries are deleted via CASCADE.
        """
        self._execute(self._db.table("teams").delete().eq("id", team_id))

    def get_team(self, team_id: str) -> Optional[Team]:
        result = self._execute(
            self._db.table("teams").select("*").eq("id", team_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_team(result.data[0])

    def get_teams(self, team_ids: list[str]) -> list[Team]:
        """Load several teams by ID. Missing IDs are skipped."""
        if not team_ids:
            return []
        result = self._execute(
            self._db.table("teams").select("*").in_("id", team_ids)
        )
        return [self._map_to_team(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Membership operations
    # -------------------------------------------------------------------------

    def create_membership(self, team_id: str, user_id: str, role: TeamRole) -> Membership:
        """
        Insert a membership.

        Raises:
            ConflictError: The (team_id, user_id) pair already exists.
        """
        result = self._execute(
            self._db.table("team_members").insert(
                {"team_id": team_id, "user_id": user_id, "role": role.value}
            )
        )
        return self._map_to_membership(result.data[0])

    def get_membership(self, membership_id: str) -> Optional[Membership]:
        result = self._execute(
            self._db.table("team_members").select("*").eq("id", membership_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_membership(result.data[0])

    def find_membership(self, team_id: str, user_id: str) -> Optional[Membership]:
        """Get the membership for a (team, user) pair, if any."""
        result = self._execute(
            self._db.table("team_members")
            .select("*")
            .eq("team_id", team_id)
            .eq("user_id", user_id)
            .limit(1)
        )
        if not result.data:
            return None
        return self._map_to_membership(result.data[0])

    def list_user_memberships(self, user_id: str) -> list[Membership]:
        result = self._execute(
            self._db.table("team_members").select("*").eq("user_id", user_id)
        )
        return [self._map_to_membership(row) for row in result.data]

    def list_team_memberships(self, team_id: str) -> list[Membership]:
        result = self._execute(
            self._db.table("team_members").select("*").eq("team_id", team_id)
        )
        return [self._map_to_membership(row) for row in result.data]

    def update_role(self, membership_id: str, role: TeamRole) -> None:
        self._execute(
            self._db.table("team_members")
            .update({"role": role.value})
            .eq("id", membership_id)
        )

    def delete_membership(self, membership_id: str) -> None:
        self._execute(
            self._db.table("team_members").delete().eq("id", membership_id)
        )

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_team(self, data: dict[str, Any]) -> Team:
        """Map database row to Team model."""
        return Team(
            id=str(data["id"]),
            name=data["name"],
            owner_id=str(data["owner_id"]),
            created_at=data.get("created_at"),
        )

    def _map_to_membership(self, data: dict[str, Any]) -> Membership:
        """Map database row to Membership model."""
        return Membership(
            id=str(data["id"]),
            team_id=str(data["team_id"]),
            user_id=str(data["user_id"]),
            role=TeamRole(data["role"]),
        )
