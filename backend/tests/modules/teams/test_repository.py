"""Tests for teams repository."""

import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from shared.exceptions import ConflictError
from modules.teams.models import TeamRole
from modules.teams.repository import TeamRepository


def create_mock_team_data(team_id: str = "team-123", name: str = "Infra") -> dict:
    """Helper to create mock team data."""
    return {
        "id": team_id,
        "name": name,
        "owner_id": "user-123",
        "created_at": "2024-05-01T12:00:00+00:00",
    }


def create_mock_membership_data(
    membership_id: str = "member-1",
    team_id: str = "team-123",
    user_id: str = "user-123",
    role: str = "admin",
) -> dict:
    """Helper to create mock membership data."""
    return {"id": membership_id, "team_id": team_id, "user_id": user_id, "role": role}


class TestTeamRepositoryTeams:
    def test_create_team(self):
        """Should insert a team and return mapped model."""
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_team_data()
        ]

        team = repo.create_team("Infra", "user-123")

        assert team.id == "team-123"
        assert team.name == "Infra"
        assert team.owner_id == "user-123"
        mock_db.table.assert_called_with("teams")
        mock_db.table.return_value.insert.assert_called_once_with(
            {"name": "Infra", "owner_id": "user-123"}
        )

    def test_get_team_not_found(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)
        mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value.execute.return_value.data = []

        assert repo.get_team("missing") is None

    def test_get_teams_with_no_ids_skips_query(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)

        assert repo.get_teams([]) == []
        mock_db.table.assert_not_called()

    def test_get_teams(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)
        mock_db.table.return_value.select.return_value.in_.return_value.execute.return_value.data = [
            create_mock_team_data("t1", "One"),
            create_mock_team_data("t2", "Two"),
        ]

        teams = repo.get_teams(["t1", "t2"])

        assert [t.id for t in teams] == ["t1", "t2"]
        mock_db.table.return_value.select.return_value.in_.assert_called_once_with("id", ["t1", "t2"])


class TestTeamRepositoryMemberships:
    def test_create_membership(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_membership_data(role="viewer")
        ]

        membership = repo.create_membership("team-123", "user-123", TeamRole.VIEWER)

        assert membership.role == TeamRole.VIEWER
        mock_db.table.return_value.insert.assert_called_once_with(
            {"team_id": "team-123", "user_id": "user-123", "role": "viewer"}
        )

    def test_create_duplicate_membership_raises_conflict(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key", "details": None, "hint": None}
        )

        with pytest.raises(ConflictError):
            repo.create_membership("team-123", "user-123", TeamRole.VIEWER)

    def test_find_membership(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [create_mock_membership_data()]

        membership = repo.find_membership("team-123", "user-123")

        assert membership.is_admin
        mock_db.table.assert_called_with("team_members")

    def test_update_role(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)

        repo.update_role("member-1", TeamRole.EDITOR)

        mock_db.table.return_value.update.assert_called_once_with({"role": "editor"})
        mock_db.table.return_value.update.return_value.eq.assert_called_once_with("id", "member-1")

    def test_delete_membership(self):
        mock_db = MagicMock()
        repo = TeamRepository(mock_db)

        repo.delete_membership("member-1")

        mock_db.table.return_value.delete.return_value.eq.assert_called_once_with("id", "member-1")
