"""
Teams module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class TeamNotFoundError(NotFoundError):
    """Raised when a team is not found."""

    def __init__(self, team_id: str):
        super().__init__(
            f"Team not found: {team_id}",
            code="TEAM_NOT_FOUND",
            details={"team_id": team_id},
        )


class MembershipNotFoundError(NotFoundError):
    """Raised when a membership is not found."""

    def __init__(self, membership_id: str):
        super().__init__(
            f"Membership not found: {membership_id}",
            code="MEMBERSHIP_NOT_FOUND",
            details={"membership_id": membership_id},
        )


class NotTeamMemberError(AuthorizationError):
    """Raised when a user acts on a team they don't belong to."""

    def __init__(self, team_id: str, user_id: str):
        super().__init__(
            f"Not a member of team: {team_id}",
            code="NOT_TEAM_MEMBER",
            details={"team_id": team_id, "user_id": user_id},
        )


class NotTeamAdminError(AuthorizationError):
    """Raised when a non-admin attempts an admin-only action."""

    def __init__(self, team_id: str, user_id: str):
        super().__init__(
            "You must be an admin to manage members of this team.",
            code="NOT_TEAM_ADMIN",
            details={"team_id": team_id, "user_id": user_id},
        )


class InvalidTeamNameError(ValidationError):
    """Raised when a team name is empty or whitespace."""

    def __init__(self) -> None:
        super().__init__("Team name must not be empty", code="INVALID_TEAM_NAME")


class InvalidRoleError(ValidationError):
    """Raised for a role name outside admin/editor/viewer."""

    def __init__(self, role: str):
        super().__init__(
            f"Unknown role: {role}",
            code="INVALID_ROLE",
            details={"role": role},
        )


class SelfMembershipChangeError(ValidationError):
    """Raised when an admin tries to demote or remove their own membership."""

    def __init__(self, membership_id: str):
        super().__init__(
            "You cannot change or remove your own membership.",
            code="SELF_MEMBERSHIP_CHANGE",
            details={"membership_id": membership_id},
        )


class AlreadyMemberError(ConflictError):
    """Raised when a (team, user) membership already exists."""

    def __init__(self, team_id: str, user_id: str):
        super().__init__(
            "User is already a member of this team.",
            code="ALREADY_MEMBER",
            details={"team_id": team_id, "user_id": user_id},
        )
