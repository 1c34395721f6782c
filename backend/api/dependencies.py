"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

A container wraps one store client. The API builds a fresh container per
request; tests build one around a fake client and override get_container.
"""

from typing import TYPE_CHECKING, Iterator

from fastapi import Depends
from supabase import Client

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.teams.interfaces import ITeamService
    from modules.shelf.interfaces import IShelfService
    from modules.preferences.interfaces import IPreferenceService
    from modules.invites.interfaces import IInviteService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the container.
    """

    def __init__(self, db: Client, settings: Settings) -> None:
        self._db = db
        self._settings = settings
        self._auth_service: "IAuthService | None" = None
        self._team_service: "ITeamService | None" = None
        self._shelf_service: "IShelfService | None" = None
        self._preference_service: "IPreferenceService | None" = None
        self._invite_service: "IInviteService | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.repository import UserDirectoryRepository
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                self._settings, UserDirectoryRepository(self._db)
            )
        return self._auth_service

    @property
    def teams(self) -> "ITeamService":
        """Get the team service instance."""
        if self._team_service is None:
            from modules.teams.repository import TeamRepository
            from modules.teams.service import TeamService
            self._team_service = TeamService(TeamRepository(self._db), self.auth)
        return self._team_service

    @property
    def shelf(self) -> "IShelfService":
        """Get the shelf service instance."""
        if self._shelf_service is None:
            from modules.catalog.repository import CatalogRepository
            from modules.preferences.repository import PreferenceRepository
            from modules.shelf.repository import ShelfRepository
            from modules.shelf.service import ShelfService
            self._shelf_service = ShelfService(
                repository=ShelfRepository(self._db),
                catalog=CatalogRepository(self._db),
                preferences=PreferenceRepository(self._db),
                teams=self.teams,
            )
        return self._shelf_service

    @property
    def preferences(self) -> "IPreferenceService":
        """Get the preference service instance."""
        if self._preference_service is None:
            from modules.preferences.repository import PreferenceRepository
            from modules.preferences.service import PreferenceService
            self._preference_service = PreferenceService(
                repository=PreferenceRepository(self._db),
                shelf=self.shelf,
                teams=self.teams,
            )
        return self._preference_service

    @property
    def invites(self) -> "IInviteService":
        """Get the invite service instance."""
        if self._invite_service is None:
            from modules.invites.service import InviteService
            self._invite_service = InviteService(auth=self.auth, teams=self.teams)
        return self._invite_service


def get_container(settings: Settings = Depends(get_settings)) -> Iterator[ServiceContainer]:
    """
    FastAPI dependency building a container around a new store client.

    The client's HTTP session is closed once the response has been sent.
    """
    from shared.database import create_supabase_client
    db = create_supabase_client(settings)
    try:
        yield ServiceContainer(db, settings)
    finally:
        db.postgrest.session.close()


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_team_service(container: ServiceContainer = Depends(get_container)) -> "ITeamService":
    """FastAPI dependency for team service."""
    return container.teams


def get_shelf_service(container: ServiceContainer = Depends(get_container)) -> "IShelfService":
    """FastAPI dependency for shelf service."""
    return container.shelf


def get_preference_service(
    container: ServiceContainer = Depends(get_container),
) -> "IPreferenceService":
    """FastAPI dependency for preference service."""
    return container.preferences


def get_invite_service(container: ServiceContainer = Depends(get_container)) -> "IInviteService":
    """FastAPI dependency for invite service."""
    return container.invites
