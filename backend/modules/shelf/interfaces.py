"""
Shelf module interface.

The shelf composer merges catalog references and custom entries into one
team-scoped list. The preferences module and the API layer depend on
IShelfService.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    AddCustomEntryRequest,
    CatalogItem,
    ResolvedTool,
    ShelfEntry,
)


@runtime_checkable
class IShelfService(Protocol):
    """
    Interface for shelf operations.
    """

    async def browse_catalog(
        self,
        query: Optional[str] = None,
        team_id: Optional[str] = None,
        acting_user: Optional[AuthenticatedUser] = None,
    ) -> list[CatalogItem]:
        """
        Search the master catalog.

        Case-insensitive substring match on title and description; an empty
        query returns everything. With a team, each item says whether that
        tool is already on the team's shelf.

        Raises:
            AuthorizationError: If a team is given and the user is not a member
        """
        ...

    async def add_catalog_entry(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
        master_tool_id: str,
    ) -> ShelfEntry:
        """
        Put a catalog tool on a team's shelf.

        Raises:
            AuthorizationError: If the user is not a member of the team
            NotFoundError: If the catalog tool does not exist
            ConflictError: If the tool is already on the shelf
        """
        ...

    async def add_custom_entry(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
        fields: AddCustomEntryRequest,
    ) -> ShelfEntry:
        """
        Add a custom entry to a team's shelf. No deduplication.

        Raises:
            AuthorizationError: If the user is not a member of the team
            ValidationError: If title or external link is empty
        """
        ...

    async def list_shelf(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
        query: Optional[str] = None,
    ) -> list[ResolvedTool]:
        """
        The team's shelf as seen by the acting user.

        Pinned entries first, then by case-insensitive title, then by ID.

        Raises:
            AuthorizationError: If the user is not a member of the team
        """
        ...

    async def get_entry(self, entry_id: str) -> ShelfEntry:
        """
        Get an entry without authorization.

        Raises:
            NotFoundError: If the entry does not exist
        """
        ...

    async def get_entries(self, entry_ids: list[str]) -> list[ShelfEntry]:
        """Load several entries; missing ones are skipped."""
        ...

    async def resolve_entries(self, entries: list[ShelfEntry]) -> list[ResolvedTool]:
        """
        Resolve display fields and team names, without preference state.

        Order follows the input.
        """
        ...
